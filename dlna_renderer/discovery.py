import logging
import socket
from typing import List

import upnpclient

from .device import DeviceDescriptor

logger = logging.getLogger(__name__)

MEDIA_RENDERER_DEVICE_TYPE = 'urn:schemas-upnp-org:device:MediaRenderer'
DEFAULT_DISCOVERY_TIMEOUT = 5


def discover_renderers(timeout: int = DEFAULT_DISCOVERY_TIMEOUT) -> List[DeviceDescriptor]:
    """
    Discover media renderers on the network.

    Args:
        timeout: Seconds to wait for SSDP responses

    Returns:
        List of renderer descriptors, empty if discovery failed
    """
    try:
        devices = upnpclient.discover(timeout=timeout)
    except socket.error as e:
        logger.error(f"Network error during device discovery: {e}")
        return []
    except Exception as e:
        logger.error(f"Error during device discovery: {e}")
        return []

    renderers = [
        DeviceDescriptor.from_upnp_device(device)
        for device in devices
        if device.device_type.lower().startswith(MEDIA_RENDERER_DEVICE_TYPE.lower())
    ]
    logger.info(f"Found {len(renderers)} media renderers among {len(devices)} devices")
    return renderers
