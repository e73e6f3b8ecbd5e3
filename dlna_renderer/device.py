"""
Discovered devices and the services they advertise.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from upnpclient import Device as UPnPDevice
else:
    UPnPDevice = Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServiceCapability:
    """
    A service advertised by a device.

    Attributes:
        service_type: Service type URN, e.g. "urn:schemas-upnp-org:service:AVTransport:1"
        endpoint: Opaque handle the action invoker uses to reach the service
    """

    service_type: str
    endpoint: Any

    def matches(self, prefix: str) -> bool:
        """Case-insensitive prefix match, so version suffixes are tolerated."""
        return self.service_type.lower().startswith(prefix.lower())


@dataclass(frozen=True)
class DeviceDescriptor:
    """Identity and ordered service list of a discovered device."""

    id: str
    services: Tuple[ServiceCapability, ...]
    friendly_name: str = ''
    location: str = ''
    device_type: str = ''

    def __post_init__(self):
        object.__setattr__(self, 'services', tuple(self.services))

    @classmethod
    def from_upnp_device(cls, device: UPnPDevice) -> 'DeviceDescriptor':
        """
        Build a descriptor from an upnpclient device.

        The upnpclient service objects are kept as the capability endpoints.

        Args:
            device: A device returned by upnpclient.discover() or upnpclient.Device(location)

        Returns:
            DeviceDescriptor for the device
        """
        services = tuple(
            ServiceCapability(service.service_type, service)
            for service in device.services
        )
        location = getattr(device, 'location', '') or ''
        device_id = getattr(device, 'udn', '') or location
        descriptor = cls(
            id=device_id,
            services=services,
            friendly_name=getattr(device, 'friendly_name', '') or '',
            location=location,
            device_type=getattr(device, 'device_type', '') or '',
        )
        logger.debug(f"Device {descriptor.friendly_name or device_id} advertises "
                     f"{[s.service_type for s in services]}")
        return descriptor

    def find_service(self, prefix: str) -> Optional[ServiceCapability]:
        """Return the first advertised service matching the type prefix, or None."""
        return next((service for service in self.services if service.matches(prefix)), None)
