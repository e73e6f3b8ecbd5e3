"""
Capability-validated bindings to services advertised by a renderer.
"""

import logging
from typing import Any, Dict, Optional

from .device import DeviceDescriptor, ServiceCapability
from .errors import CapabilityMissing, InvalidArgument
from .invoker import ActionArguments, ActionInvoker, ActionResult

logger = logging.getLogger(__name__)

# Renderers expose a single rendering stream; multi-instance sessions are not supported.
INSTANCE_ID = 0


def find_capability(descriptor: DeviceDescriptor, required_service_type_prefix: str) -> ServiceCapability:
    """
    Find the first service on a device whose type starts with the given prefix.

    Args:
        descriptor: The device to search
        required_service_type_prefix: Service type prefix, compared case-insensitively

    Returns:
        ServiceCapability: The first matching service

    Raises:
        InvalidArgument: if the descriptor is missing or the prefix is empty
        CapabilityMissing: if no advertised service matches
    """
    if descriptor is None:
        raise InvalidArgument("Device descriptor is required")
    if not required_service_type_prefix:
        raise InvalidArgument("Service type prefix must not be empty")

    capability = descriptor.find_service(required_service_type_prefix)
    if capability is None:
        logger.error(f"{required_service_type_prefix} not found on device {descriptor.id}")
        logger.debug(f"Available services: {[s.service_type for s in descriptor.services]}")
        raise CapabilityMissing(required_service_type_prefix)
    return capability


def _check_instance_id(instance_id: int):
    if isinstance(instance_id, bool) or not isinstance(instance_id, int) or instance_id < 0:
        raise InvalidArgument(f"InstanceID must be a non-negative integer, got {instance_id!r}")


class ServiceBinding:
    """
    A validated service on a device together with the invoker used to reach it.

    Subclasses set SERVICE_TYPE and add typed wrappers for the service's actions.
    """

    SERVICE_TYPE: Optional[str] = None

    def __init__(self, capability: ServiceCapability, invoker: ActionInvoker):
        self._capability = capability
        self._invoker = invoker

    @classmethod
    def bind(cls, descriptor: DeviceDescriptor, invoker: ActionInvoker):
        """
        Bind to the service of type SERVICE_TYPE advertised by a device.

        Raises:
            CapabilityMissing: if the device does not advertise the service
        """
        capability = find_capability(descriptor, cls.SERVICE_TYPE)
        logger.info(f"Bound {capability.service_type} on device {descriptor.friendly_name or descriptor.id}")
        return cls(capability, invoker)

    @property
    def capability(self) -> ServiceCapability:
        return self._capability

    @property
    def invoker(self) -> ActionInvoker:
        return self._invoker

    @property
    def service_type(self) -> str:
        return self._capability.service_type

    async def call(self, action_name: str, args: ActionArguments) -> ActionResult:
        """Invoke one action on the bound service. Failures propagate unchanged."""
        logger.debug(f"Sending {action_name} to {self.service_type}")
        return await self._invoker.invoke(self._capability.endpoint, action_name, args)


class AVTransportBinding(ServiceBinding):
    """Typed wrappers over the UPnP AVTransport actions."""

    SERVICE_TYPE = 'urn:schemas-upnp-org:service:AVTransport'

    async def set_transport_uri(self, instance_id: int, uri: str, metadata: str) -> None:
        """Set the URI the renderer will play, with its DIDL-Lite metadata."""
        _check_instance_id(instance_id)
        if not uri:
            raise InvalidArgument("CurrentURI must not be empty")
        await self.call('SetAVTransportURI', [
            ('InstanceID', instance_id),
            ('CurrentURI', uri),
            ('CurrentURIMetaData', metadata or ''),
        ])

    async def play(self, instance_id: int, speed: str) -> None:
        _check_instance_id(instance_id)
        await self.call('Play', [
            ('InstanceID', instance_id),
            ('Speed', speed),
        ])

    async def pause(self, instance_id: int) -> None:
        _check_instance_id(instance_id)
        await self.call('Pause', [('InstanceID', instance_id)])

    async def stop(self, instance_id: int) -> None:
        _check_instance_id(instance_id)
        await self.call('Stop', [('InstanceID', instance_id)])

    async def get_transport_info(self, instance_id: int) -> Dict[str, Any]:
        """
        Query the transport state reported by the renderer.

        Returns:
            dict: Output arguments, e.g. CurrentTransportState, CurrentTransportStatus, CurrentSpeed
        """
        _check_instance_id(instance_id)
        return dict(await self.call('GetTransportInfo', [('InstanceID', instance_id)]))

    async def get_position_info(self, instance_id: int) -> Dict[str, Any]:
        """
        Query the playback position reported by the renderer.

        Returns:
            dict: Output arguments, e.g. Track, TrackDuration, TrackURI, RelTime
        """
        _check_instance_id(instance_id)
        return dict(await self.call('GetPositionInfo', [('InstanceID', instance_id)]))
