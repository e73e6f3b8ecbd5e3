import logging
from typing import Any, Dict, Optional

from .av_transport import INSTANCE_ID, AVTransportBinding
from .device import DeviceDescriptor
from .invoker import ActionInvoker, UpnpClientInvoker
from .resources import PlayableItem
from .selector import select_for_playback

logger = logging.getLogger(__name__)

NORMAL_PLAY_SPEED = '1'


class RendererController:
    """
    Controls playback on a media renderer through its AVTransport service.

    The controller keeps no transport state of its own; the renderer is the
    authority on whether it is playing, paused or stopped. Every call issues
    exactly one remote action, and faults are raised to the caller unchanged.
    """

    def __init__(self, binding: AVTransportBinding, device_id: str = ''):
        self._binding = binding
        self._device_id = device_id

    @property
    def binding(self) -> AVTransportBinding:
        return self._binding

    @property
    def device_id(self) -> str:
        return self._device_id

    async def open(self, item: PlayableItem) -> None:
        """
        Prepare an item for playback on the renderer.

        Args:
            item: The item to play; the rendition best suited to the renderer is sent
        """
        resource = select_for_playback(item)
        logger.info(f"Setting transport URI on {self._device_id}: {resource.uri}")
        await self._binding.set_transport_uri(INSTANCE_ID, resource.uri, resource.metadata)

    async def play(self) -> None:
        logger.info(f"Starting playback on {self._device_id}")
        await self._binding.play(INSTANCE_ID, NORMAL_PLAY_SPEED)

    async def pause(self) -> None:
        logger.info(f"Pausing playback on {self._device_id}")
        await self._binding.pause(INSTANCE_ID)

    async def stop(self) -> None:
        logger.info(f"Stopping playback on {self._device_id}")
        await self._binding.stop(INSTANCE_ID)

    async def get_transport_info(self) -> Dict[str, Any]:
        """Current transport state as reported by the renderer."""
        return await self._binding.get_transport_info(INSTANCE_ID)

    async def get_position_info(self) -> Dict[str, Any]:
        """Current track and position as reported by the renderer."""
        return await self._binding.get_position_info(INSTANCE_ID)


def new_renderer_controller(descriptor: DeviceDescriptor,
                            invoker: Optional[ActionInvoker] = None) -> RendererController:
    """
    Create a controller for a discovered renderer.

    Args:
        descriptor: The renderer's description
        invoker: Transport used for remote actions; defaults to UpnpClientInvoker

    Returns:
        RendererController bound to the renderer's AVTransport service

    Raises:
        CapabilityMissing: if the device does not advertise an AVTransport service
    """
    binding = AVTransportBinding.bind(descriptor, invoker or UpnpClientInvoker())
    return RendererController(binding, device_id=descriptor.id)
