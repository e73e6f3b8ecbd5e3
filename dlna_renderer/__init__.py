"""
Playback control for DLNA/UPnP media renderers.
Binds to a renderer's AVTransport service and drives open, play, pause and stop.
"""

__version__ = '0.1.0'

from .av_transport import INSTANCE_ID, AVTransportBinding, ServiceBinding, find_capability
from .device import DeviceDescriptor, ServiceCapability
from .didl import item_from_didl, items_from_didl
from .discovery import discover_renderers
from .errors import CapabilityMissing, InvalidArgument, RemoteActionFault, RendererError
from .invoker import ActionInvoker, UpnpClientInvoker
from .renderer_controller import NORMAL_PLAY_SPEED, RendererController, new_renderer_controller
from .resources import ImageItem, PlayableItem, Resolution, ResourceVariant
from .selector import select_for_playback

__all__ = [
    'INSTANCE_ID',
    'NORMAL_PLAY_SPEED',
    'ActionInvoker',
    'AVTransportBinding',
    'CapabilityMissing',
    'DeviceDescriptor',
    'ImageItem',
    'InvalidArgument',
    'PlayableItem',
    'RemoteActionFault',
    'RendererController',
    'RendererError',
    'Resolution',
    'ResourceVariant',
    'ServiceBinding',
    'ServiceCapability',
    'UpnpClientInvoker',
    'discover_renderers',
    'find_capability',
    'item_from_didl',
    'items_from_didl',
    'new_renderer_controller',
    'select_for_playback',
]
