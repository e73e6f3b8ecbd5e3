"""
Playable content and its alternative renditions.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .errors import InvalidArgument

logger = logging.getLogger(__name__)

_RESOLUTION_RE = re.compile(r'^\s*(\d+)\s*[xX]\s*(\d+)\s*$')


@dataclass(frozen=True)
class Resolution:
    width: int
    height: int

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional['Resolution']:
        """
        Parse a DIDL-Lite resolution attribute such as "1920x1080".

        Returns:
            Resolution, or None if the value is empty or malformed
        """
        if not value:
            return None
        match = _RESOLUTION_RE.match(value)
        if not match:
            logger.debug(f"Ignoring malformed resolution: {value!r}")
            return None
        return cls(int(match.group(1)), int(match.group(2)))


@dataclass(frozen=True)
class ResourceVariant:
    """One rendition of an item: where to fetch it and how to describe it to the renderer."""

    uri: str
    metadata: str = ''
    resolution: Optional[Resolution] = None
    protocol_info: str = ''


@dataclass(frozen=True)
class PlayableItem:
    """
    A content entry with one or more renditions, ordered as the publisher listed them.

    Raises:
        InvalidArgument: if no renditions are given
    """

    title: str
    resources: Tuple[ResourceVariant, ...]
    item_id: Optional[str] = field(default=None, compare=False)

    def __post_init__(self):
        resources = tuple(self.resources)
        if not resources:
            raise InvalidArgument(f"Item {self.title!r} has no resources")
        object.__setattr__(self, 'resources', resources)


@dataclass(frozen=True)
class ImageItem(PlayableItem):
    """An item whose renditions may differ by resolution."""
