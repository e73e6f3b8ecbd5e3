"""
Conversion of DIDL-Lite content listings into playable items.
"""

import logging
from typing import Any, List, Optional

from didl_lite import didl_lite

from .resources import ImageItem, PlayableItem, Resolution, ResourceVariant

logger = logging.getLogger(__name__)


def item_from_didl(didl_object: Any) -> Optional[PlayableItem]:
    """
    Convert a parsed DIDL-Lite object into a playable item.

    Each rendition carries the item serialized as a DIDL-Lite document, which
    is what renderers expect as CurrentURIMetaData.

    Args:
        didl_object: An object returned by didl_lite.from_xml_string()

    Returns:
        PlayableItem (ImageItem for image classes), or None for containers
        and items without resources
    """
    if not isinstance(didl_object, didl_lite.Item):
        return None

    title = getattr(didl_object, 'title', '') or ''
    resources = [res for res in (getattr(didl_object, 'res', None) or []) if res.uri]
    if not resources:
        logger.debug(f"Skipping item without resources: {title}")
        return None

    metadata = didl_lite.to_xml_string(didl_object).decode('utf-8')
    variants = [
        ResourceVariant(
            uri=res.uri.strip(),
            metadata=metadata,
            resolution=Resolution.parse(getattr(res, 'resolution', None)),
            protocol_info=res.protocol_info or '',
        )
        for res in resources
    ]

    item_cls = ImageItem if isinstance(didl_object, didl_lite.ImageItem) else PlayableItem
    return item_cls(title=title, resources=tuple(variants), item_id=getattr(didl_object, 'id', None))


def items_from_didl(xml: str) -> List[PlayableItem]:
    """
    Parse a ContentDirectory Browse result into playable items.

    Args:
        xml: DIDL-Lite document, as found in the Result argument of a Browse response

    Returns:
        List of items in document order; containers are skipped
    """
    items = []
    for didl_object in didl_lite.from_xml_string(xml, strict=False):
        item = item_from_didl(didl_object)
        if item is not None:
            items.append(item)
    logger.debug(f"Parsed {len(items)} playable items from DIDL-Lite")
    return items
