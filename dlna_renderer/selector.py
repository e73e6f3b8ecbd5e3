from .resources import ImageItem, PlayableItem, ResourceVariant


def select_for_playback(item: PlayableItem) -> ResourceVariant:
    """
    Choose the rendition of an item to hand to a renderer.

    The first listed rendition is used, except for images where the widest
    rendition wins. Equal widths keep the earlier rendition, and renditions
    without a known resolution are never preferred over the first one.

    Args:
        item: The item to play; must have at least one rendition

    Returns:
        ResourceVariant: The selected rendition
    """
    resource = item.resources[0]

    if isinstance(item, ImageItem):
        max_width = 0
        for candidate in item.resources:
            if candidate.resolution is not None and candidate.resolution.width > max_width:
                max_width = candidate.resolution.width
                resource = candidate

    return resource
