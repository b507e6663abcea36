"""
Fill Classification
===================

Helpers isolating image paints from a node's paint list.
"""

from collections.abc import Mapping
from typing import Any, List, Optional

from noderaster.config.logging import get_logger
from noderaster.models.schemas import Paint, PaintType

logger = get_logger(__name__)


def _paint_type(paint: Any) -> Any:
    if isinstance(paint, Mapping):
        return paint.get("type")
    return getattr(paint, "type", None)


def is_image_paint(paint: Any) -> bool:
    """Check whether a paint is an image paint."""
    return _paint_type(paint) == PaintType.IMAGE


def get_fills(node: Any) -> Optional[List[Paint]]:
    """
    Read a node's paint list.

    Returns:
        The paints in stack order, or None when the node has no fill concept
        or exposes something other than a list (e.g. mixed fills), and when
        the host fails to read the fills
    """
    try:
        fills = getattr(node, "fills", None)
    except Exception as e:
        logger.debug("Node fills unavailable", error=str(e))
        return None

    if isinstance(fills, (list, tuple)):
        return list(fills)
    return None


def image_fills(node: Any) -> List[Paint]:
    """Image paints of a node in stack order; empty when fills are unavailable."""
    return [paint for paint in get_fills(node) or [] if is_image_paint(paint)]


def has_image_fill(node: Any) -> bool:
    """Check whether a node carries at least one image paint."""
    return len(image_fills(node)) > 0


def has_multiple_fills(node: Any) -> bool:
    """Check whether a node exposes a fill list with more than one paint."""
    fills = get_fills(node)
    return fills is not None and len(fills) > 1
