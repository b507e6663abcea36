"""
Node Export Pipeline
====================

Exports host nodes as base64 PNG data URIs through the host's asynchronous
export primitive. Results are cached per node id, and direct children can be
hidden for the duration of the render so only the node's own appearance is
captured.
"""

from typing import Any, Awaitable, Callable, Iterator, List, Optional, Tuple
from contextlib import contextmanager

from noderaster.config.logging import get_logger
from noderaster.models.schemas import ConstraintType, ExportConstraint, ExportFormat, ExportSettings
from .cache import EncodedImageCache, get_encoded_image_cache
from .conversion_warnings import ConversionWarnings, get_conversion_warnings
from .encoder import bytes_to_data_uri

logger = get_logger(__name__)

BASE64_PNG_WARNING = "Some images exported as Base64 PNG"

PNG_EXPORT_SETTINGS = ExportSettings(
    format=ExportFormat.PNG,
    constraint=ExportConstraint(type=ConstraintType.SCALE, value=1),
)

ExportFunction = Callable[[Any, ExportSettings], Awaitable[bytes]]


class NodeExportError(Exception):
    """Exception raised when the host fails to export a node."""

    pass


def should_hide_children(node: Any, exclude_children: bool) -> bool:
    """Children are hidden only when requested and the node actually has some."""
    if not exclude_children:
        return False
    children = getattr(node, "children", None)
    return children is not None and len(children) > 0


@contextmanager
def hidden_children(node: Any, enabled: bool = True) -> Iterator[List[Tuple[Any, bool]]]:
    """
    Hide a node's direct children for the duration of the block.

    Args:
        node: Node whose direct children are hidden
        enabled: Caller's request to exclude children

    Yields:
        Snapshot of (child, original visibility) pairs for the captured
        children, empty when no children were hidden
    """
    snapshot: List[Tuple[Any, bool]] = []
    if not should_hide_children(node, enabled):
        yield snapshot
        return

    snapshot = [(child, child.visible) for child in node.children]
    for child, _ in snapshot:
        child.visible = False

    try:
        yield snapshot
    finally:
        for child, visible in snapshot:
            child.visible = visible

        # Children attached while hidden were never captured and stay hidden
        captured = {id(child) for child, _ in snapshot}
        for child in getattr(node, "children", None) or []:
            if id(child) not in captured:
                child.visible = False


class NodeExporter:
    """Exports nodes as cached base64 PNG data URIs."""

    def __init__(
        self,
        export_fn: ExportFunction,
        warnings: Optional[ConversionWarnings] = None,
        cache: Optional[EncodedImageCache] = None,
    ):
        self.export_fn = export_fn
        self.warnings = warnings if warnings is not None else get_conversion_warnings()
        self.cache = cache if cache is not None else get_encoded_image_cache()
        self.logger: Any = logger.bind(component="node_exporter")

    async def export_as_base64_png(self, node: Any, exclude_children: bool) -> str:
        """
        Export a node as a base64 PNG data URI.

        Args:
            node: Host node to export
            exclude_children: Hide direct children so only the node itself is drawn

        Returns:
            PNG data URI of the node at 1:1 scale

        Raises:
            NodeExportError: If the host export primitive fails
        """
        cached = self.cache.get(node.id)
        if cached:
            self.logger.debug("Using cached node export", node_id=node.id)
            return cached

        self.logger.info(
            "Exporting node as PNG",
            node_id=node.id,
            exclude_children=exclude_children,
        )

        with hidden_children(node, exclude_children) as snapshot:
            try:
                png_bytes = await self.export_fn(node, PNG_EXPORT_SETTINGS)
            except Exception as e:
                self.logger.error(
                    "Node export failed",
                    node_id=node.id,
                    hidden_children=len(snapshot),
                    error=str(e),
                )
                raise NodeExportError(f"Node export failed: {e}") from e

        self.warnings.add(BASE64_PNG_WARNING)

        data_uri = bytes_to_data_uri(png_bytes)
        self.cache.set(node.id, data_uri)

        self.logger.info("Node export completed", node_id=node.id, file_size=len(png_bytes))
        return data_uri


async def export_node_as_base64_png(
    node: Any, exclude_children: bool, export_fn: ExportFunction
) -> str:
    """Export a node using the process-wide cache and warnings collector."""
    return await NodeExporter(export_fn).export_as_base64_png(node, exclude_children)
