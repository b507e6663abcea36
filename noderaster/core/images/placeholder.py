"""
Placeholder Images
==================

Synthetic PNG placeholders showing their own pixel dimensions as centered
text. Images are kept in the in-memory blob store and handed out as object
URLs.
"""

from typing import Any, Optional
import math

from noderaster.config.logging import get_logger
from noderaster.config.settings import get_settings
from noderaster.models.schemas import PlaceholderDimensions
from .blobs import BlobStore, get_blob_store
from .encoder import data_uri_to_bytes
from .surfaces import RenderEnvironment, create_surface

logger = get_logger(__name__)

PLACEHOLDER_BLOB_TYPE = "image/png;base64"


class PlaceholderGenerationError(Exception):
    """Exception raised when a placeholder cannot be drawn."""

    pass


def placeholder_font_size(width: int) -> int:
    """Label font size for a placeholder of the given width."""
    settings = get_settings()
    return max(
        settings.placeholder_min_font_size,
        math.floor(width * settings.placeholder_font_ratio),
    )


def placeholder_label(width: int, height: int) -> str:
    return f"{width} x {height}"


class PlaceholderGenerator:
    """Draws dimension-stamped placeholders on the environment's surface."""

    def __init__(
        self,
        environment: Optional[RenderEnvironment] = None,
        blob_store: Optional[BlobStore] = None,
    ):
        self.environment = environment or RenderEnvironment.offscreen()
        self.blob_store = blob_store if blob_store is not None else get_blob_store()
        self.logger: Any = logger.bind(
            generator="browser_canvas" if self.environment.windowed else "offscreen"
        )

    async def render_data_url(self, width: int, height: int) -> str:
        """
        Draw a placeholder and serialize it.

        Args:
            width: Image width in pixels
            height: Image height in pixels

        Returns:
            PNG data URI of the placeholder

        Raises:
            PlaceholderGenerationError: If the surface fails to draw or serialize
        """
        font_size = placeholder_font_size(width)
        text = placeholder_label(width, height)

        try:
            async with create_surface(self.environment, width, height) as surface:
                surface.set_font(font_size)
                text_width = await surface.measure_text(text)
                x = (width - text_width) / 2
                y = (height + font_size) / 2
                await surface.fill_text(text, x, y)
                return await surface.to_data_url()
        except Exception as e:
            error_msg = f"Placeholder generation failed: {e}"
            self.logger.error("Placeholder generation error", width=width, height=height, error=error_msg)
            raise PlaceholderGenerationError(error_msg) from e

    async def generate(self, width: float, height: Optional[float] = None) -> str:
        """
        Generate a placeholder image.

        Args:
            width: Image width; truncated to an integer
            height: Image height; defaults to the width

        Returns:
            Object URL of the PNG blob in the blob store
        """
        dimensions = PlaceholderDimensions.from_size(width, height)
        w, h = dimensions.width, dimensions.resolved_height

        self.logger.info("Generating placeholder image", width=w, height=h)

        data_url = await self.render_data_url(w, h)
        png_bytes = data_uri_to_bytes(data_url)
        url = self.blob_store.create_object_url(png_bytes, PLACEHOLDER_BLOB_TYPE)

        self.logger.debug("Placeholder image ready", url=url, file_size=len(png_bytes))
        return url


async def get_placeholder_image(
    width: float,
    height: Optional[float] = None,
    environment: Optional[RenderEnvironment] = None,
) -> str:
    """Generate a placeholder image in the process-wide blob store."""
    return await PlaceholderGenerator(environment).generate(width, height)
