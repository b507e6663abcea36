"""
Drawing Surfaces
================

Two interchangeable 2D drawing surfaces used to synthesize placeholder images:

- OffscreenSurface draws into a Pillow image and needs no browser.
- BrowserCanvasSurface draws into a ``<canvas>`` inside a Playwright page.

The variant is chosen once from an injected RenderEnvironment.
"""

from typing import Any, Optional, Sequence, Tuple
from abc import ABC, abstractmethod
from functools import lru_cache
import io
import uuid

from PIL import Image, ImageDraw, ImageFont  # type: ignore
from playwright.async_api import Page

from noderaster.config.logging import get_logger
from noderaster.config.settings import get_settings
from .encoder import bytes_to_data_uri

logger = get_logger(__name__)


class RenderEnvironment:
    """Describes where placeholders are drawn; windowed when a page is available."""

    def __init__(self, page: Optional[Page] = None):
        self.page = page

    @property
    def windowed(self) -> bool:
        return self.page is not None

    @classmethod
    def from_page(cls, page: Page) -> "RenderEnvironment":
        return cls(page=page)

    @classmethod
    def offscreen(cls) -> "RenderEnvironment":
        return cls()


class DrawingSurface(ABC):
    """Minimal 2D drawing capability with canvas-style text placement."""

    def __init__(self, width: int, height: int, fill_style: str):
        self.width = width
        self.height = height
        self.fill_style = fill_style
        self.font_size = 10

    def set_font(self, font_size: int) -> None:
        """Use a bold font of the given pixel size for subsequent text calls."""
        self.font_size = font_size

    async def open(self) -> None:
        pass

    async def close(self) -> None:
        pass

    @abstractmethod
    async def measure_text(self, text: str) -> float:
        """Advance width of ``text`` in the current font."""

    @abstractmethod
    async def fill_text(self, text: str, x: float, y: float) -> None:
        """Draw ``text`` with its alphabetic baseline starting at (x, y)."""

    @abstractmethod
    async def to_data_url(self) -> str:
        """Serialize the surface to a PNG data URI."""

    async def __aenter__(self) -> "DrawingSurface":
        await self.open()
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()


@lru_cache(maxsize=64)
def load_bold_font(candidates: Tuple[str, ...], size: int) -> Any:
    """
    Resolve the first loadable TrueType font from ``candidates``.

    Falls back to Pillow's bundled default font at the requested size.
    """
    for name in candidates:
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue

    logger.debug("No candidate font available, using default font", size=size)
    return ImageFont.load_default(size=size)


class OffscreenSurface(DrawingSurface):
    """Pillow-backed transparent RGBA surface."""

    def __init__(
        self,
        width: int,
        height: int,
        fill_style: str,
        font_candidates: Sequence[str] = (),
    ):
        super().__init__(width, height, fill_style)
        self.font_candidates = tuple(font_candidates)
        self.image = Image.new("RGBA", (width, height), (0, 0, 0, 0))
        self.draw = ImageDraw.Draw(self.image)

    @property
    def font(self) -> Any:
        return load_bold_font(self.font_candidates, self.font_size)

    async def measure_text(self, text: str) -> float:
        return float(self.draw.textlength(text, font=self.font))

    async def fill_text(self, text: str, x: float, y: float) -> None:
        if self.width == 0 or self.height == 0:
            return
        self.draw.text((x, y), text, fill=self.fill_style, font=self.font, anchor="ls")

    async def to_data_url(self) -> str:
        if self.width == 0 or self.height == 0:
            # Empty canvases serialize to no pixel data
            return bytes_to_data_uri(b"")

        output = io.BytesIO()
        self.image.save(output, format="PNG")
        return bytes_to_data_uri(output.getvalue())


_CREATE_CANVAS_JS = """({key, width, height}) => {
    const canvas = document.createElement('canvas');
    canvas.width = width;
    canvas.height = height;
    window[key] = canvas;
}"""

_MEASURE_TEXT_JS = """({key, font, text}) => {
    const ctx = window[key].getContext('2d');
    ctx.font = font;
    return ctx.measureText(text).width;
}"""

_FILL_TEXT_JS = """({key, font, fillStyle, text, x, y}) => {
    const ctx = window[key].getContext('2d');
    ctx.font = font;
    ctx.fillStyle = fillStyle;
    ctx.fillText(text, x, y);
}"""

_TO_DATA_URL_JS = """({key}) => window[key].toDataURL('image/png')"""

_RELEASE_CANVAS_JS = """({key}) => { delete window[key]; }"""


class BrowserCanvasSurface(DrawingSurface):
    """Canvas element living in a Playwright page."""

    def __init__(
        self,
        page: Page,
        width: int,
        height: int,
        fill_style: str,
        font_family: str = "sans-serif",
    ):
        super().__init__(width, height, fill_style)
        self.page = page
        self.font_family = font_family
        self.key = f"__noderaster_canvas_{uuid.uuid4().hex}"

    @property
    def css_font(self) -> str:
        return f"bold {self.font_size}px {self.font_family}"

    async def open(self) -> None:
        await self.page.evaluate(
            _CREATE_CANVAS_JS, {"key": self.key, "width": self.width, "height": self.height}
        )

    async def close(self) -> None:
        await self.page.evaluate(_RELEASE_CANVAS_JS, {"key": self.key})

    async def measure_text(self, text: str) -> float:
        width = await self.page.evaluate(
            _MEASURE_TEXT_JS, {"key": self.key, "font": self.css_font, "text": text}
        )
        return float(width)

    async def fill_text(self, text: str, x: float, y: float) -> None:
        await self.page.evaluate(
            _FILL_TEXT_JS,
            {
                "key": self.key,
                "font": self.css_font,
                "fillStyle": self.fill_style,
                "text": text,
                "x": x,
                "y": y,
            },
        )

    async def to_data_url(self) -> str:
        return await self.page.evaluate(_TO_DATA_URL_JS, {"key": self.key})


def create_surface(
    environment: Optional[RenderEnvironment], width: int, height: int
) -> DrawingSurface:
    """
    Select the drawing surface for an environment.

    Args:
        environment: Render environment; None means off-screen
        width: Surface width in pixels
        height: Surface height in pixels

    Returns:
        Unopened drawing surface, to be used as an async context manager
    """
    settings = get_settings()

    if environment is not None and environment.windowed:
        return BrowserCanvasSurface(
            environment.page,  # type: ignore[arg-type]
            width,
            height,
            fill_style=settings.placeholder_text_color,
            font_family=settings.placeholder_css_font_family,
        )

    return OffscreenSurface(
        width,
        height,
        fill_style=settings.placeholder_text_color,
        font_candidates=settings.placeholder_fonts,
    )

