"""
Browser Pool
============

Playwright browser pool handing out pages that serve as a windowed drawing
environment for placeholder images.
"""

from typing import Optional, List, Any, AsyncGenerator
import asyncio
from contextlib import asynccontextmanager

from playwright.async_api import async_playwright, Browser, Page

from noderaster.config.logging import get_logger
from noderaster.config.settings import get_settings
from noderaster.core.images.surfaces import RenderEnvironment

logger = get_logger(__name__)


class BrowserPoolError(Exception):
    """Exception raised when the browser pool cannot serve a request."""

    pass


class BrowserPool:
    """Browser instance pool for efficient resource management."""

    def __init__(self, pool_size: Optional[int] = None):
        self.settings = get_settings()
        self.pool_size = pool_size or self.settings.browser_pool_size
        self.browsers: List[Browser] = []
        self._semaphore = asyncio.Semaphore(self.pool_size)
        self._playwright: Any = None
        self.logger: Any = logger.bind(component="browser_pool")

    async def initialize(self) -> None:
        """Initialize browser pool."""
        try:
            self._playwright = await async_playwright().start()

            for _ in range(self.pool_size):
                browser = await self._playwright.chromium.launch(
                    headless=self.settings.playwright_headless,
                    args=[
                        "--no-sandbox",
                        "--disable-setuid-sandbox",
                        "--disable-dev-shm-usage",
                    ],
                )
                self.browsers.append(browser)

            self.logger.info("Browser pool initialized", pool_size=self.pool_size)
        except Exception as e:
            self.logger.error("Failed to initialize browser pool", error=str(e))
            raise BrowserPoolError(f"Browser pool initialization failed: {e}") from e

    async def close(self) -> None:
        """Close all browsers in the pool."""
        for browser in self.browsers:
            await browser.close()
        self.browsers = []

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

        self.logger.info("Browser pool closed")

    @asynccontextmanager
    async def get_browser(self) -> AsyncGenerator[Browser, None]:
        """Get a browser instance from the pool."""
        async with self._semaphore:
            if not self.browsers:
                raise BrowserPoolError("Browser pool not initialized")

            browser = self.browsers.pop()
            try:
                yield browser
            finally:
                self.browsers.append(browser)

    @asynccontextmanager
    async def get_page(self) -> AsyncGenerator[Page, None]:
        """Get a blank page in a fresh context; the context is closed afterwards."""
        async with self.get_browser() as browser:
            context = await browser.new_context()
            try:
                page = await context.new_page()
                page.set_default_timeout(self.settings.playwright_timeout)
                yield page
            finally:
                await context.close()

    @asynccontextmanager
    async def get_environment(self) -> AsyncGenerator[RenderEnvironment, None]:
        """Get a windowed render environment backed by a pooled page."""
        async with self.get_page() as page:
            yield RenderEnvironment.from_page(page)
