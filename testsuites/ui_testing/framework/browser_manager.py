"""
================================================================================
Browser Manager
================================================================================

Owns one Playwright driver and one browser for a single test.

A test opens its own context (fresh cookies / storage) and its own page
through the manager, so search and pagination state never cross tests.
Closing the manager closes every context it opened, then the browser.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from loguru import logger
from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Page,
    Playwright,
)

from .config_loader import ConfigLoader


SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")

# Desktop layout of the Movie App
DESKTOP_VIEWPORT: Dict[str, int] = {"width": 1440, "height": 900}


class BrowserManager:
    """
    Browser session for one Movie App test.

    Usage:
        async with BrowserManager(browser_type="firefox") as manager:
            page = await manager.new_page()
            movie_page = MoviePage(page)
    """

    def __init__(
        self,
        headless: bool = True,
        browser_type: str = "chromium",
        viewport: Optional[Dict[str, int]] = None,
    ):
        """
        Args:
            headless: Launch without a visible window
            browser_type: One of SUPPORTED_BROWSERS
            viewport: Page size of every context, DESKTOP_VIEWPORT if omitted
        """
        if browser_type not in SUPPORTED_BROWSERS:
            raise ValueError(
                f"Unsupported browser '{browser_type}', "
                f"expected one of {SUPPORTED_BROWSERS}"
            )
        self.headless = headless
        self.browser_type = browser_type
        self.viewport = dict(viewport or DESKTOP_VIEWPORT)

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._contexts: List[BrowserContext] = []

    @classmethod
    def from_config(cls, loader: Optional[ConfigLoader] = None) -> "BrowserManager":
        """Manager for `movie_app.browser` / `movie_app.headless`."""
        loader = loader or ConfigLoader()
        return cls(headless=loader.headless(), browser_type=loader.browser_type())

    async def __aenter__(self) -> "BrowserManager":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    @property
    def browser(self) -> Optional[Browser]:
        return self._browser

    async def start(self) -> None:
        self._playwright = await async_playwright().start()
        launcher = getattr(self._playwright, self.browser_type)
        self._browser = await launcher.launch(headless=self.headless)
        logger.debug(f"Launched {self.browser_type} (headless={self.headless})")

    async def new_context(self, **options: Any) -> BrowserContext:
        """
        Open an isolated context; `options` go to Browser.new_context.

        Raises:
            RuntimeError: If start() has not been awaited
        """
        if self._browser is None:
            raise RuntimeError("Browser not started. Call start() first.")

        context = await self._browser.new_context(
            **{"viewport": self.viewport, **options}
        )
        self._contexts.append(context)
        return context

    async def new_page(self, context: Optional[BrowserContext] = None) -> Page:
        """Open a page in `context`, or in a fresh context when omitted."""
        if context is None:
            context = await self.new_context()
        page = await context.new_page()
        logger.debug("Opened new page")
        return page

    async def close(self) -> None:
        """Close owned contexts, then the browser and the driver."""
        while self._contexts:
            context = self._contexts.pop()
            try:
                await context.close()
            except Exception as e:
                logger.debug(f"Context already closed: {e}")

        if self._browser is not None:
            await self._browser.close()
            self._browser = None
        if self._playwright is not None:
            await self._playwright.stop()
            self._playwright = None
        logger.debug("Browser closed")


__all__ = [
    "BrowserManager",
    "DESKTOP_VIEWPORT",
    "SUPPORTED_BROWSERS",
]
