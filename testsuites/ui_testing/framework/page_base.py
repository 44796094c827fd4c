"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Navigation and URL handling
    - Wait strategies (load state, element state)
    - Allure steps around navigation

A page object holds the Playwright page handle and nothing else that changes
over time; locators are resolved against the live DOM on every access.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import allure
from loguru import logger
from playwright.async_api import Page


# Generous default for network-backed waits, short one for probes
DEFAULT_TIMEOUT_MS = 30000
PROBE_TIMEOUT_MS = 5000


class BasePage:
    """
    Base class for all page objects.

    Usage:
        class MoviePage(BasePage):
            async def open(self):
                await self.navigate()
    """

    URL_PATH: str = ""

    def __init__(
        self,
        page: Page,
        base_url: str = "",
        default_timeout: int = DEFAULT_TIMEOUT_MS,
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page object
            base_url: Base URL for the application
            default_timeout: Timeout (ms) for settling waits
        """
        self.page = page
        self.base_url = base_url
        self.default_timeout = default_timeout

    @property
    def url(self) -> str:
        """Get full page URL."""
        return f"{self.base_url}{self.URL_PATH}"

    async def navigate(self, wait_for: str = "load") -> None:
        """
        Navigate to this page.

        Args:
            wait_for: Wait condition - 'load', 'domcontentloaded', 'networkidle'
        """
        with allure.step(f"Navigate to {self.url}"):
            await self.page.goto(self.url, wait_until=wait_for)
            logger.debug(f"Navigated to: {self.url}")

    async def wait_for_page_load(
        self,
        state: str = "networkidle",
        timeout: int = 15000,
    ) -> None:
        """
        Wait for the page to reach a stable load state.

        Args:
            state: Playwright load state ('load', 'domcontentloaded', 'networkidle')
            timeout: Timeout in milliseconds
        """
        await self.page.wait_for_load_state(state, timeout=timeout)

    async def wait_for_element(
        self,
        selector: str,
        state: str = "visible",
        timeout: int = None,
    ) -> None:
        """
        Wait for element to reach specified state.

        Args:
            selector: CSS selector
            state: Target state - 'visible', 'hidden', 'attached', 'detached'
            timeout: Timeout in milliseconds, `default_timeout` if omitted
        """
        await self.page.wait_for_selector(
            selector,
            state=state,
            timeout=timeout if timeout is not None else self.default_timeout,
        )


__all__ = [
    "BasePage",
    "DEFAULT_TIMEOUT_MS",
    "PROBE_TIMEOUT_MS",
]
