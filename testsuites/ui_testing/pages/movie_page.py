"""
================================================================================
Movie App Page Object (Async / Playwright)
================================================================================

Facade over the Movie App single-page application.

Design goals:
  - Locators derived on every access from (page, SelectorConfig); nothing is
    cached because the app replaces its DOM subtree on navigation and search
  - Composite procedures absorb the app's asynchronous behaviour
    (network-backed search, loading message, paginated lists)
  - Timeouts propagate as test failures; only probes treat absence as a result
  - Pagination is the single interaction with bounded retry

One MoviePage per test and per browser page. Sequential use only.

================================================================================
"""

from __future__ import annotations

import re
from typing import Any, List, Mapping, Optional, Union

import allure
from loguru import logger
from playwright.async_api import Locator, Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from testsuites.ui_testing.framework.page_base import (
    DEFAULT_TIMEOUT_MS,
    PROBE_TIMEOUT_MS,
    BasePage,
)
from testsuites.ui_testing.framework.retry import (
    PAGINATION_RETRY,
    RetryConfig,
    retry_async,
)
from testsuites.ui_testing.framework.selector_config import SelectorConfig, resolve


MAIN_CONTENT = "main"


class MoviePage(BasePage):
    """Movie App page object (async)."""

    def __init__(
        self,
        page: Page,
        config: Union[SelectorConfig, Mapping[str, Any], None] = None,
        retry_config: Optional[RetryConfig] = None,
        default_timeout: int = DEFAULT_TIMEOUT_MS,
        probe_timeout: int = PROBE_TIMEOUT_MS,
    ):
        """
        Bind the facade to a browser page.

        Args:
            page: Playwright Page owned by this facade for its lifetime
            config: SelectorConfig, or a partial override mapping merged onto
                the defaults
            retry_config: Retry budget for pagination
            default_timeout: Timeout (ms) for settling waits
            probe_timeout: Timeout (ms) for waits where absence is expected
        """
        if not isinstance(config, SelectorConfig):
            config = resolve(config)
        super().__init__(page, base_url=config.base_url, default_timeout=default_timeout)
        self.config = config
        self.retry_config = retry_config or PAGINATION_RETRY
        self.probe_timeout = probe_timeout

    # =========================================================================
    # Search Locators
    # =========================================================================

    @property
    def search_trigger(self) -> Locator:
        # Collapsed layouts expose the control as a labelled element, not a button
        text = self.config.search_button_text
        return self.page.get_by_role("button", name=text).or_(self.page.get_by_label(text))

    @property
    def search_field(self) -> Locator:
        return self.page.get_by_role("textbox", name=self.config.search_input_label).or_(
            self.page.get_by_placeholder(self.config.search_placeholder)
        )

    @property
    def search_region(self) -> Locator:
        return self.page.get_by_role("search")

    @property
    def loading_indicator(self) -> Locator:
        return self.page.get_by_text(self.config.loading_text)

    @property
    def no_results_heading(self) -> Locator:
        return self.page.get_by_role("heading", name=self.config.sorry_heading, level=3)

    # =========================================================================
    # Result / Detail Locators
    # =========================================================================

    @property
    def first_result_link(self) -> Locator:
        return self.page.get_by_role("link", name=self.config.movie_link_pattern).first

    @property
    def detail_title(self) -> Locator:
        return self.page.get_by_role("heading", level=1)

    @property
    def synopsis_section(self) -> Locator:
        return self.page.get_by_role("heading", name=self.config.synopsis_heading, level=3)

    @property
    def genres_section(self) -> Locator:
        return self.page.get_by_role("heading", name=self.config.genres_heading, level=3)

    @property
    def rating_marker(self) -> Locator:
        star = re.compile(re.escape(self.config.star_symbol))
        return self.page.locator(MAIN_CONTENT).get_by_text(star).first

    @property
    def result_cards_with_rating(self) -> Locator:
        """Every list item carrying the rating glyph, i.e. every movie card."""
        star = re.compile(re.escape(self.config.star_symbol))
        return self.page.locator("li").filter(has_text=star)

    @property
    def all_result_titles(self) -> Locator:
        return self.result_cards_with_rating.locator("h2")

    def movie_heading(self, title: str) -> Locator:
        """Heading whose full text is `title`, case-insensitive."""
        exact = re.compile(f"^{re.escape(title)}$", re.IGNORECASE)
        return self.page.get_by_role("heading", name=exact).first

    # =========================================================================
    # Theme / Pagination Locators
    # =========================================================================

    @property
    def theme_to_dark(self) -> Locator:
        return self.page.get_by_role("button", name=self.config.dark_mode_symbol)

    @property
    def theme_to_light(self) -> Locator:
        return self.page.get_by_role("button", name=self.config.light_mode_symbol)

    @property
    def body_root(self) -> Locator:
        return self.page.locator("body")

    @property
    def next_page_control(self) -> Locator:
        return self.page.get_by_role("button", name=self.config.page2_button_text)

    # =========================================================================
    # Navigation
    # =========================================================================

    @allure.step("Open Movie App home")
    async def navigate_to_home(self) -> "MoviePage":
        """Navigate to the configured base URL."""
        await self.navigate()
        return self

    # =========================================================================
    # Search Procedures
    # =========================================================================

    async def initiate_search(self) -> None:
        """
        Activate the search affordance.

        The expanded inline form is clicked directly when visible; otherwise
        the collapsed search button is clicked.
        """
        region = self.search_region
        if await region.is_visible():
            logger.debug("Search region visible, clicking it")
            await region.click()
            return

        logger.debug("Search region hidden, clicking search trigger")
        await self.search_trigger.click(timeout=self.default_timeout)

    @allure.step("Search for movie: {term}")
    async def submit_search(self, term: str) -> None:
        """
        Submit `term` and wait until the result set has settled.

        Callers inspect result locators afterwards.
        """
        logger.info(f"Searching for: {term!r}")
        await self.initiate_search()

        field = self.search_field
        await field.fill(term, timeout=self.default_timeout)
        await field.press("Enter")

        await self.await_content_settled()
        await self.wait_for_element(MAIN_CONTENT, state="visible")

    async def await_content_settled(self, timeout: Optional[int] = None) -> None:
        """
        Wait out the transient loading message, then for main content.

        Returns right after the main-content check when no loading message
        is shown.

        Raises:
            playwright.async_api.TimeoutError: If either wait exceeds `timeout`
        """
        timeout = timeout if timeout is not None else self.default_timeout
        loading = self.loading_indicator
        if await loading.is_visible():
            logger.debug("Loading message visible, waiting for it to disappear")
            await loading.wait_for(state="hidden", timeout=timeout)

        await self.page.wait_for_selector(MAIN_CONTENT, state="visible", timeout=timeout)

    async def has_results(self) -> bool:
        """False iff the "no results" heading is currently visible."""
        return not await self.no_results_heading.is_visible()

    async def wait_for_results(self, timeout: Optional[int] = None) -> bool:
        """Probe for at least one result title; False when none shows up in time."""
        try:
            await self.all_result_titles.first.wait_for(
                timeout=timeout if timeout is not None else self.probe_timeout
            )
            return True
        except PlaywrightTimeoutError:
            return False

    async def first_result_title(self, timeout: Optional[int] = None) -> Optional[str]:
        """
        Text of the heading inside the first result link.

        Returns:
            The title, or None when no result appears within the probe timeout
        """
        if timeout is None:
            timeout = self.probe_timeout
        heading = self.first_result_link.get_by_role("heading")
        try:
            await heading.wait_for(state="visible", timeout=timeout)
        except PlaywrightTimeoutError:
            logger.debug("No result link found within probe timeout")
            return None
        return await heading.text_content()

    async def result_titles(self) -> List[str]:
        """Titles of every movie card currently rendered."""
        return await self.all_result_titles.all_text_contents()

    @allure.step("Open first movie details")
    async def open_first_result(self) -> Optional[str]:
        """
        Click into the first result's detail view.

        Returns:
            Title read from the card before navigating
        """
        title = await self.first_result_title(timeout=self.default_timeout)
        await self.first_result_link.click(timeout=self.default_timeout)
        await self.detail_title.wait_for(state="visible", timeout=self.default_timeout)
        logger.info(f"Opened details of: {title!r}")
        return title

    # =========================================================================
    # Theme
    # =========================================================================

    @allure.step("Switch to dark theme")
    async def switch_to_dark(self) -> None:
        await self.theme_to_dark.click(timeout=self.default_timeout)

    @allure.step("Switch to light theme")
    async def switch_to_light(self) -> None:
        await self.theme_to_light.click(timeout=self.default_timeout)

    async def is_dark_mode(self) -> bool:
        class_attr = await self.body_root.get_attribute("class") or ""
        return "dark" in class_attr

    # =========================================================================
    # Pagination
    # =========================================================================

    async def _click_next_page(self) -> None:
        await self.next_page_control.click(timeout=self.default_timeout)
        await self.page.wait_for_load_state("networkidle", timeout=self.default_timeout)

    @allure.step("Go to next results page")
    async def next_page(self) -> None:
        """
        Advance to the next results page.

        A click issued while a request is still in flight can be lost, so the
        click + network-idle wait is retried per `retry_config`.

        Raises:
            RetryExhaustedError: When every attempt failed
        """
        await retry_async(
            self._click_next_page,
            self.retry_config,
            description=f"pagination via '{self.config.page2_button_text}'",
        )
        await self.await_content_settled()
        logger.info("Advanced to next results page")


__all__ = [
    "MoviePage",
]
