"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based UI automation framework for the Movie App.

Components:
    - selector_config: Immutable selector texts/patterns with partial override
    - config_loader: YAML + environment configuration
    - page_base: Base page object (navigation, waits, screenshots)
    - browser_manager: Browser lifecycle management
    - retry: Bounded retry for flaky interactions

Author: Automation Team
License: MIT
================================================================================
"""

from .errors import ConfigurationError, RetryExhaustedError
from .config_loader import ConfigLoader, Timeouts
from .selector_config import (
    DEFAULT_SELECTOR_CONFIG,
    SelectorConfig,
    attach_selector_config,
    load_selector_config,
    resolve,
)
from .retry import RetryConfig, retry_async
from .page_base import BasePage
from .browser_manager import BrowserManager

__all__ = [
    "BasePage",
    "BrowserManager",
    "ConfigLoader",
    "ConfigurationError",
    "DEFAULT_SELECTOR_CONFIG",
    "RetryConfig",
    "RetryExhaustedError",
    "SelectorConfig",
    "Timeouts",
    "attach_selector_config",
    "load_selector_config",
    "resolve",
    "retry_async",
]
