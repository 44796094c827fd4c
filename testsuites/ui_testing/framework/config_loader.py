"""
================================================================================
Configuration Loader
================================================================================

Harness settings from testsuites/config/config.yaml, overridable per key
from the environment.

Sections:
    - movie_app: base URL, browser, headless mode, selector overrides,
      size of the app's fallback listing
    - timeouts: settling / probing waits of the page objects (ms)
    - retry: pagination retry budget
    - logging: Loguru level

An environment variable named after the dot path wins over the file:
``movie_app.base_url`` -> ``MOVIE_APP_BASE_URL``.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Optional, TypeVar

import yaml
from loguru import logger

from .errors import ConfigurationError
from .retry import RetryConfig


DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "config.yaml"

T = TypeVar("T")

_TRUE_WORDS = ("true", "1", "yes", "on")
_FALSE_WORDS = ("false", "0", "no", "off")


@dataclass(frozen=True)
class Timeouts:
    """Wait budgets (ms) handed to MoviePage."""
    settle_ms: int = 30000
    probe_ms: int = 5000


def env_key(key: str) -> str:
    """Environment variable that overrides a dot path."""
    return key.upper().replace(".", "_")


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_WORDS:
        return True
    if text in _FALSE_WORDS:
        return False
    raise ValueError(f"not a boolean: {value!r}")


class ConfigLoader:
    """
    Process-wide view of the harness configuration.

    Usage:
        >>> config = ConfigLoader()
        >>> config.timeouts().probe_ms
        5000
        >>> config.pagination_retry().max_attempts
        3
    """

    _instance: Optional["ConfigLoader"] = None

    def __new__(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._data = instance._read(config_path or DEFAULT_CONFIG_PATH)
            cls._instance = instance
        return cls._instance

    @staticmethod
    def _read(path: Path) -> Dict[str, Any]:
        if not path.exists():
            logger.warning(f"No config file at {path}; environment and defaults only")
            return {}
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"{path} must hold a mapping, got {type(data).__name__}")
        logger.debug(f"Loaded configuration from: {path}")
        return data

    @classmethod
    def reset(cls) -> None:
        """Forget the loaded file; the next ConfigLoader() reads it again."""
        cls._instance = None

    # ============================================================================
    # Raw access
    # ============================================================================

    def get(self, key: str, default: Any = None) -> Any:
        """
        Value at a dot path, environment first.

        Environment values are strings; they are converted to the type of
        `default` when one is given.
        """
        raw = os.environ.get(env_key(key))
        if raw is not None:
            if default is None or isinstance(default, str):
                return raw
            return self._convert(key, raw, type(default))

        node: Any = self._data
        for part in key.split("."):
            if not isinstance(node, dict) or node.get(part) is None:
                return default
            node = node[part]
        return node

    def _typed(self, key: str, default: T, cast: Callable[[Any], T]) -> T:
        return self._convert(key, self.get(key, default), cast)

    @staticmethod
    def _convert(key: str, value: Any, cast: Callable[[Any], T]) -> T:
        if cast is bool:
            cast = _to_bool
        try:
            return cast(value)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(
                f"Config value {key}={value!r} (env {env_key(key)}) is invalid: {e}"
            ) from e

    # ============================================================================
    # Harness settings
    # ============================================================================

    def browser_type(self) -> str:
        return self._typed("movie_app.browser", "chromium", str)

    def headless(self) -> bool:
        return self._typed("movie_app.headless", True, bool)

    def default_page_size(self) -> int:
        """Card count of the app's fallback listing (special-character search)."""
        return self._typed("movie_app.default_page_size", 20, int)

    def timeouts(self) -> Timeouts:
        return Timeouts(
            settle_ms=self._typed("timeouts.settle_ms", Timeouts.settle_ms, int),
            probe_ms=self._typed("timeouts.probe_ms", Timeouts.probe_ms, int),
        )

    def pagination_retry(self) -> RetryConfig:
        """
        Retry budget for MoviePage.next_page().

        Raises:
            ConfigurationError: On non-numeric values, fewer than one
                attempt or a negative pause
        """
        return RetryConfig(
            max_attempts=self._typed("retry.pagination_attempts", 3, int),
            delay_seconds=self._typed("retry.pagination_delay_seconds", 1.0, float),
        )

    def log_level(self) -> str:
        return self._typed("logging.level", "INFO", str).upper()


__all__ = [
    "ConfigLoader",
    "DEFAULT_CONFIG_PATH",
    "Timeouts",
    "env_key",
]
