"""
================================================================================
Selector Configuration
================================================================================

Immutable mapping from semantic roles of the Movie App ("the search box",
"the loading indicator", "the next-page control") to the literal strings and
patterns that identify them in the live DOM.

Features:
    - Documented defaults for the reference application
    - Partial override (field by field) for localized or re-skinned variants
    - camelCase aliases for override keys
    - YAML / environment driven construction via ConfigLoader

No validation is done on texts or patterns: a selector that matches nothing
surfaces later as a wait timeout, once a browser session is attached.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import json
import re
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional, Pattern, Union

import allure
from loguru import logger

from .config_loader import ConfigLoader
from .errors import ConfigurationError


DEFAULT_BASE_URL = "https://debs-obrien.github.io/playwright-movies-app/"


def _compile_pattern(value: Union[str, Pattern[str]]) -> Pattern[str]:
    """Plain strings become case-insensitive patterns."""
    if isinstance(value, str):
        return re.compile(value, re.IGNORECASE)
    return value


@dataclass(frozen=True)
class SelectorConfig:
    """
    Display strings and patterns used to resolve Movie App locators.

    Attributes:
        base_url: Application entry point
        search_button_text: Accessible name/label of the search button
        search_input_label: Accessible name of the search textbox
        search_placeholder: Placeholder of the search textbox
        loading_text: Transient "please wait" message shown during search
        synopsis_heading: Level-3 heading on the detail view
        genres_heading: Level-3 heading on the detail view
        sorry_heading: Level-3 heading rendered when a search has no results
        page2_button_text: Accessible name of the next-page control
        dark_mode_symbol: Glyph of the "switch to dark" button
        light_mode_symbol: Glyph of the "switch to light" button
        star_symbol: Rating glyph rendered on every movie card
        movie_link_pattern: Accessible name pattern of a poster link;
            a plain string is compiled case-insensitively
    """
    base_url: str = DEFAULT_BASE_URL
    search_button_text: str = "Search for a movie"
    search_input_label: str = "Search Input"
    search_placeholder: str = "Search for a movie"
    loading_text: str = "Please wait a moment"
    synopsis_heading: str = "The Synopsis"
    genres_heading: str = "The Genres"
    sorry_heading: str = "Sorry!"
    page2_button_text: str = "Page 2"
    dark_mode_symbol: str = "☾"
    light_mode_symbol: str = "☀"
    star_symbol: str = "★"
    movie_link_pattern: Pattern[str] = re.compile(r"poster of .* rating", re.IGNORECASE)

    def __post_init__(self) -> None:
        # frozen: normalize through object.__setattr__
        object.__setattr__(
            self, "movie_link_pattern", _compile_pattern(self.movie_link_pattern)
        )

    def as_dict(self) -> Dict[str, str]:
        """Return a plain dict (patterns as source strings) for reporting."""
        data = asdict(self)
        data["movie_link_pattern"] = self.movie_link_pattern.pattern
        return data


DEFAULT_SELECTOR_CONFIG = SelectorConfig()

# camelCase override keys -> field names
KEY_ALIASES: Dict[str, str] = {
    "baseUrl": "base_url",
    "searchButtonText": "search_button_text",
    "searchInputLabel": "search_input_label",
    "searchPlaceholder": "search_placeholder",
    "loadingText": "loading_text",
    "synopsisHeading": "synopsis_heading",
    "genresHeading": "genres_heading",
    "sorryHeading": "sorry_heading",
    "page2ButtonText": "page2_button_text",
    "darkModeSymbol": "dark_mode_symbol",
    "lightModeSymbol": "light_mode_symbol",
    "starSymbol": "star_symbol",
    "movieLinkPattern": "movie_link_pattern",
}

FIELD_NAMES = frozenset(f.name for f in fields(SelectorConfig))


def _normalize_key(key: str) -> str:
    name = KEY_ALIASES.get(key, key)
    if name not in FIELD_NAMES:
        raise ConfigurationError(
            f"Unknown selector override '{key}'. "
            f"Known keys: {', '.join(sorted(FIELD_NAMES))}"
        )
    return name


def resolve(
    overrides: Optional[Mapping[str, Any]] = None,
    base: SelectorConfig = DEFAULT_SELECTOR_CONFIG,
) -> SelectorConfig:
    """
    Merge a partial override set onto `base`, field by field.

    Args:
        overrides: Mapping of field name (snake_case or camelCase) to value.
            Keys mapped to None are treated as not overridden.
        base: Config supplying the values of unset fields

    Returns:
        A new SelectorConfig; `base` is never modified

    Raises:
        ConfigurationError: If a key names no SelectorConfig field
    """
    if not overrides:
        return base

    changes: Dict[str, Any] = {}
    for key, value in overrides.items():
        name = _normalize_key(key)
        if value is None:
            continue
        changes[name] = value

    if changes:
        logger.debug(f"Selector overrides applied: {sorted(changes)}")
    return replace(base, **changes)


def load_selector_config(loader: Optional[ConfigLoader] = None) -> SelectorConfig:
    """
    Build a SelectorConfig from the `movie_app` section of the YAML config.

    `movie_app.selectors` holds overrides; `movie_app.base_url` (or the
    MOVIE_APP_BASE_URL environment variable) overrides the entry point.
    """
    loader = loader or ConfigLoader()
    overrides: Dict[str, Any] = dict(loader.get("movie_app.selectors", {}) or {})

    base_url = loader.get("movie_app.base_url")
    if base_url:
        overrides["base_url"] = base_url

    return resolve(overrides)


def attach_selector_config(config: SelectorConfig, name: str = "selector_config") -> None:
    """Attach the effective selector texts to the Allure report as JSON."""
    allure.attach(
        json.dumps(config.as_dict(), ensure_ascii=False, indent=2),
        name=name,
        attachment_type=allure.attachment_type.JSON,
    )


__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_SELECTOR_CONFIG",
    "SelectorConfig",
    "attach_selector_config",
    "load_selector_config",
    "resolve",
]
