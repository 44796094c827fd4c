"""
Repository-level pytest configuration.

Why this exists:
  - Make the repo importable from its root (`testsuites.*`)
  - Configure Loguru once per session from testsuites/config/config.yaml

Live UI runs are opt-in: `run_tests.py --suite ui` or RUN_UI_TESTS=1.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Generator

import pytest
from loguru import logger

from testsuites.ui_testing.framework.config_loader import ConfigLoader


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _configure_logging() -> Generator[None, None, None]:
    """Route framework logs to stderr at the configured level."""
    level = ConfigLoader().log_level()
    ConfigLoader.reset()

    logger.remove()
    sink_id = logger.add(
        sys.stderr,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}",
        level=level,
    )

    yield

    logger.remove(sink_id)
