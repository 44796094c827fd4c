"""
================================================================================
Framework Errors
================================================================================

Exceptions raised by the UI framework itself.

Waits that time out are NOT wrapped: Playwright's own `TimeoutError`
propagates to the test unchanged.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Optional


class ConfigurationError(Exception):
    """Raised when configuration loading or selector overrides are invalid."""
    pass


class RetryExhaustedError(Exception):
    """
    Raised when a bounded retry consumed its whole budget.

    Attributes:
        attempts: Number of attempts made
        last_error: Exception raised by the final attempt
    """

    def __init__(
        self,
        description: str,
        attempts: int,
        last_error: Optional[BaseException] = None,
    ):
        self.description = description
        self.attempts = attempts
        self.last_error = last_error
        super().__init__(
            f"{description} failed after {attempts} attempts: {last_error}"
        )


__all__ = [
    "ConfigurationError",
    "RetryExhaustedError",
]
