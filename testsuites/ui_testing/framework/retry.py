# ================================================================================
# Retry Module
# ================================================================================
#
# Bounded retry for async UI interactions.
#
# Most interactions in this framework never retry: a timed-out wait is a test
# failure. Retry is reserved for interactions where an in-flight network
# request can swallow a single click (e.g. pagination).
#
# Usage:
#   await retry_async(lambda: go_to_next_page(), RetryConfig(max_attempts=3))
#
# ================================================================================

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, TypeVar

from loguru import logger

from .errors import ConfigurationError, RetryExhaustedError


T = TypeVar("T")


@dataclass(frozen=True)
class RetryConfig:
    """
    Configuration for retry behavior.

    Attributes:
        max_attempts: Maximum number of attempts (first try included)
        delay_seconds: Pause before the second attempt
        backoff_multiplier: Multiplier applied to the pause after each failure
        max_delay_seconds: Upper bound for the pause
    """
    max_attempts: int = 3
    delay_seconds: float = 1.0
    backoff_multiplier: float = 1.0
    max_delay_seconds: float = 5.0

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ConfigurationError(
                f"max_attempts must be at least 1, got {self.max_attempts}"
            )
        if self.delay_seconds < 0 or self.max_delay_seconds < 0:
            raise ConfigurationError(
                f"Retry delays must not be negative, got "
                f"delay_seconds={self.delay_seconds}, "
                f"max_delay_seconds={self.max_delay_seconds}"
            )


PAGINATION_RETRY = RetryConfig()


async def retry_async(
    operation: Callable[[], Awaitable[T]],
    config: Optional[RetryConfig] = None,
    description: str = "operation",
) -> T:
    """
    Await `operation()` until it succeeds or the attempt budget is spent.

    Args:
        operation: Zero-argument callable returning a fresh awaitable per attempt
        config: RetryConfig, PAGINATION_RETRY if omitted
        description: Human-readable name used in logs and the final error

    Returns:
        Result of the first successful attempt

    Raises:
        RetryExhaustedError: After `max_attempts` failures, chained to the last one
    """
    config = config or PAGINATION_RETRY
    delay = config.delay_seconds
    last_exception: Optional[Exception] = None

    for attempt in range(1, config.max_attempts + 1):
        try:
            return await operation()
        except Exception as e:
            last_exception = e
            if attempt < config.max_attempts:
                logger.warning(
                    f"Attempt {attempt}/{config.max_attempts} failed for "
                    f"{description}: {e}. Retrying in {delay}s..."
                )
                await asyncio.sleep(delay)
                delay = min(
                    delay * config.backoff_multiplier,
                    config.max_delay_seconds,
                )

    logger.error(
        f"All {config.max_attempts} attempts failed for {description}: "
        f"{last_exception}"
    )
    raise RetryExhaustedError(
        description, config.max_attempts, last_exception
    ) from last_exception


__all__ = [
    "PAGINATION_RETRY",
    "RetryConfig",
    "retry_async",
]
