"""
Bounded retry for CONFLICT outcomes.

Use cases are idempotent per attempt (each attempt opens and closes its own
transaction), so a CONFLICT can simply be run again.
"""

import logging
from typing import Awaitable, Callable, TypeVar

from vendor_lifecycle.domain import errors
from vendor_lifecycle.libs.result import Result

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def run_with_conflict_retry(
    operation: Callable[[], Awaitable[Result[T]]], attempts: int = 3
) -> Result[T]:
    """
    Run ``operation`` until it returns something other than CONFLICT,
    at most ``attempts`` times. The last result is returned as is.
    """
    if attempts < 1:
        raise ValueError("attempts must be at least 1")

    result = await operation()
    attempt = 1
    while (
        result.is_err()
        and result.error.code in errors.RETRYABLE
        and attempt < attempts
    ):
        attempt += 1
        logger.info("Retrying after %s (attempt %d/%d)", result.error.code, attempt, attempts)
        result = await operation()
    return result
