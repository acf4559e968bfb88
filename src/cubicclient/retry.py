"""Bounded retry with linear backoff for transient HTTP failures."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, TypeVar

import httpx

logger = logging.getLogger(__name__)

T = TypeVar("T")

BACKOFF_STEP_SECONDS = 1.0


def linear_backoff(attempt: int) -> float:
    """Delay before retrying after failed attempt ``attempt`` (0-based): 1s, 2s, 3s..."""
    return BACKOFF_STEP_SECONDS * (attempt + 1)


def is_transient(exc: BaseException) -> bool:
    """Timeouts, DNS failures, refused connections and 5xx responses are worth retrying.

    ``asyncio.TimeoutError`` is what the per-attempt deadline raises; it is a
    separate class from ``TimeoutError`` before Python 3.11.
    """
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code >= 500
    # ConnectError covers both name resolution failures and refused connections.
    return isinstance(
        exc, (httpx.TimeoutException, httpx.ConnectError, asyncio.TimeoutError, TimeoutError)
    )


@dataclass(frozen=True)
class RetryPolicy:
    """Re-issue a failed attempt up to ``max_retries`` extra times.

    The attempt counter lives inside ``run``, so one policy can be shared by
    any number of concurrent calls.
    """

    max_retries: int
    backoff: Callable[[int], float] = linear_backoff
    is_retryable: Callable[[BaseException], bool] = is_transient

    async def run(self, attempt_fn: Callable[[], Awaitable[T]]) -> T:
        attempt = 0
        while True:
            try:
                return await attempt_fn()
            except Exception as e:
                if attempt >= self.max_retries or not self.is_retryable(e):
                    raise
                delay = self.backoff(attempt)
                logger.warning(
                    f"Attempt {attempt + 1}/{self.max_retries + 1} failed ({_describe(e)}), "
                    f"retrying in {delay:.1f}s"
                )
                await asyncio.sleep(delay)
                attempt += 1


def _describe(exc: BaseException) -> str:
    if isinstance(exc, (asyncio.TimeoutError, TimeoutError)):
        return "deadline exceeded"
    if isinstance(exc, httpx.HTTPStatusError):
        return f"HTTP {exc.response.status_code}"
    return type(exc).__name__
