"""Exponential backoff with jitter around a single fetch operation."""

from __future__ import annotations

import asyncio
import logging
import random
from typing import Any, Awaitable, Callable, TypeVar

from tenacity import AsyncRetrying, RetryCallState, retry_if_exception, stop_after_attempt
from tenacity.wait import wait_base

from ppnfl.fetch.errors import status_of


logger = logging.getLogger("uvicorn.error")

T = TypeVar("T")

DEFAULT_MAX_ATTEMPTS = 4
BASE_DELAY_SECONDS = 1.0
MAX_DELAY_SECONDS = 30.0
MAX_JITTER_MS = 500


def is_retryable(exc: BaseException) -> bool:
    """Only rate limiting (429) and server-side (5xx) failures are retried."""

    status = status_of(exc)
    return status == 429 or status >= 500


def backoff_delay(attempt: int, *, rng: random.Random | None = None) -> float:
    """Seconds to wait before ``attempt`` (2 for the first retry)."""

    jitter_ms = (rng or random).randint(0, MAX_JITTER_MS)
    return min(MAX_DELAY_SECONDS, (2 ** attempt) * BASE_DELAY_SECONDS + jitter_ms / 1000.0)


class wait_exponential_jitter_before(wait_base):
    """tenacity wait that delays the upcoming attempt by :func:`backoff_delay`."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng

    def __call__(self, retry_state: RetryCallState) -> float:
        return backoff_delay(retry_state.attempt_number + 1, rng=self.rng)


def _log_backoff(retry_state: RetryCallState) -> None:
    delay = retry_state.next_action.sleep if retry_state.next_action else 0.0
    exc = retry_state.outcome.exception() if retry_state.outcome else None
    logger.info(
        "[backoff] attempt %s waiting %dms (status=%s)",
        retry_state.attempt_number,
        int(delay * 1000),
        status_of(exc) if exc is not None else 0,
    )


async def call_with_backoff(
    operation: Callable[[], Awaitable[T]],
    *,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    rng: random.Random | None = None,
) -> T:
    """Await ``operation`` until it succeeds or a failure is final.

    ``max_attempts`` counts the first try. Non-retryable failures propagate
    after a single attempt; once attempts are exhausted the last failure is
    re-raised unchanged.
    """

    async def _attempt() -> T:
        return await operation()

    retrying = AsyncRetrying(
        stop=stop_after_attempt(max(1, max_attempts)),
        wait=wait_exponential_jitter_before(rng),
        retry=retry_if_exception(is_retryable),
        before_sleep=_log_backoff,
        sleep=sleep,
        reraise=True,
    )
    return await retrying(_attempt)
