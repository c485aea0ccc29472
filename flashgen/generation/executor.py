# flashgen/generation/executor.py
"""
Deadline + bounded retry around one async unit of work.

Per attempt the work races a timer; a lost race counts as a TIMEOUT
failure and the attempt is abandoned (asyncio cancels the task; work
already handed to a thread keeps running). Failures go through
`is_retryable`; retry-eligible ones are retried after a fixed backoff
until `max_retries` extra attempts are used up. Does not log.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, TypeVar

from flashgen.generation.errors import (
    GenerationFailure,
    GenerationFailureCategory,
    is_retryable_failure,
)

T = TypeVar("T")

RetryHook = Callable[[int, BaseException], None]


class RetryingTimeoutExecutor:
    def __init__(
        self,
        *,
        backoff_seconds: float = 1.0,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.backoff_seconds = backoff_seconds
        self._sleep = sleep

    async def run(
        self,
        work: Callable[[], Awaitable[T]],
        *,
        timeout_seconds: float,
        max_retries: int = 2,
        is_retryable: Callable[[BaseException], bool] = is_retryable_failure,
        on_retry: RetryHook | None = None,
    ) -> T:
        attempt = 0
        while True:
            try:
                return await asyncio.wait_for(work(), timeout=timeout_seconds)
            except asyncio.TimeoutError as e:
                failure: Exception = GenerationFailure(
                    GenerationFailureCategory.TIMEOUT,
                    f"Generation attempt timed out after {timeout_seconds:g} seconds",
                )
                failure.__cause__ = e
            except Exception as e:
                failure = e

            if attempt >= max_retries or not is_retryable(failure):
                raise failure

            attempt += 1
            if on_retry is not None:
                on_retry(attempt, failure)
            await self._sleep(self.backoff_seconds)
