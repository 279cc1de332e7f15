"""
Bounded retry with exponential backoff, backed by Tenacity.

Rate limits, 5xx responses, client-side timeouts and connection failures are
retried up to ``ClientConfig.max_retries`` times; every other error is raised
on its first occurrence. The ``k``-th retry is preceded by a sleep of
``retry_delay * 2 ** (k - 1)`` seconds, without jitter. When retries run out
the last error is re-raised unchanged.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Optional, TypeVar

from tenacity import (
    RetryCallState,
    Retrying,
    before_sleep_log,
    retry_if_exception,
    stop_after_attempt,
    stop_after_delay,
)

from .config import ClientConfig
from .errors import (
    ApiError,
    RateLimitError,
    RequestCancelledError,
    RequestTimeoutError,
    TransportError,
)

__all__ = ["RetryController", "is_retryable", "retry_delay"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


def is_retryable(error: BaseException) -> bool:
    """Return True if another attempt may succeed where ``error`` failed."""
    if isinstance(error, (RateLimitError, RequestTimeoutError)):
        return True
    if isinstance(error, ApiError):
        return error.kind.is_retryable
    if isinstance(error, TransportError):
        return error.connect
    return False


def retry_delay(base_delay: float, attempt: int) -> float:
    """Seconds to wait before retry number ``attempt`` (1-indexed)."""
    if attempt < 1:
        raise ValueError("attempt numbers start at 1")
    return base_delay * 2 ** (attempt - 1)


class RetryController:
    """
    Drives one logical call to completion.

    ``sleep`` is the blocking wait used between attempts; tests substitute a
    recorder for it.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.config = config
        self._sleep = sleep

    def _stop(self, deadline: Optional[float]):
        stop = stop_after_attempt(self.config.max_retries + 1)
        if deadline is not None:
            stop = stop | stop_after_delay(deadline)
        return stop

    def _wait(self, retry_state: RetryCallState) -> float:
        # attempt_number counts the attempts made so far, i.e. the upcoming retry.
        return retry_delay(self.config.retry_delay, retry_state.attempt_number)

    def _sleeper(self, cancel: Optional[threading.Event]) -> Callable[[float], None]:
        if cancel is None:
            return self._sleep

        def sleep(seconds: float) -> None:
            if cancel.wait(seconds):
                raise RequestCancelledError("call cancelled during retry backoff")

        return sleep

    def run(
        self,
        attempt: Callable[[], T],
        *,
        cancel: Optional[threading.Event] = None,
        deadline: Optional[float] = None,
    ) -> T:
        """
        Call ``attempt`` until it returns, raises a terminal error, or the
        retry budget (``max_retries`` retries, or ``deadline`` seconds) is spent.
        """

        def guarded() -> T:
            if cancel is not None and cancel.is_set():
                raise RequestCancelledError("call cancelled before attempt")
            return attempt()

        retrying = Retrying(
            stop=self._stop(deadline),
            wait=self._wait,
            retry=retry_if_exception(is_retryable),
            sleep=self._sleeper(cancel),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )
        return retrying(guarded)
