"""Bounded retry with exponential backoff for outbound calls.

Both the translator and the Slack notifier go through bounded_retry(): only
failures carrying a transient HTTP status are retried, everything else
propagates on the first attempt.
"""

from typing import Callable, Optional

from tenacity import AsyncRetrying, RetryCallState, retry_if_exception, stop_after_attempt

from .log import get_logger

logger = get_logger("retry")

TRANSIENT_STATUSES = frozenset({429, 500, 502, 503, 504})
MAX_ATTEMPTS = 3
BACKOFF_BASE = 5.0


def status_of(exc: BaseException) -> Optional[int]:
    """HTTP status carried by an SDK exception (openai, slack_sdk, httpx), if any."""
    status = getattr(exc, "status_code", None)
    if status is None:
        status = getattr(getattr(exc, "response", None), "status_code", None)
    return status if isinstance(status, int) else None


def is_transient(exc: BaseException) -> bool:
    return status_of(exc) in TRANSIENT_STATUSES


def wait_backoff(base: float) -> Callable[[RetryCallState], float]:
    """tenacity wait strategy sleeping base ** attempt_number seconds."""
    def _wait(retry_state: RetryCallState) -> float:
        return base ** retry_state.attempt_number
    return _wait


def bounded_retry(
    is_retryable: Callable[[BaseException], bool] = is_transient,
    max_attempts: int = MAX_ATTEMPTS,
    backoff_base: float = BACKOFF_BASE,
    name: str = "upstream",
) -> AsyncRetrying:
    """
    Build an AsyncRetrying controller for use as:

        async for attempt in bounded_retry():
            with attempt:
                result = await call()

    Raises tenacity.RetryError once max_attempts retryable failures are seen.
    Non-retryable exceptions are re-raised unchanged.
    """
    def _log_retry(retry_state: RetryCallState) -> None:
        exc = retry_state.outcome.exception()
        delay = retry_state.next_action.sleep if retry_state.next_action else 0
        logger.warning(
            f"{name}: transient status {status_of(exc)}, retrying in {delay:.0f}s "
            f"(attempt {retry_state.attempt_number}/{max_attempts})"
        )

    return AsyncRetrying(
        retry=retry_if_exception(is_retryable),
        stop=stop_after_attempt(max_attempts),
        wait=wait_backoff(backoff_base),
        before_sleep=_log_retry,
        reraise=False,
    )
