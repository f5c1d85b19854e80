# ABOUTME: Bounded whole-pipeline retry policy built on tenacity
# ABOUTME: Retries immediately (no backoff) and logs the rejection reason of every failed attempt

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
)

from random_wikiquote.utils.logging import get_logger

logger = get_logger(__name__)


class RetryExhaustedError(Exception):
    """Raised when every attempt of the quote pipeline failed."""

    def __init__(self, attempts: int, last_reason: str | None = None, outcomes: list | None = None):
        message = f"Retry limit reached after {attempts} attempts"
        if last_reason:
            message += f": {last_reason}"
        super().__init__(message)
        self.attempts = attempts
        self.last_reason = last_reason
        self.outcomes = outcomes or []


def _log_rejected_attempt(retry_state: RetryCallState) -> None:
    """Tenacity before_sleep hook: report why the attempt failed before the next one starts."""
    error = retry_state.outcome.exception() if retry_state.outcome else None
    logger.info(
        "Attempt failed, retrying",
        attempt=retry_state.attempt_number,
        error_type=type(error).__name__ if error else None,
        reason=str(error) if error else None,
    )


def pipeline_retrying(
    attempt_limit: int, retry_on: tuple[type[BaseException], ...] = (Exception,)
) -> AsyncRetrying:
    """Build the retry loop for one pipeline run.

    Only ``retry_on`` exceptions are retried; anything else propagates at once.
    When the budget runs out tenacity raises ``RetryError`` holding the last attempt.

    Args:
        attempt_limit: Total attempts, including the first one
        retry_on: Exception types that mark an attempt as failed but retryable

    Returns:
        An AsyncRetrying iterator, one item per attempt
    """
    if attempt_limit < 1:
        raise ValueError(f"attempt_limit must be at least 1, got {attempt_limit}")

    return AsyncRetrying(
        stop=stop_after_attempt(attempt_limit),
        retry=retry_if_exception_type(retry_on),
        before_sleep=_log_rejected_attempt,
        reraise=False,
    )
