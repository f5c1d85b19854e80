# ABOUTME: Tests for the bounded pipeline retry policy built on tenacity
# ABOUTME: Validates attempt counting, retryable vs. fatal errors and the exhaustion error

import pytest
from tenacity import RetryError

from random_wikiquote.utils.retry import RetryExhaustedError, pipeline_retrying


class FlakyError(Exception):
    pass


class TestRetryExhaustedError:
    def test_message_includes_last_reason(self):
        error = RetryExhaustedError(attempts=7, last_reason="too short (4 < 20)")
        assert str(error) == "Retry limit reached after 7 attempts: too short (4 < 20)"
        assert error.attempts == 7
        assert error.outcomes == []

    def test_message_without_reason(self):
        assert str(RetryExhaustedError(attempts=3)) == "Retry limit reached after 3 attempts"


class TestPipelineRetrying:
    @pytest.mark.asyncio
    async def test_stops_after_limit(self):
        call_count = 0

        with pytest.raises(RetryError) as exc_info:
            async for attempt in pipeline_retrying(4, retry_on=(FlakyError,)):
                with attempt:
                    call_count += 1
                    raise FlakyError(f"attempt {call_count}")

        assert call_count == 4
        assert str(exc_info.value.last_attempt.exception()) == "attempt 4"

    @pytest.mark.asyncio
    async def test_returns_on_success(self):
        call_count = 0

        async for attempt in pipeline_retrying(5, retry_on=(FlakyError,)):
            with attempt:
                call_count += 1
                if call_count < 3:
                    raise FlakyError("not yet")

        assert call_count == 3

    @pytest.mark.asyncio
    async def test_other_errors_propagate_immediately(self):
        call_count = 0

        with pytest.raises(KeyError):
            async for attempt in pipeline_retrying(5, retry_on=(FlakyError,)):
                with attempt:
                    call_count += 1
                    raise KeyError("fatal")

        assert call_count == 1

    def test_rejects_non_positive_limit(self):
        with pytest.raises(ValueError, match="at least 1"):
            pipeline_retrying(0)
