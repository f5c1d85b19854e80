# ABOUTME: Tests for the quote content filter
# ABOUTME: Covers length bounds, digit share, empty input and live config reads

import pytest

from random_wikiquote.config import QuoteFilterConfig
from random_wikiquote.core.validator import QuoteValidator, digit_ratio
from random_wikiquote.extraction.base import ValidationRejected

HAMLET = "To be or not to be, that is the question."


class TestDigitRatio:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("1997", 1.0),
            ("abcd", 0.0),
            ("ab12", 0.5),
            ("", 0.0),
        ],
    )
    def test_digit_ratio(self, text, expected):
        assert digit_ratio(text) == expected


class TestQuoteValidator:
    """Default thresholds: 20 <= length <= 300, digit share <= 0.1"""

    @pytest.fixture
    def validator(self):
        return QuoteValidator(QuoteFilterConfig())

    @pytest.mark.parametrize("candidate", ["", None])
    def test_empty_input_is_rejected(self, validator, candidate):
        assert validator.validate(candidate) is False
        assert validator.rejection_reason(candidate) == "empty candidate"

    def test_empty_input_is_rejected_even_with_zero_thresholds(self):
        validator = QuoteValidator(QuoteFilterConfig(min_length=0, max_length=0, numeric_limit=1.0))
        assert validator.validate("") is False
        assert validator.validate(None) is False

    def test_accepts_prose(self, validator):
        assert validator.validate(HAMLET) is True
        assert validator.rejection_reason(HAMLET) is None

    def test_rejects_date_only_candidate(self, validator):
        assert validator.validate("1997") is False

    def test_length_bounds_are_inclusive(self, validator):
        assert validator.validate("a" * 20) is True
        assert validator.validate("a" * 19) is False
        assert validator.validate("a" * 300) is True
        assert validator.validate("a" * 301) is False

    def test_numeric_limit_is_inclusive(self, validator):
        # 2 digits out of 20 characters is exactly 0.1
        assert validator.validate("12" + "a" * 18) is True
        # 3 out of 20 is 0.15
        assert validator.validate("123" + "a" * 17) is False

    def test_rejection_reasons(self, validator):
        assert validator.rejection_reason("short").startswith("too short")
        assert validator.rejection_reason("a" * 301).startswith("too long")
        assert validator.rejection_reason("In 1997 and 1998 and 1999.").startswith("too numeric")

    def test_reads_config_at_call_time(self):
        config = QuoteFilterConfig()
        validator = QuoteValidator(config)
        assert validator.validate(HAMLET) is True

        config.set_max_length(10)
        assert validator.validate(HAMLET) is False

        config.set_max_length(300)
        config.set_min_length(len(HAMLET) + 1)
        assert validator.validate(HAMLET) is False

    def test_numeric_limit_setter_takes_effect(self):
        config = QuoteFilterConfig()
        validator = QuoteValidator(config)
        candidate = "Chapter 12, verse 34 of the old book"
        assert validator.validate(candidate) is False

        config.set_numeric_limit(0.5)
        assert validator.validate(candidate) is True

    def test_validate_is_idempotent(self, validator):
        for candidate in [HAMLET, "1997", "", "x" * 500]:
            assert validator.validate(candidate) == validator.validate(candidate)

    def test_ensure_valid_returns_candidate(self, validator):
        assert validator.ensure_valid(HAMLET) == HAMLET

    def test_ensure_valid_raises_with_reason(self, validator):
        with pytest.raises(ValidationRejected, match="too short") as exc_info:
            validator.ensure_valid("1997")

        assert exc_info.value.candidate == "1997"
        assert exc_info.value.reason.startswith("too short")

    def test_default_config_when_none_given(self):
        validator = QuoteValidator()
        assert validator.config.min_length == 20
        assert validator.config.max_length == 300
        assert validator.config.numeric_limit == 0.1
