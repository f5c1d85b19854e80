# ABOUTME: Content-quality filter deciding whether a scraped candidate counts as a quote
# ABOUTME: Reads thresholds from the shared QuoteFilterConfig on every call

import re

from random_wikiquote.config import QuoteFilterConfig
from random_wikiquote.extraction.base import ValidationRejected

_DIGIT = re.compile(r"[0-9]")


def digit_ratio(text: str) -> float:
    """Share of characters in ``text`` that are decimal digits, 0.0 for empty text."""
    if not text:
        return 0.0
    return len(_DIGIT.findall(text)) / len(text)


class QuoteValidator:
    """Accepts or rejects quote candidates by length and digit share."""

    def __init__(self, config: QuoteFilterConfig | None = None):
        self.config = config or QuoteFilterConfig()

    def rejection_reason(self, candidate: str | None) -> str | None:
        """Return why ``candidate`` is rejected, or None when it passes."""
        if not candidate:
            return "empty candidate"

        length = len(candidate)
        if length < self.config.min_length:
            return f"too short ({length} < {self.config.min_length})"
        if length > self.config.max_length:
            return f"too long ({length} > {self.config.max_length})"

        ratio = digit_ratio(candidate)
        if ratio > self.config.numeric_limit:
            return f"too numeric ({ratio:.2f} > {self.config.numeric_limit})"

        return None

    def validate(self, candidate: str | None) -> bool:
        return self.rejection_reason(candidate) is None

    def ensure_valid(self, candidate: str | None) -> str:
        """Return ``candidate`` unchanged if it passes, raise ValidationRejected otherwise."""
        reason = self.rejection_reason(candidate)
        if reason is not None:
            raise ValidationRejected(candidate, reason)
        return candidate  # type: ignore[return-value]
