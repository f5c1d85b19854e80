# ABOUTME: Random, validated quotes from random pages of English Wikiquote
# ABOUTME: Public entry points: get_random_quote, RandomQuoteService and QuoteFilterConfig

from random_wikiquote.config import DEFAULT_ATTEMPT_LIMIT, QuoteFilterConfig
from random_wikiquote.core.models import QuoteResult
from random_wikiquote.core.service import RandomQuoteService, get_random_quote
from random_wikiquote.utils.retry import RetryExhaustedError

__all__ = [
    "DEFAULT_ATTEMPT_LIMIT",
    "QuoteFilterConfig",
    "QuoteResult",
    "RandomQuoteService",
    "RetryExhaustedError",
    "get_random_quote",
]
