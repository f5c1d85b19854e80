from .pages import RandomPageSelector
from .quotes import DEFAULT_ALLOWED_TAGS, QuoteExtractor, scrape_quote_candidates
from .sections import SectionSelector, pick_quote_sections

__all__ = [
    "DEFAULT_ALLOWED_TAGS",
    "QuoteExtractor",
    "RandomPageSelector",
    "SectionSelector",
    "pick_quote_sections",
    "scrape_quote_candidates",
]
