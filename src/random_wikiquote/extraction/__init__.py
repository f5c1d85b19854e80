# ABOUTME: Data extraction from the quotation wiki API
# ABOUTME: Pipeline stages 1-3: random page, section outline, quote candidates

"""
Extraction Layer: Get raw quote candidates from the wiki

This layer handles:
- Random page selection in the main namespace
- Section outline lookup and quote-section selection
- Section rendering and list-item scraping

Data Flow: Wiki API → PageRef → SectionOutline → QuoteBatch → Core layer
"""

from .base import (
    EmptyCandidateSetError,
    InvalidSectionError,
    NoIdentifierError,
    PageRef,
    QuoteAttemptError,
    QuoteBatch,
    RemoteError,
    SectionOutline,
    ValidationRejected,
)

__all__ = [
    "EmptyCandidateSetError",
    "InvalidSectionError",
    "NoIdentifierError",
    "PageRef",
    "QuoteAttemptError",
    "QuoteBatch",
    "RemoteError",
    "SectionOutline",
    "ValidationRejected",
]
