# ABOUTME: Business logic and orchestration layer
# ABOUTME: Pipeline stages 4-5: candidate choice, validation and the bounded retry loop

"""
Core Layer: Quote filtering and pipeline orchestration

This layer handles:
- Content-quality validation of quote candidates
- The random quote service driving every extraction stage
- Public result models

Data Flow: extraction/ batches → Validation → QuoteResult
"""

from .models import AttemptOutcome, PipelineStage, QuoteResult
from .validator import QuoteValidator, digit_ratio

# Import service on-demand to avoid circular imports
# Use: from random_wikiquote.core.service import RandomQuoteService

__all__ = [
    "AttemptOutcome",
    "PipelineStage",
    "QuoteResult",
    "QuoteValidator",
    "digit_ratio",
]
