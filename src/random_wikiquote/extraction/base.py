# ABOUTME: Failure taxonomy and intermediate models for the quote extraction stages
# ABOUTME: Every stage error derives from QuoteAttemptError so the pipeline can retry it

from pydantic import BaseModel, ConfigDict, Field


class QuoteAttemptError(Exception):
    """Raised when one pipeline attempt cannot produce a quote. Always retried."""

    pass


class RemoteError(QuoteAttemptError):
    """Raised on transport failure, timeout, non-2xx status or a malformed JSON body."""

    pass


class NoIdentifierError(QuoteAttemptError):
    """Raised when the random page response carries no usable page id."""

    pass


class InvalidSectionError(QuoteAttemptError):
    """Raised when the wiki reports that a page or section does not exist."""

    pass


class EmptyCandidateSetError(QuoteAttemptError):
    """Raised when a section yields no quotation candidates at all."""

    pass


class ValidationRejected(QuoteAttemptError):
    """Raised when the randomly chosen candidate fails the quote filter."""

    def __init__(self, candidate: str | None, reason: str):
        super().__init__(reason)
        self.candidate = candidate
        self.reason = reason


class PageRef(BaseModel):
    """A page picked at random from the main namespace."""

    model_config = ConfigDict(frozen=True)

    id: int


class SectionOutline(BaseModel):
    """The sections of a page that are likely to hold quotations."""

    model_config = ConfigDict(frozen=True)

    page_id: int
    title: str = Field(..., description="Canonical title, after redirects")
    section_indexes: tuple[str, ...] = Field(..., min_length=1)


class QuoteBatch(BaseModel):
    """Quotation candidates scraped from one rendered section, in document order."""

    model_config = ConfigDict(frozen=True)

    title: str
    candidates: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.candidates
