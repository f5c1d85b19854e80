# ABOUTME: Public result models of the random quote pipeline
# ABOUTME: QuoteResult is the terminal artifact, AttemptOutcome records one pipeline attempt

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class QuoteResult(BaseModel):
    """An accepted quote and the page it came from.

    The title can be the person who said it, but also the show, film, game or
    book the quote is from.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    quote: str


class PipelineStage(str, Enum):
    """States an attempt passes through before it succeeds or fails."""

    SELECTING = "selecting"
    SECTIONING = "sectioning"
    EXTRACTING = "extracting"
    CHOOSING = "choosing"
    VALIDATING = "validating"
    SUCCEEDED = "succeeded"


class AttemptOutcome(BaseModel):
    """Tagged result of one pipeline attempt."""

    model_config = ConfigDict(frozen=True)

    attempt: int = Field(..., ge=1)
    stage: PipelineStage = Field(..., description="Stage reached; the failing stage when not successful")
    page_id: int | None = None
    section_index: str | None = None
    error_type: str | None = None
    reason: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.stage is PipelineStage.SUCCEEDED
