# ABOUTME: High-level service API that drives the random quote pipeline end to end
# ABOUTME: Each attempt runs page → sections → extraction → choice → validation, restarting fully on failure

from __future__ import annotations

import random

import httpx
from tenacity import RetryError

from random_wikiquote.config import QuoteFilterConfig, get_config
from random_wikiquote.core.models import AttemptOutcome, PipelineStage, QuoteResult
from random_wikiquote.core.validator import QuoteValidator
from random_wikiquote.extraction.base import EmptyCandidateSetError, QuoteAttemptError
from random_wikiquote.extraction.wiki.base import create_http_client
from random_wikiquote.extraction.wiki.pages import RandomPageSelector
from random_wikiquote.extraction.wiki.quotes import QuoteExtractor
from random_wikiquote.extraction.wiki.sections import SectionSelector
from random_wikiquote.utils.logging import with_pipeline_context
from random_wikiquote.utils.retry import RetryExhaustedError, pipeline_retrying


class RandomQuoteService:
    """Finds a random, validated quote within a bounded number of attempts.

    The filter config is held by reference: changing it through its setters while
    ``get_random_quote`` runs affects every validation that happens afterwards.
    A rejected candidate never leads to another pick from the same batch; the
    next attempt starts over with a new random page.
    """

    def __init__(
        self,
        filter_config: QuoteFilterConfig | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        attempt_limit: int | None = None,
        rng: random.Random | None = None,
        page_selector: RandomPageSelector | None = None,
        section_selector: SectionSelector | None = None,
        quote_extractor: QuoteExtractor | None = None,
    ):
        config = get_config()
        self.filter_config = filter_config or QuoteFilterConfig.from_config(config)
        self.validator = QuoteValidator(self.filter_config)
        self.attempt_limit = attempt_limit if attempt_limit is not None else config.attempt_limit
        if self.attempt_limit < 1:
            raise ValueError(f"attempt_limit must be at least 1, got {self.attempt_limit}")

        self.rng = rng or random.Random()
        # Only build a client when some stage is left for this service to construct
        stages_injected = None not in (page_selector, section_selector, quote_extractor)
        self._owns_client = client is None and not stages_injected
        self.http_client: httpx.AsyncClient | None = create_http_client() if self._owns_client else client
        self.page_selector = page_selector or RandomPageSelector(self.http_client)
        self.section_selector = section_selector or SectionSelector(self.http_client)
        self.quote_extractor = quote_extractor or QuoteExtractor(self.http_client)

    async def get_random_quote(self) -> QuoteResult:
        """Run the pipeline until a quote passes validation or the attempt budget is spent.

        Returns:
            The accepted quote and its page title

        Raises:
            RetryExhaustedError: If no attempt produced a valid quote
        """
        outcomes: list[AttemptOutcome] = []

        with with_pipeline_context("random_quote", attempt_limit=self.attempt_limit) as logger:
            try:
                async for attempt in pipeline_retrying(self.attempt_limit, retry_on=(QuoteAttemptError,)):
                    with attempt:
                        result = await self._run_attempt(attempt.retry_state.attempt_number, outcomes)
            except RetryError as e:
                last_error = e.last_attempt.exception()
                logger.warning(
                    "Retry limit reached",
                    attempts=len(outcomes),
                    error_type=type(last_error).__name__ if last_error else None,
                    reason=str(last_error) if last_error else None,
                )
                raise RetryExhaustedError(
                    attempts=len(outcomes),
                    last_reason=str(last_error) if last_error else None,
                    outcomes=outcomes,
                ) from last_error

            logger.info("Found quote", title=result.title, attempts=len(outcomes), quote_length=len(result.quote))
            return result

    async def _run_attempt(self, attempt_number: int, outcomes: list[AttemptOutcome]) -> QuoteResult:
        """One full pass through the pipeline. Records a tagged outcome whether it succeeds or not."""
        stage = PipelineStage.SELECTING
        page_id: int | None = None
        section_index: str | None = None

        try:
            page = await self.page_selector.select_random_page()
            page_id = page.id

            stage = PipelineStage.SECTIONING
            outline = await self.section_selector.select_sections(page.id)
            section_index = self.rng.choice(outline.section_indexes)

            stage = PipelineStage.EXTRACTING
            batch = await self.quote_extractor.extract_quotes(page.id, section_index)

            stage = PipelineStage.CHOOSING
            if batch.is_empty:
                raise EmptyCandidateSetError(f"Section {section_index} of page {page.id} has no quotes")
            candidate = self.rng.choice(batch.candidates)

            stage = PipelineStage.VALIDATING
            quote = self.validator.ensure_valid(candidate)
        except QuoteAttemptError as e:
            outcomes.append(
                AttemptOutcome(
                    attempt=attempt_number,
                    stage=stage,
                    page_id=page_id,
                    section_index=section_index,
                    error_type=type(e).__name__,
                    reason=str(e),
                )
            )
            raise

        outcomes.append(
            AttemptOutcome(
                attempt=attempt_number,
                stage=PipelineStage.SUCCEEDED,
                page_id=page_id,
                section_index=section_index,
            )
        )
        return QuoteResult(title=batch.title, quote=quote)

    async def close(self) -> None:
        if self._owns_client:
            await self.http_client.aclose()

    async def __aenter__(self) -> RandomQuoteService:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


async def get_random_quote(
    filter_config: QuoteFilterConfig | None = None, *, attempt_limit: int | None = None
) -> QuoteResult:
    """Get a random quote from a random page in the main namespace.

    Convenience wrapper that builds a service, runs it once and closes it.
    """
    async with RandomQuoteService(filter_config, attempt_limit=attempt_limit) as service:
        return await service.get_random_quote()
