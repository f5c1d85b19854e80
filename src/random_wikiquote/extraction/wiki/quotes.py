# ABOUTME: Renders one wiki section and scrapes quotation candidates out of its list markup
# ABOUTME: Each top-level list item is one candidate; noise children become spaces before text extraction

import re
from collections.abc import Iterable

import httpx
from bs4 import BeautifulSoup, Tag

from random_wikiquote.extraction.base import InvalidSectionError, QuoteBatch
from random_wikiquote.extraction.wiki.base import BaseWikiquoteClient

# Inline elements that can carry the quote or parts of it. Superscripts are left out
# because on this wiki they are reference markers ("[1]"), not quote text.
DEFAULT_ALLOWED_TAGS = frozenset(
    {
        "a",
        "b",
        "i",
        "strong",
        "em",
        "mark",
        "small",
        "del",
        "s",
        "ins",
        "sub",
        "abbr",
        "code",
        "pre",
        "dfn",
        "samp",
        "kbd",
        "tt",
    }
)

HIDDEN_TAGS = ["script", "style", "noscript"]
_DISPLAY_NONE = re.compile(r"display\s*:\s*none", re.IGNORECASE)
_WHITESPACE = re.compile(r"\s+")


def _top_level_items(soup: BeautifulSoup) -> list[Tag]:
    return [item for item in soup.find_all("li") if item.find_parent("li") is None]


def _strip_hidden(item: Tag) -> None:
    hidden = item.find_all(HIDDEN_TAGS) + item.find_all(style=_DISPLAY_NONE)
    for tag in hidden:
        if not tag.decomposed:
            tag.decompose()


def scrape_quote_candidates(markup: str, allowed_tags: Iterable[str] = DEFAULT_ALLOWED_TAGS) -> list[str]:
    """Pull one plain-text candidate out of every top-level list item in the markup.

    Immediate children outside ``allowed_tags`` (reference markers, nested
    explanation lists, ...) are swapped for a single space so the words around
    them do not run together. Whitespace is collapsed and trimmed. Order is kept
    and duplicates are not removed.

    Args:
        markup: Rendered HTML of one section
        allowed_tags: Lowercase tag names kept as part of the quote

    Returns:
        Candidate strings in document order, possibly empty
    """
    allowed = {tag.lower() for tag in allowed_tags}
    soup = BeautifulSoup(markup, "html.parser")

    candidates = []
    for item in _top_level_items(soup):
        # Copy the children first, replacing while iterating the live list skips elements
        for child in list(item.children):
            if isinstance(child, Tag) and child.name.lower() not in allowed:
                child.replace_with(" ")

        _strip_hidden(item)
        text = _WHITESPACE.sub(" ", item.get_text()).strip()
        candidates.append(text)

    return candidates


class QuoteExtractor(BaseWikiquoteClient):
    """Asks the wiki to render one section and scrapes its quotation candidates."""

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        allowed_tags: Iterable[str] = DEFAULT_ALLOWED_TAGS,
    ):
        super().__init__(client)
        self.allowed_tags = frozenset(tag.lower() for tag in allowed_tags)

    async def extract_quotes(self, page_id: int, section_index: str) -> QuoteBatch:
        data = await self._get_json(
            {"action": "parse", "noimages": "", "pageid": page_id, "section": section_index}
        )

        # Some pages have no valid sections
        parsed = data.get("parse")
        if not isinstance(parsed, dict):
            raise InvalidSectionError(f"Section {section_index} of page {page_id} is not valid")

        text = parsed.get("text")
        markup = text.get("*") if isinstance(text, dict) else None
        if not isinstance(markup, str):
            raise InvalidSectionError(f"Section {section_index} of page {page_id} has no markup")

        candidates = scrape_quote_candidates(markup, self.allowed_tags)

        self.logger.debug(
            "Scraped quote candidates",
            page_id=page_id,
            section_index=section_index,
            candidate_count=len(candidates),
        )
        return QuoteBatch(title=str(parsed.get("title") or ""), candidates=tuple(candidates))
