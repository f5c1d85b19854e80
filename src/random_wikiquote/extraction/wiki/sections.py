# ABOUTME: Reads the section outline of a page and picks the sections that hold quotations
# ABOUTME: On this wiki quotes usually live under the "1.x" subsections of the first heading

from typing import Any

from random_wikiquote.extraction.base import InvalidSectionError, SectionOutline
from random_wikiquote.extraction.wiki.base import BaseWikiquoteClient

FALLBACK_SECTION_INDEX = "1"


def pick_quote_sections(sections: list[dict[str, Any]]) -> tuple[str, ...]:
    """Return the indexes of every "1.x" subsection, or ("1",) when there are none.

    Args:
        sections: Flat outline entries, each with an ``index`` and a dotted ``number``

    Returns:
        Section indexes in outline order, never empty
    """
    indexes = []
    for section in sections:
        parts = str(section.get("number", "")).split(".")
        if len(parts) > 1 and parts[0] == "1" and section.get("index") is not None:
            indexes.append(str(section["index"]))

    return tuple(indexes) or (FALLBACK_SECTION_INDEX,)


class SectionSelector(BaseWikiquoteClient):
    """Asks the wiki for the outline of a page."""

    async def select_sections(self, page_id: int) -> SectionOutline:
        data = await self._get_json({"action": "parse", "prop": "sections", "pageid": page_id})

        parsed = data.get("parse")
        if not isinstance(parsed, dict):
            raise InvalidSectionError(f"Page {page_id} has no parsable outline")

        sections = [s for s in parsed.get("sections") or [] if isinstance(s, dict)]
        indexes = pick_quote_sections(sections)

        self.logger.debug(
            "Selected candidate sections",
            page_id=page_id,
            title=parsed.get("title"),
            outline_size=len(sections),
            section_indexes=list(indexes),
        )
        return SectionOutline(page_id=page_id, title=str(parsed.get("title") or ""), section_indexes=indexes)
