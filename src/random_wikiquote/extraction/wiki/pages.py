# ABOUTME: Picks a random article from the main namespace of the quotation wiki
# ABOUTME: First stage of the quote pipeline, yields the page id every later stage works on

from random_wikiquote.extraction.base import NoIdentifierError, PageRef
from random_wikiquote.extraction.wiki.base import BaseWikiquoteClient

# Main/content namespace only: no talk pages, categories, user pages
MAIN_NAMESPACE = 0


class RandomPageSelector(BaseWikiquoteClient):
    """Asks the wiki for one random article id."""

    async def select_random_page(self) -> PageRef:
        data = await self._get_json(
            {"action": "query", "list": "random", "rnnamespace": MAIN_NAMESPACE, "rnlimit": 1}
        )

        query = data.get("query")
        random_pages = query.get("random") if isinstance(query, dict) else None
        first = random_pages[0] if isinstance(random_pages, list) and random_pages else None
        page_id = first.get("id") if isinstance(first, dict) else None

        # bool is an int subclass, reject it along with 0 and non-integers
        if not isinstance(page_id, int) or isinstance(page_id, bool) or page_id <= 0:
            raise NoIdentifierError(f"Invalid random page id: {page_id!r}")

        self.logger.debug("Selected random page", page_id=page_id)
        return PageRef(id=page_id)
