# ABOUTME: Tests for section rendering and quote candidate scraping
# ABOUTME: Pure markup tests for the scraper plus HTTP tests for the extractor

import pytest

from random_wikiquote.extraction.base import InvalidSectionError, QuoteBatch
from random_wikiquote.extraction.wiki.quotes import (
    DEFAULT_ALLOWED_TAGS,
    QuoteExtractor,
    scrape_quote_candidates,
)


class TestScrapeQuoteCandidates:
    def test_reference_marker_and_explanation_list(self):
        markup = "<ul><li>Hello <b>world</b> <sup>[1]</sup><ul><li>note</li></ul></li></ul>"
        assert scrape_quote_candidates(markup) == ["Hello world"]

    def test_rendered_section_wrapper(self):
        markup = (
            '<div class="mw-parser-output"><h3>Act I</h3>'
            "<ul>"
            '<li>Frailty, thy name is <a href="/wiki/Woman">woman</a>!'
            "<ul><li>Act I, scene ii</li></ul></li>"
            "<li>Neither a borrower nor a lender be.</li>"
            "</ul></div>"
        )
        assert scrape_quote_candidates(markup) == [
            "Frailty, thy name is woman!",
            "Neither a borrower nor a lender be.",
        ]

    def test_removed_element_leaves_word_boundary(self):
        markup = "<ul><li>first<span>noise</span>second</li></ul>"
        assert scrape_quote_candidates(markup) == ["first second"]

    def test_allowed_inline_markup_is_kept(self):
        markup = "<ul><li><i>Veni</i>, <strong>vidi</strong>, <em>vici</em> H<sub>2</sub>O</li></ul>"
        assert scrape_quote_candidates(markup) == ["Veni, vidi, vici H2O"]

    def test_whitespace_is_collapsed_and_trimmed(self):
        markup = "<ul><li>\n  Brevity   is\tthe soul\n\nof wit.  </li></ul>"
        assert scrape_quote_candidates(markup) == ["Brevity is the soul of wit."]

    def test_hidden_content_is_dropped(self):
        markup = (
            "<ul><li><b>Seen<script>var x = 1;</script></b>"
            ' <i>text<span style="display: none">hidden</span></i></li></ul>'
        )
        assert scrape_quote_candidates(markup) == ["Seen text"]

    def test_order_is_kept_and_duplicates_stay(self):
        markup = "<ul><li>Same line.</li><li>Other line.</li><li>Same line.</li></ul>"
        assert scrape_quote_candidates(markup) == ["Same line.", "Other line.", "Same line."]

    def test_every_top_level_list_counts(self):
        markup = "<ul><li>One</li></ul><p>text</p><ol><li>Two</li></ol>"
        assert scrape_quote_candidates(markup) == ["One", "Two"]

    def test_no_list_items(self):
        assert scrape_quote_candidates("<p>No quotes here.</p>") == []

    def test_custom_allow_list(self):
        markup = "<ul><li>Hello <b>world</b> <sup>[1]</sup></li></ul>"
        assert scrape_quote_candidates(markup, allowed_tags={"sup"}) == ["Hello [1]"]

    def test_default_allow_list_excludes_superscript_and_lists(self):
        assert "b" in DEFAULT_ALLOWED_TAGS
        assert "a" in DEFAULT_ALLOWED_TAGS
        assert "sup" not in DEFAULT_ALLOWED_TAGS
        assert "ul" not in DEFAULT_ALLOWED_TAGS


class TestQuoteExtractor:
    @pytest.fixture
    def extractor(self):
        return QuoteExtractor()

    @pytest.mark.asyncio
    async def test_extract_quotes(self, extractor, httpx_mock):
        markup = "<ul><li>To be or not to be, that is the question.</li><li>1997</li></ul>"
        httpx_mock.add_response(json={"parse": {"title": "Hamlet", "pageid": 42, "text": {"*": markup}}})

        batch = await extractor.extract_quotes(42, "2")

        assert batch == QuoteBatch(
            title="Hamlet", candidates=("To be or not to be, that is the question.", "1997")
        )
        params = httpx_mock.get_request().url.params
        assert params["action"] == "parse"
        assert params["pageid"] == "42"
        assert params["section"] == "2"
        assert "noimages" in params

    @pytest.mark.asyncio
    async def test_section_without_list_items(self, extractor, httpx_mock):
        httpx_mock.add_response(json={"parse": {"title": "Stub", "text": {"*": "<p>See also</p>"}}})

        batch = await extractor.extract_quotes(42, "1")

        assert batch.title == "Stub"
        assert batch.is_empty

    @pytest.mark.parametrize(
        "body",
        [
            {},
            {"error": {"code": "nosuchsection", "info": "There is no section 9."}},
            {"parse": {"title": "Hamlet"}},
        ],
    )
    @pytest.mark.asyncio
    async def test_invalid_section(self, extractor, httpx_mock, body):
        httpx_mock.add_response(json=body)

        with pytest.raises(InvalidSectionError):
            await extractor.extract_quotes(42, "9")

    @pytest.mark.asyncio
    async def test_custom_allow_list_is_used(self, httpx_mock):
        extractor = QuoteExtractor(allowed_tags={"B", "SUP"})
        markup = "<ul><li>Hello <b>world</b><sup>!</sup></li></ul>"
        httpx_mock.add_response(json={"parse": {"title": "T", "text": {"*": markup}}})

        batch = await extractor.extract_quotes(1, "1")

        assert batch.candidates == ("Hello world!",)
