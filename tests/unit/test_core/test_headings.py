"""
Document Heading Tests

Unit tests for the "on this page" outline.
"""

from docshelf.core.headings import (
    extract_content_headings,
    extract_headings,
    extract_html_headings,
    heading_slug,
)


class TestMarkdownHeadings:
    """Tests for extract_headings()."""

    def test_levels_and_ids(self) -> None:
        """ATX headings give level, text and an indexed anchor."""
        headings = extract_headings("# Intro\n\ntext\n\n## Getting Started\n")

        assert [(h.id, h.text, h.level) for h in headings] == [
            ("intro-0", "Intro", 1),
            ("getting-started-1", "Getting Started", 2),
        ]

    def test_fenced_code_ignored(self) -> None:
        """Lines inside fenced code blocks are not headings."""
        markdown = "# Real\n\n```bash\n# not a heading\n```\n\n## Also Real\n"

        headings = extract_headings(markdown)

        assert [h.text for h in headings] == ["Real", "Also Real"]

    def test_requires_space_after_hashes(self) -> None:
        """'#tag' is not a heading."""
        assert extract_headings("#tag\n") == []

    def test_closing_hashes_stripped(self) -> None:
        """Optional closing sequence is not part of the text."""
        headings = extract_headings("## Title ##\n")

        assert headings[0].text == "Title"

    def test_inline_markup_removed(self) -> None:
        """Emphasis and code markers are dropped from the text."""
        headings = extract_headings("## The `flatten` **function**\n")

        assert headings[0].text == "The flatten function"

    def test_unsluggable_heading(self) -> None:
        """Headings with no word characters fall back to heading-<index>."""
        headings = extract_headings("# !!!\n")

        assert headings[0].id == "heading-0"

    def test_empty_source(self) -> None:
        """Empty or missing markdown has no headings."""
        assert extract_headings("") == []
        assert extract_headings(None) == []

    def test_heading_slug(self) -> None:
        """Punctuation is dropped and whitespace runs become one dash."""
        assert heading_slug("Hello,   World!") == "hello-world"

    def test_trailing_punctuation_keeps_dash(self) -> None:
        """Whitespace before dropped punctuation still becomes a dash."""
        assert heading_slug("Hello !") == "hello-"
        assert extract_headings("# Hello !\n")[0].id == "hello--0"


class TestHtmlHeadings:
    """Tests for extract_html_headings()."""

    def test_levels_and_ids(self) -> None:
        """Every h1..h6 element is listed with a positional anchor."""
        html = "<h1>Title</h1><p>x</p><h3> Details </h3><h6>Fine print</h6>"

        headings = extract_html_headings(html)

        assert [(h.id, h.text, h.level) for h in headings] == [
            ("heading-0", "Title", 1),
            ("heading-1", "Details", 3),
            ("heading-2", "Fine print", 6),
        ]

    def test_nested_markup_text(self) -> None:
        """Text of nested inline elements is included."""
        headings = extract_html_headings("<h2>Using <code>flatten</code></h2>")

        assert headings[0].text == "Using flatten"

    def test_no_headings(self) -> None:
        """Paragraph-only bodies have no outline."""
        assert extract_html_headings("<p>Just text</p>") == []
        assert extract_html_headings("") == []


class TestContentHeadings:
    """Tests for extract_content_headings()."""

    def test_dispatch_on_content_type(self) -> None:
        """HTML bodies use the HTML parser, everything else markdown."""
        assert extract_content_headings("<h2>A</h2>", "html")[0].id == "heading-0"
        assert extract_content_headings("## A\n", "markdown")[0].id == "a-0"
