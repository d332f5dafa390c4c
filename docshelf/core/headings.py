"""
Document Headings

Extracts the "on this page" outline of a page body.

Markdown: ATX headings outside fenced code blocks. Anchor ids are
"<slug>-<index>", falling back to "heading-<index>" for headings whose text
slugifies to nothing, where index counts headings from 0 in document order.

HTML (pages written in the rich-text editor): <h1>..<h6> elements, with
anchor ids "heading-<index>".
"""

import re
from dataclasses import dataclass

from bs4 import BeautifulSoup

from docshelf.config.constants import ContentType

_ATX_HEADING = re.compile(r"^ {0,3}(#{1,6})[ \t]+(.+?)[ \t#]*$")
_FENCE = re.compile(r"^ {0,3}(```|~~~)")
_INLINE_MARKERS = re.compile(r"[*_`#\[\]]")
_NON_WORD = re.compile(r"[^\w\s-]")
_WHITESPACE = re.compile(r"\s+")
_DASH_RUN = re.compile(r"--+")

_HTML_HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]


@dataclass(frozen=True)
class Heading:
    id: str
    text: str
    level: int


def heading_slug(text: str) -> str:
    """Slugify heading text the way the reader builds anchors."""
    slug = _INLINE_MARKERS.sub("", text.lower())
    slug = _NON_WORD.sub("", slug)
    slug = _WHITESPACE.sub("-", slug)
    # Trimmed last, so trailing punctuation can leave a trailing dash ("hello-")
    return _DASH_RUN.sub("-", slug).strip()


def heading_id(text: str, index: int) -> str:
    slug = heading_slug(text)
    return f"{slug}-{index}" if slug else f"heading-{index}"


def extract_headings(markdown: str) -> list[Heading]:
    """List ATX headings outside fenced code blocks.

    Args:
        markdown: Markdown source

    Returns:
        Headings in document order
    """
    headings: list[Heading] = []
    fence: str | None = None

    for line in (markdown or "").splitlines():
        fence_match = _FENCE.match(line)
        if fence_match:
            marker = fence_match.group(1)
            if fence is None:
                fence = marker
            elif fence == marker:
                fence = None
            continue
        if fence is not None:
            continue

        match = _ATX_HEADING.match(line)
        if not match:
            continue
        text = _INLINE_MARKERS.sub("", match.group(2)).strip()
        headings.append(
            Heading(
                id=heading_id(match.group(2), len(headings)),
                text=text,
                level=len(match.group(1)),
            )
        )

    return headings


def extract_html_headings(html: str) -> list[Heading]:
    """List <h1>..<h6> elements of an HTML body in document order."""
    soup = BeautifulSoup(html or "", "html.parser")
    return [
        Heading(
            id=f"heading-{index}",
            text=element.get_text().strip(),
            level=int(element.name[1]),
        )
        for index, element in enumerate(soup.find_all(_HTML_HEADING_TAGS))
    ]


def extract_content_headings(content: str, content_type: str) -> list[Heading]:
    """Dispatch on the storage format of a page body."""
    if content_type == ContentType.HTML.value:
        return extract_html_headings(content)
    return extract_headings(content)
