"""Serialise transform output to HTML or Markdown."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from bs4 import BeautifulSoup, Tag
from markdownify import markdownify  # type: ignore[import-untyped]

logger = logging.getLogger(__name__)

_EXCESSIVE_BLANK_LINES_RE = re.compile(r"\n{3,}")
_TRAILING_WHITESPACE_RE = re.compile(r"[ \t]+$", re.MULTILINE)
_INNER_SPACE_RUN_RE = re.compile(r"(?<=\S) {2,}(?=\S)")

# Children of a cell that markdownify would otherwise glue together
_CELL_BLOCK_TAGS: tuple[str, ...] = ("h1", "h2", "h3", "h4", "h5", "h6", "p", "div", "span")


def render_html(elements: Iterable[Tag]) -> str:
    """Concatenate the outer HTML of *elements*, one per line."""
    return "\n".join(str(el) for el in elements)


def _separate_cell_blocks(html: str) -> str:
    """Insert ``<br>`` between adjacent block children inside table cells.

    Cells are flattened to one Markdown line; without a break, headings and
    spans in the same cell run together ("ScienceRedefining …").
    """
    soup = BeautifulSoup(html, "html.parser")
    for td in soup.find_all("td"):
        for block in td.find_all(_CELL_BLOCK_TAGS):
            if block.find_next_sibling() is not None:
                block.insert_after(soup.new_tag("br"))
    return str(soup)


def elements_to_markdown(elements: Iterable[Tag]) -> str:
    """Convert *elements* to Markdown.

    Uses markdownify with ATX heading style, keeping placeholder images as
    ``![alt](src)`` inside table cells.  Post-processes to:
    - Strip trailing whitespace from lines
    - Collapse runs of spaces left between cell blocks
    - Collapse runs of more than two blank lines
    """
    html = render_html(elements)
    if not html.strip():
        return ""

    md = markdownify(
        _separate_cell_blocks(html),
        heading_style="ATX",
        bullets="-",
        keep_inline_images_in=["td"],
    )
    md = _TRAILING_WHITESPACE_RE.sub("", md)
    md = _INNER_SPACE_RUN_RE.sub(" ", md)
    md = _EXCESSIVE_BLANK_LINES_RE.sub("\n\n", md)
    return md.strip()
