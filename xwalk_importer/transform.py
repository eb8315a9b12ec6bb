"""Page transform: our-stories document → ordered list of xwalk elements."""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup, Tag

from xwalk_importer.dom import make, new_document
from xwalk_importer.sections import SectionResult, run_sections

logger = logging.getLogger(__name__)


def assemble(results: list[SectionResult], factory: BeautifulSoup) -> list[Tag]:
    """Flatten section results into output elements, headings before their tables.

    Missing sections contribute nothing, not even their heading.
    """
    elements: list[Tag] = []
    for result in results:
        if result.table is None:
            continue
        if result.heading:
            elements.append(make(factory, "h2", result.heading))
        elements.append(result.table)
    return elements


def transform(document: Tag, url: str = "") -> list[Tag]:
    """Extract every known section of *document*.

    Order is fixed: Hero, Hero (video), "Recent Stories" + Cards,
    "Recent News" + Cards (news).  Never raises; an unmatched document
    yields an empty list.

    Args:
        document: Parsed page (any BeautifulSoup tree).
        url:      Source URL.  Informational only.
    """
    factory = new_document()
    elements = assemble(run_sections(document, factory), factory)
    logger.debug("Transformed %s into %d element(s)", url or "<document>", len(elements))
    return elements
