"""Section registry and the explicit per-section result type."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from bs4 import BeautifulSoup, Tag

from xwalk_importer import settings
from xwalk_importer.dom import new_document

from .hero import extract_featured_story
from .news import extract_recent_news
from .stories import extract_recent_stories
from .video import extract_video_section

logger = logging.getLogger(__name__)

Extractor = Callable[[Tag, BeautifulSoup], Tag | None]


@dataclass(frozen=True)
class SectionSpec:
    name: str
    block: str
    extract: Extractor
    heading: str | None = None  # emitted before the table when set


@dataclass
class SectionResult:
    """Outcome of one extractor: a table, or ``table=None`` for "anchor not found"."""

    name: str
    block: str
    table: Tag | None = None
    heading: str | None = None

    @property
    def found(self) -> bool:
        return self.table is not None

    @property
    def rows(self) -> int:
        """Content rows in the table, header excluded."""
        if self.table is None:
            return 0
        return max(0, len(self.table.find_all("tr", recursive=False)) - 1)


# Fixed output order.
SECTIONS: tuple[SectionSpec, ...] = (
    SectionSpec("featured_story", settings.HERO_BLOCK, extract_featured_story),
    SectionSpec("video_section", settings.VIDEO_BLOCK, extract_video_section),
    SectionSpec(
        "recent_stories", settings.CARDS_BLOCK, extract_recent_stories,
        heading=settings.STORIES_HEADING,
    ),
    SectionSpec(
        "recent_news", settings.NEWS_BLOCK, extract_recent_news,
        heading=settings.NEWS_HEADING,
    ),
)


def run_sections(
    document: Tag,
    factory: BeautifulSoup | None = None,
) -> list[SectionResult]:
    """Run every extractor against *document*, in :data:`SECTIONS` order."""
    factory = factory if factory is not None else new_document()
    results: list[SectionResult] = []
    for spec in SECTIONS:
        table = spec.extract(document, factory)
        results.append(
            SectionResult(name=spec.name, block=spec.block, table=table, heading=spec.heading),
        )
    logger.debug(
        "Sections found: %s",
        ", ".join(r.name for r in results if r.found) or "(none)",
    )
    return results
