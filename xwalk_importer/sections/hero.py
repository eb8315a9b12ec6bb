"""Featured story → ``Hero`` block (1 column, 2 rows: background image, content)."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from bs4 import BeautifulSoup, Tag

from xwalk_importer import settings
from xwalk_importer.blocks import build_block_table
from xwalk_importer.dom import attr_of, find_first, find_first_where, make, new_document, text_of

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FeaturedStory:
    category: str | None = None
    title: str | None = None
    date: str | None = None
    read_time: str | None = None
    url: str | None = None


def _find_date(hero: Tag) -> str | None:
    # Class-flagged element wins; otherwise the first generic whose text
    # looks like "Month D, YYYY".
    flagged = text_of(find_first(hero, settings.HERO_DATE_SELECTOR))
    if flagged:
        return flagged
    match = find_first_where(
        hero,
        settings.GENERIC_SELECTOR,
        lambda el: settings.HERO_DATE_RE.search(el.get_text()) is not None,
    )
    return text_of(match)


def parse_featured_story(document: Tag) -> FeaturedStory | None:
    """Collect the hero fields, or None when the region or story link is missing."""
    hero = find_first(document, settings.HERO_SELECTOR)
    if hero is None:
        logger.debug("Featured story skipped: no %r container", settings.HERO_SELECTOR)
        return None

    link = find_first(hero, settings.HERO_LINK_SELECTOR)
    if link is None:
        logger.debug("Featured story skipped: no link to %r", settings.STORY_HREF_FRAGMENT)
        return None

    return FeaturedStory(
        category=text_of(find_first(hero, settings.HEADING_2_SELECTOR)),
        title=text_of(find_first(hero, settings.HEADING_4_SELECTOR)),
        date=_find_date(hero),
        read_time=text_of(find_first(hero, settings.HERO_READ_TIME_SELECTOR)),
        url=attr_of(link, "href"),
    )


def build_featured_story(story: FeaturedStory, factory: BeautifulSoup) -> Tag:
    bg_image = make(factory, "img", src=settings.HERO_PLACEHOLDER_IMAGE, alt=story.title or "")

    content = make(factory, "div")
    if story.date:
        content.append(make(factory, "p", story.date, class_=settings.DATE_CLASS))
    if story.category:
        content.append(make(factory, "h2", story.category))
    if story.title:
        content.append(make(factory, "h4", story.title))
    if story.read_time or story.url:
        cta = make(factory, "div")
        if story.read_time:
            cta.append(make(factory, "span", story.read_time))
        if story.url:
            cta.append(make(factory, "a", settings.READ_STORY_LABEL, href=story.url))
        content.append(cta)

    return build_block_table(settings.HERO_BLOCK, [[bg_image], [content]], 1, factory=factory)


def extract_featured_story(document: Tag, factory: BeautifulSoup | None = None) -> Tag | None:
    story = parse_featured_story(document)
    if story is None:
        return None
    return build_featured_story(story, factory if factory is not None else new_document())
