"""Recent stories list → ``Cards`` block (2 columns: image, card content)."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from bs4 import BeautifulSoup, Tag

from xwalk_importer import settings
from xwalk_importer.blocks import build_block_table
from xwalk_importer.dom import (
    attr_of,
    find_all,
    find_first,
    find_first_where,
    make,
    new_document,
    text_of,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoryCard:
    url: str | None = None
    meta: str | None = None
    title: str | None = None
    read_time: str | None = None


def _is_read_time(el: Tag) -> bool:
    return settings.READ_TIME_MARKER in el.get_text()


def _parse_item(item: Tag) -> StoryCard | None:
    link = find_first(item, settings.STORY_LINK_SELECTOR)
    if link is None:
        return None
    return StoryCard(
        url=attr_of(link, "href"),
        meta=text_of(find_first(item, settings.STORY_META_SELECTOR)),
        title=text_of(find_first(item, settings.HEADING_4_SELECTOR)),
        read_time=text_of(find_first_where(item, settings.GENERIC_SELECTOR, _is_read_time)),
    )


def parse_recent_stories(document: Tag) -> list[StoryCard] | None:
    """Return one card per linked list item, or None when the list is missing.

    An existing list with no linked items yields an empty list, not None.
    """
    stories_list = find_first(document, settings.STORIES_LIST_SELECTOR)
    if stories_list is None:
        logger.debug("Recent stories skipped: no %r", settings.STORIES_LIST_SELECTOR)
        return None

    cards: list[StoryCard] = []
    items = find_all(stories_list, settings.STORY_ITEM_SELECTOR)
    for item in items:
        card = _parse_item(item)
        if card is None:
            continue
        if card.meta is None and card.title is None and card.read_time is None:
            logger.warning("Story link %s has no meta, title or read time", card.url)
        cards.append(card)
    logger.debug("Recent stories: %d card(s) from %d item(s)", len(cards), len(items))
    return cards


def build_story_card(card: StoryCard, factory: BeautifulSoup) -> list[Tag]:
    img = make(factory, "img", src=settings.STORY_PLACEHOLDER_IMAGE, alt=card.title or "")

    content = make(factory, "div")
    if card.meta:
        content.append(make(factory, "p", card.meta, class_=settings.CARD_META_CLASS))
    if card.title:
        heading = make(factory, "h4")
        heading.append(make(factory, "a", card.title, href=card.url or ""))
        content.append(heading)
    if card.read_time:
        content.append(make(factory, "p", card.read_time, class_=settings.READ_TIME_CLASS))

    return [img, content]


def extract_recent_stories(document: Tag, factory: BeautifulSoup | None = None) -> Tag | None:
    cards = parse_recent_stories(document)
    if cards is None:
        return None
    factory = factory if factory is not None else new_document()
    rows = [build_story_card(card, factory) for card in cards]
    return build_block_table(settings.CARDS_BLOCK, rows, 2, factory=factory)
