"""Recent news links → ``Cards (news)`` block (2 columns: empty cell, text)."""

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
class NewsItem:
    url: str | None = None
    date: str | None = None
    title: str | None = None


def _has_news_heading(el: Tag) -> bool:
    heading = find_first(el, settings.HEADING_3_SELECTOR)
    return heading is not None and settings.NEWS_MARKER in heading.get_text()


def parse_recent_news(document: Tag) -> list[NewsItem] | None:
    section = find_first_where(document, settings.GENERIC_SELECTOR, _has_news_heading)
    if section is None:
        logger.debug("Recent news skipped: no heading containing %r", settings.NEWS_MARKER)
        return None

    items: list[NewsItem] = []
    for link in find_all(section, settings.NEWS_LINK_SELECTOR):
        item = NewsItem(
            url=attr_of(link, "href"),
            date=text_of(find_first(link, settings.GENERIC_SELECTOR)),
            title=text_of(find_first(link, settings.PARAGRAPH_SELECTOR)),
        )
        if item.date is None and item.title is None:
            logger.warning("News link %s has no date or title; its card will be empty", item.url)
        items.append(item)
    logger.debug("Recent news: %d item(s)", len(items))
    return items


def build_news_item(item: NewsItem, factory: BeautifulSoup) -> list[Tag]:
    content = make(factory, "div")
    if item.date:
        content.append(make(factory, "p", item.date, class_=settings.NEWS_DATE_CLASS))
    if item.title:
        para = make(factory, "p")
        para.append(make(factory, "a", item.title, href=item.url or ""))
        content.append(para)

    # No image for news: the first column stays an empty placeholder div.
    return [make(factory, "div"), content]


def extract_recent_news(document: Tag, factory: BeautifulSoup | None = None) -> Tag | None:
    items = parse_recent_news(document)
    if items is None:
        return None
    factory = factory if factory is not None else new_document()
    rows = [build_news_item(item, factory) for item in items]
    return build_block_table(settings.NEWS_BLOCK, rows, 2, factory=factory)
