"""'Beyond the Possible' teaser → ``Hero (video)`` block."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from bs4 import BeautifulSoup, Tag

from xwalk_importer import settings
from xwalk_importer.blocks import build_block_table
from xwalk_importer.dom import find_first, find_first_where, make, new_document, text_of

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VideoSection:
    title: str | None = None
    description: str | None = None
    button_label: str = settings.DEFAULT_VIDEO_BUTTON_LABEL


def _has_marker_heading(el: Tag) -> bool:
    heading = find_first(el, settings.HEADING_2_SELECTOR)
    return heading is not None and settings.VIDEO_MARKER in heading.get_text()


def parse_video_section(document: Tag) -> VideoSection | None:
    section = find_first_where(document, settings.GENERIC_SELECTOR, _has_marker_heading)
    if section is None:
        logger.debug("Video section skipped: no heading containing %r", settings.VIDEO_MARKER)
        return None

    return VideoSection(
        title=text_of(find_first(section, settings.HEADING_2_SELECTOR)),
        description=text_of(find_first(section, settings.PARAGRAPH_SELECTOR)),
        button_label=(
            text_of(find_first(section, settings.BUTTON_SELECTOR))
            or settings.DEFAULT_VIDEO_BUTTON_LABEL
        ),
    )


def build_video_section(video: VideoSection, factory: BeautifulSoup) -> Tag:
    thumbnail = make(factory, "img", src=settings.VIDEO_PLACEHOLDER_IMAGE, alt=video.title or "")

    content = make(factory, "div")
    if video.title:
        content.append(make(factory, "h2", video.title))
    if video.description:
        content.append(make(factory, "p", video.description))
    if video.button_label:
        content.append(
            make(
                factory,
                "a",
                video.button_label,
                href=settings.VIDEO_PLACEHOLDER_HREF,
                class_=settings.BUTTON_CLASS,
            ),
        )

    return build_block_table(settings.VIDEO_BLOCK, [[thumbnail], [content]], 1, factory=factory)


def extract_video_section(document: Tag, factory: BeautifulSoup | None = None) -> Tag | None:
    video = parse_video_section(document)
    if video is None:
        return None
    return build_video_section(video, factory if factory is not None else new_document())
