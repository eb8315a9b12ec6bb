"""Contract constants for the our-stories importer.

Every literal the transform keys off lives here: marker phrases, reference
markers, placeholder assets, block names and generated class names.  The
downstream xwalk conversion matches on these values, so they must not be
reworded.
"""

from __future__ import annotations

import re

# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------
# The snapshot vocabulary (region/generic/link/…) is not HTML: HTML parsers
# treat <link> as a void element and drop its children.
# Plain HTML pages use <a> for links; every link selector accepts both.
DEFAULT_FEATURES = "lxml-xml"

PARSER_FEATURES: dict[str, str] = {
    "xml": "lxml-xml",
    "html": "lxml",
}

# ---------------------------------------------------------------------------
# Marker phrases and href substrings
# ---------------------------------------------------------------------------
VIDEO_MARKER = "Beyond the Possible"
NEWS_MARKER = "Recent News"
READ_TIME_MARKER = "Minute Read"

STORY_HREF_FRAGMENT = "our-stories"
NEWS_HREF_FRAGMENT = "news.abbvie.com"

# Internal snapshot reference markers
HERO_READ_TIME_REF = "e48"
STORIES_LIST_REF = "e93"
STORY_META_REF_PREFIX = "e"

# "January 15, 2025" style dates, searched anywhere in the text
HERO_DATE_RE = re.compile(r"\w+ \d+, \d{4}")

# ---------------------------------------------------------------------------
# Selectors
# ---------------------------------------------------------------------------
HERO_SELECTOR = "region"
HERO_LINK_SELECTOR = f'a[href*="{STORY_HREF_FRAGMENT}"], link[href*="{STORY_HREF_FRAGMENT}"]'
HERO_DATE_SELECTOR = 'generic[class*="date"]'
HERO_READ_TIME_SELECTOR = f'generic[ref*="{HERO_READ_TIME_REF}"]'

HEADING_2_SELECTOR = 'heading[level="2"]'
HEADING_3_SELECTOR = 'heading[level="3"]'
HEADING_4_SELECTOR = 'heading[level="4"]'

GENERIC_SELECTOR = "generic"
PARAGRAPH_SELECTOR = "paragraph"
BUTTON_SELECTOR = "button"
STORY_LINK_SELECTOR = "link, a"

STORIES_LIST_SELECTOR = f'list[ref="{STORIES_LIST_REF}"]'
STORY_ITEM_SELECTOR = "listitem"
STORY_META_SELECTOR = f'generic[ref*="{STORY_META_REF_PREFIX}"]'

NEWS_LINK_SELECTOR = f'link[href*="{NEWS_HREF_FRAGMENT}"], a[href*="{NEWS_HREF_FRAGMENT}"]'

# ---------------------------------------------------------------------------
# Generated output
# ---------------------------------------------------------------------------
HERO_BLOCK = "Hero"
VIDEO_BLOCK = "Hero (video)"
CARDS_BLOCK = "Cards"
NEWS_BLOCK = "Cards (news)"

HERO_PLACEHOLDER_IMAGE = "./media_placeholder_hero.png"
VIDEO_PLACEHOLDER_IMAGE = "./media_placeholder_video.png"
STORY_PLACEHOLDER_IMAGE = "./media_placeholder_story.png"

DEFAULT_VIDEO_BUTTON_LABEL = "Watch 7:04"
VIDEO_PLACEHOLDER_HREF = "#video"
READ_STORY_LABEL = "Read story"

DATE_CLASS = "date"
CARD_META_CLASS = "card-meta"
READ_TIME_CLASS = "read-time"
NEWS_DATE_CLASS = "news-date"
BUTTON_CLASS = "button"

STORIES_HEADING = "Recent Stories"
NEWS_HEADING = "Recent News"

# ---------------------------------------------------------------------------
# Output formats
# ---------------------------------------------------------------------------
OUTPUT_FORMATS: tuple[str, ...] = ("markdown", "html", "json")
DEFAULT_OUTPUT_FORMAT = "markdown"
