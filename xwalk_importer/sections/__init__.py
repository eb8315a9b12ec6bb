"""Section extractors: one module per page section, each anchored on a fixed marker."""

from .base import SECTIONS, SectionResult, SectionSpec, run_sections
from .hero import FeaturedStory, extract_featured_story, parse_featured_story
from .news import NewsItem, extract_recent_news, parse_recent_news
from .stories import StoryCard, extract_recent_stories, parse_recent_stories
from .video import VideoSection, extract_video_section, parse_video_section

__all__ = [
    "SECTIONS",
    "FeaturedStory",
    "NewsItem",
    "SectionResult",
    "SectionSpec",
    "StoryCard",
    "VideoSection",
    "extract_featured_story",
    "extract_recent_news",
    "extract_recent_stories",
    "extract_video_section",
    "parse_featured_story",
    "parse_recent_news",
    "parse_recent_stories",
    "parse_video_section",
    "run_sections",
]
