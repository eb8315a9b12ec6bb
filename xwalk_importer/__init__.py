"""xwalk_importer - turn the our-stories page snapshot into xwalk block tables.

Quick usage::

    from xwalk_importer import load_document, transform

    document = load_document(snapshot_xml)
    for element in transform(document, "https://www.abbvie.com/who-we-are/our-stories.html"):
        print(element)

Whole-file import with rendered output::

    from xwalk_importer import import_file

    result = import_file("our-stories.xml")
    print(result.markdown)
"""

from xwalk_importer.blocks import build_block_table
from xwalk_importer.importer import DocumentLoadError, import_file, import_page, load_document
from xwalk_importer.items import ImportResult, SectionSummary
from xwalk_importer.sections import (
    extract_featured_story,
    extract_recent_news,
    extract_recent_stories,
    extract_video_section,
)
from xwalk_importer.transform import transform

__version__ = "0.1.0"
__all__ = [
    "DocumentLoadError",
    "ImportResult",
    "SectionSummary",
    "build_block_table",
    "extract_featured_story",
    "extract_recent_news",
    "extract_recent_stories",
    "extract_video_section",
    "import_file",
    "import_page",
    "load_document",
    "transform",
]
