"""xwalk_importer.importer — load a page snapshot and run the transform.

Usage::

    from xwalk_importer import import_file

    result = import_file("our-stories.xml", url="https://www.abbvie.com/who-we-are/our-stories.html")
    print(result.found_sections)
    print(result.markdown)
"""

from __future__ import annotations

import logging
from pathlib import Path

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from xwalk_importer import settings
from xwalk_importer.dom import new_document
from xwalk_importer.items import ImportResult, SectionSummary
from xwalk_importer.markdown import elements_to_markdown, render_html
from xwalk_importer.sections import run_sections
from xwalk_importer.transform import assemble

logger = logging.getLogger(__name__)


class DocumentLoadError(RuntimeError):
    """Raised when page markup cannot be read or is empty.

    Attributes:
        source -- file path or URL the markup came from ("" if unknown)
    """

    def __init__(self, message: str, source: str = "") -> None:
        super().__init__(message)
        self.source = source


def load_document(
    markup: str | bytes,
    features: str = settings.DEFAULT_FEATURES,
    *,
    source: str = "",
) -> BeautifulSoup:
    """Parse *markup* into a document tree.

    Raises:
        DocumentLoadError: if *markup* is empty or whitespace only, or no
            encoding the parser tried could decode it.
    """
    if isinstance(markup, bytes):
        blank = not markup.strip()
    else:
        blank = not markup or not markup.strip()
    if blank:
        raise DocumentLoadError("Empty document", source=source)
    try:
        return BeautifulSoup(markup, features)
    except ParserRejectedMarkup as exc:
        raise DocumentLoadError(f"Unparseable document: {exc}", source=source) from exc


def import_page(
    markup: str | bytes,
    url: str = "",
    *,
    features: str = settings.DEFAULT_FEATURES,
) -> ImportResult:
    """Transform one page snapshot and render the result.

    Args:
        markup:   Page markup (snapshot XML by default).
        url:      Source URL, recorded on the result.
        features: BeautifulSoup parser features, e.g. ``"lxml"`` for HTML.

    Returns:
        :class:`~xwalk_importer.items.ImportResult` with per-section summaries
        and the rendered HTML / Markdown.

    Raises:
        DocumentLoadError: if *markup* is empty.
    """
    document = load_document(markup, features, source=url)
    factory = new_document()
    results = run_sections(document, factory)
    elements = assemble(results, factory)

    logger.debug("Imported %s: %d element(s)", url or "<markup>", len(elements))
    return ImportResult(
        url=url,
        sections=[
            SectionSummary(name=r.name, block=r.block, found=r.found, rows=r.rows)
            for r in results
        ],
        html=render_html(elements),
        markdown=elements_to_markdown(elements),
        element_count=len(elements),
    )


def import_file(
    path: str | Path,
    url: str = "",
    *,
    features: str = settings.DEFAULT_FEATURES,
) -> ImportResult:
    """Read *path* as bytes and pass it through :func:`import_page`.

    The parser detects the encoding (XML declaration, BOM, then fallbacks),
    so non-UTF-8 files load.

    Raises:
        DocumentLoadError: if the file cannot be read or is empty.
    """
    path = Path(path)
    try:
        markup = path.read_bytes()
    except OSError as exc:
        raise DocumentLoadError(f"Cannot read {path}: {exc}", source=str(path)) from exc
    try:
        return import_page(markup, url, features=features)
    except DocumentLoadError as exc:
        raise DocumentLoadError(f"{exc} ({path})", source=str(path)) from exc
