"""xwalk block tables.

A block table is the structure the document converter recognises as a named
content block::

    | Hero            |          <- header row: block name (+ empty cell for 2 columns)
    | <img>           |          <- one row per content row, exactly *columns* cells
    | <div>…</div>    |

Cell values are normalised into a small tagged union before any element is
built, so the padding / clipping rules can be tested without a document.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Union

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PageElement

from xwalk_importer.dom import new_document

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Cell content
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ElementCell:
    """An element attached to the cell by reference."""

    element: PageElement


@dataclass(frozen=True)
class MarkupCell:
    """Raw HTML inserted as-is.  Not escaped: callers own its safety."""

    markup: str


@dataclass(frozen=True)
class EmptyCell:
    pass


CellContent = Union[ElementCell, MarkupCell, EmptyCell]


def to_cell(value: Any) -> CellContent:
    """Classify a raw row value into a :data:`CellContent` variant."""
    if isinstance(value, PageElement):
        return ElementCell(value)
    if isinstance(value, str):
        return MarkupCell(value) if value else EmptyCell()
    if value:
        return ElementCell(NavigableString(str(value)))
    return EmptyCell()


def normalize_row(values: Iterable[Any], columns: int) -> list[CellContent]:
    """Return exactly *columns* cells: extra values dropped, missing ones empty."""
    cells = [to_cell(v) for i, v in enumerate(values) if i < columns]
    while len(cells) < columns:
        cells.append(EmptyCell())
    return cells


# ---------------------------------------------------------------------------
# Table construction
# ---------------------------------------------------------------------------

def _fill_cell(td: Tag, content: CellContent) -> None:
    if isinstance(content, ElementCell):
        td.append(content.element)
    elif isinstance(content, MarkupCell):
        fragment = BeautifulSoup(content.markup, "html.parser")
        for child in list(fragment.contents):
            td.append(child.extract())


def build_block_table(
    block_name: str,
    rows: Sequence[Sequence[Any]],
    columns: int = 2,
    *,
    factory: BeautifulSoup | None = None,
) -> Tag:
    """Build an xwalk block table named *block_name*.

    Args:
        block_name: Block name plus optional variant, e.g. ``"Cards (news)"``.
        rows:       Content rows; each value is an element, an HTML string,
                    or something falsy for an empty cell.
        columns:    Declared column count (1 for Hero, 2 for Cards).
        factory:    Document used to create the elements.  A fresh one is
                    created when omitted.

    Returns:
        A detached ``<table>`` element.  Never raises; *rows* may be empty.
    """
    factory = factory if factory is not None else new_document()
    table = factory.new_tag("table")

    header = factory.new_tag("tr")
    name_cell = factory.new_tag("td")
    name_cell.string = block_name
    header.append(name_cell)
    if columns == 2:
        header.append(factory.new_tag("td"))
    table.append(header)

    for row in rows:
        tr = factory.new_tag("tr")
        for content in normalize_row(row, columns):
            td = factory.new_tag("td")
            _fill_cell(td, content)
            tr.append(td)
        table.append(tr)

    logger.debug("Built %r block table with %d row(s)", block_name, len(rows))
    return table
