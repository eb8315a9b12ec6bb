"""Small query and construction helpers over BeautifulSoup trees.

All lookups go through CSS selectors (soupsieve) so the selector strings in
:mod:`xwalk_importer.settings` stay the single source of truth.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

from bs4 import BeautifulSoup, Tag

_WHITESPACE_RE = re.compile(r"\s+")


def new_document() -> BeautifulSoup:
    """Return an empty HTML document used as the element factory for output."""
    return BeautifulSoup("", "html.parser")


def make(factory: BeautifulSoup, name: str, text: str | None = None, **attrs: Any) -> Tag:
    """Create a detached *name* element on *factory*.

    ``class_`` is accepted for the ``class`` attribute.
    """
    if "class_" in attrs:
        attrs["class"] = attrs.pop("class_")
    tag = factory.new_tag(name, attrs={k: v for k, v in attrs.items() if v is not None})
    if text is not None:
        tag.string = text
    return tag


def find_first(root: Tag | None, selector: str) -> Tag | None:
    if root is None:
        return None
    return root.select_one(selector)


def find_all(root: Tag | None, selector: str) -> list[Tag]:
    if root is None:
        return []
    return list(root.select(selector))


def find_first_where(
    root: Tag | None,
    selector: str,
    predicate: Callable[[Tag], bool],
) -> Tag | None:
    """Return the first *selector* match, in document order, satisfying *predicate*."""
    for el in find_all(root, selector):
        if predicate(el):
            return el
    return None


def text_of(tag: Tag | None) -> str | None:
    """Whitespace-normalised text content of *tag*, or None if absent or blank."""
    if tag is None:
        return None
    text = _WHITESPACE_RE.sub(" ", tag.get_text()).strip()
    return text or None


def attr_of(tag: Tag | None, name: str) -> str | None:
    """Attribute *name* of *tag* as a string (multi-valued attributes joined)."""
    if tag is None:
        return None
    val = tag.get(name)
    if val is None:
        return None
    if isinstance(val, list):
        val = " ".join(str(v) for v in val)
    return str(val) or None
