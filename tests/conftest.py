"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def _read_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


@pytest.fixture
def stories_path() -> Path:
    return FIXTURES_DIR / "our_stories.xml"


@pytest.fixture
def stories_xml() -> str:
    return _read_fixture("our_stories.xml")


@pytest.fixture
def stories_doc(stories_xml):
    from xwalk_importer.importer import load_document

    return load_document(stories_xml)


@pytest.fixture
def snapshot():
    """Parse a snapshot fragment, wrapped in a single root element."""
    from xwalk_importer.importer import load_document

    def _load(body: str):
        return load_document(f"<document>{body}</document>")

    return _load
