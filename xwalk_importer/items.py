"""Pydantic schema for the result of one page import."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator


class SectionSummary(BaseModel):
    name: str
    block: str
    found: bool = False
    rows: int = 0


class ImportResult(BaseModel):
    """Canonical output of :func:`xwalk_importer.importer.import_page`."""

    url: str = ""
    sections: list[SectionSummary] = Field(default_factory=list)

    # Rendered output
    html: str = ""
    markdown: str = ""
    element_count: int = 0

    @field_validator("url", mode="before")
    @classmethod
    def strip_url(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v or ""

    @property
    def found_sections(self) -> list[str]:
        return [s.name for s in self.sections if s.found]
