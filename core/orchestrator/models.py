"""Data models for generation run reports."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

GenerationAction = Literal["written", "removed", "unchanged", "dry_run"]


class DocumentSummary(BaseModel):
    """Extractor outcome for one scanned version."""

    model_config = ConfigDict(extra="forbid")

    version: int
    url: str
    outcome: Literal["ok", "no_property_index", "index_table_count"]
    record_count: int
    index_table_count: int | None = None


class PropertySummary(BaseModel):
    """Classification of one emitted property."""

    model_config = ConfigDict(extra="forbid")

    name: str
    generated_name: str
    shape: Literal["struct", "enum"]
    needs_lifetime: bool
    version: int | None = None
    value: str


class GenerationReport(BaseModel):
    """Result of one generation run for a family.

    Rules:
    - action == "removed" or "unchanged" implies properties == []
    - module_text is "" when properties is empty
    """

    model_config = ConfigDict(extra="forbid")

    family: str
    versions: list[int]
    url: str = ""
    title: str = ""
    documents: list[DocumentSummary] = Field(default_factory=list)
    properties: list[PropertySummary] = Field(default_factory=list)
    action: GenerationAction
    output_path: str | None = None
    module_text: str = ""

    @property
    def skipped_documents(self) -> list[DocumentSummary]:
        return [document for document in self.documents if document.outcome != "ok"]
