"""Data models for property definitions extracted from draft documents."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Literal

PLACEHOLDER = ""

DocumentOutcome = Literal["ok", "no_property_index", "index_table_count"]


@dataclass(frozen=True)
class PropertyRecord:
    """One property definition table row map, after alias splitting."""

    name: str
    value: str = PLACEHOLDER
    initial: str = PLACEHOLDER
    applies_to: str = PLACEHOLDER
    inherited: str = PLACEHOLDER
    percentages: str = PLACEHOLDER
    canonical_order: str = PLACEHOLDER
    animation_type: str | None = None
    new_values: str = PLACEHOLDER
    extra: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    version: int | None = None
    url: str | None = None

    @property
    def is_new_values(self) -> bool:
        return bool(self.new_values)

    def with_source(self, *, version: int, url: str) -> PropertyRecord:
        return replace(self, version=version, url=url)


@dataclass
class ExtractResult:
    """Extractor output for one document."""

    outcome: DocumentOutcome
    title: str = ""
    records: list[PropertyRecord] = field(default_factory=list)
    index_table_count: int | None = None
