"""Data models for classified property definitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from core.extract.models import ExtractResult, PropertyRecord

Shape = Literal["struct", "enum"]


@dataclass(frozen=True)
class VersionDocument:
    """Extractor output for one version of a family, with its source URL."""

    version: int
    url: str
    result: ExtractResult


@dataclass(frozen=True)
class ClassifiedType:
    """Type shape derived for one property."""

    shape: Shape
    needs_lifetime: bool
    generated_name: str


@dataclass(frozen=True)
class ClassifiedProperty:
    """A winning record, its grammar with extensions applied, and its type shape."""

    record: PropertyRecord
    value: str
    classified: ClassifiedType


@dataclass
class FamilyClassification:
    """All classified properties for one family plus header metadata."""

    family: str
    url: str = ""
    title: str = ""
    properties: list[ClassifiedProperty] = field(default_factory=list)
