"""Cross-version reconciliation and type classification for one family."""

from __future__ import annotations

from collections.abc import Iterable

from core.classify.grammar import classify_shape, generated_name, needs_lifetime
from core.classify.models import (
    ClassifiedProperty,
    ClassifiedType,
    FamilyClassification,
    VersionDocument,
)
from core.extract.models import PropertyRecord
from core.overrides.models import OverrideTables


def reconcile(
    family: str,
    documents: Iterable[VersionDocument],
    tables: OverrideTables,
) -> dict[str, PropertyRecord]:
    """Merge records across versions; a later version replaces an earlier definition.

    Names in the family's ignore table never enter the result.
    """

    merged: dict[str, PropertyRecord] = {}
    for document in sorted(documents, key=lambda item: item.version):
        for record in document.result.records:
            if tables.is_ignored(family, record.name):
                continue
            merged[record.name] = record.with_source(version=document.version, url=document.url)
    return merged


def classify_record(
    family: str, record: PropertyRecord, tables: OverrideTables
) -> ClassifiedProperty:
    value = record.value + tables.value_extension(family, record.name)
    classified = ClassifiedType(
        shape=classify_shape(value, force_enum=tables.forces_enum(family, record.name)),
        needs_lifetime=needs_lifetime(
            value,
            tables.lifetime_value_kinds,
            force=tables.forces_lifetime(family, record.name),
        ),
        generated_name=generated_name(record.name),
    )
    return ClassifiedProperty(record=record, value=value, classified=classified)


def classify_family(
    family: str,
    documents: Iterable[VersionDocument],
    tables: OverrideTables,
) -> FamilyClassification:
    """Reconcile all versions of a family and classify each surviving property.

    The header URL is the highest version scanned; the title comes from the
    highest version whose property index was readable.
    """

    ordered = sorted(documents, key=lambda item: item.version)
    result = FamilyClassification(family=family)
    for document in ordered:
        result.url = document.url
        if document.result.outcome == "ok":
            result.title = document.result.title

    merged = reconcile(family, ordered, tables)
    result.properties = [classify_record(family, record, tables) for record in merged.values()]
    return result
