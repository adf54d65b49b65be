from __future__ import annotations

from core.classify.classifier import classify_family, classify_record, reconcile
from core.classify.models import VersionDocument
from core.extract.models import ExtractResult, PropertyRecord
from core.overrides.models import OverrideTables


def _document(version: int, *records: PropertyRecord, title: str = "") -> VersionDocument:
    return VersionDocument(
        version=version,
        url=f"https://drafts.csswg.org/css-sizing-{version}/",
        result=ExtractResult(outcome="ok", title=title or f"Sizing {version}", records=list(records)),
    )


def _skipped(version: int) -> VersionDocument:
    return VersionDocument(
        version=version,
        url=f"https://drafts.csswg.org/css-sizing-{version}/",
        result=ExtractResult(outcome="no_property_index"),
    )


def test_reconcile_later_version_wins() -> None:
    documents = [
        _document(4, PropertyRecord(name="width", value="<length> | <percentage> | stretch")),
        _document(3, PropertyRecord(name="width", value="<length> | <percentage>")),
    ]

    merged = reconcile("sizing", documents, OverrideTables())

    assert list(merged) == ["width"]
    assert merged["width"].value == "<length> | <percentage> | stretch"
    assert merged["width"].version == 4
    assert merged["width"].url == "https://drafts.csswg.org/css-sizing-4/"


def test_reconcile_excludes_ignored_names_from_every_version() -> None:
    tables = OverrideTables(ignore={"sizing": frozenset({"box-sizing"})})
    documents = [
        _document(3, PropertyRecord(name="box-sizing", value="content-box | border-box")),
        _document(4, PropertyRecord(name="box-sizing", value="content-box | border-box")),
        _document(4, PropertyRecord(name="height", value="auto")),
    ]

    merged = reconcile("sizing", documents, tables)

    assert list(merged) == ["height"]


def test_reconcile_ignore_is_scoped_to_family() -> None:
    tables = OverrideTables(ignore={"ui": frozenset({"width"})})

    merged = reconcile("sizing", [_document(3, PropertyRecord(name="width"))], tables)

    assert list(merged) == ["width"]


def test_classify_width_scenario_uses_highest_version() -> None:
    documents = [
        _document(3, PropertyRecord(name="width", value="<length> | <percentage>")),
        _document(4, PropertyRecord(name="width", value="<length> | <percentage> | stretch")),
    ]

    result = classify_family("sizing", documents, OverrideTables())

    assert len(result.properties) == 1
    item = result.properties[0]
    assert item.value == "<length> | <percentage> | stretch"
    assert item.classified.shape == "enum"
    assert item.classified.generated_name == "Width"
    assert item.classified.needs_lifetime is False


def test_value_extension_applies_before_classification() -> None:
    tables = OverrideTables(value_extensions={"sizing": {"height": " | stretch"}})

    item = classify_record("sizing", PropertyRecord(name="height", value="<length>"), tables)

    assert item.value == "<length> | stretch"
    assert item.classified.shape == "enum"
    assert item.record.value == "<length>"


def test_enum_and_lifetime_overrides() -> None:
    tables = OverrideTables(
        enum_overrides={"ui": frozenset({"cursor"})},
        lifetime_overrides={"ui": frozenset({"outline"})},
    )

    cursor = classify_record("ui", PropertyRecord(name="cursor", value="[<url> [<x> <y>]?]#? <kw>"), tables)
    outline = classify_record("ui", PropertyRecord(name="outline", value="<a> || <b>"), tables)

    assert cursor.classified.shape == "enum"
    assert outline.classified.shape == "struct"
    assert outline.classified.needs_lifetime is True


def test_lifetime_from_configured_value_kinds() -> None:
    tables = OverrideTables(lifetime_value_kinds=("<url>",))

    item = classify_record("x", PropertyRecord(name="mask", value="<url> || <mode>"), tables)

    assert item.classified.needs_lifetime is True


def test_classify_family_header_tracks_versions() -> None:
    documents = [
        _document(3, PropertyRecord(name="width", value="auto"), title="Sizing 3"),
        _skipped(4),
    ]

    result = classify_family("sizing", documents, OverrideTables())

    assert result.url == "https://drafts.csswg.org/css-sizing-4/"
    assert result.title == "Sizing 3"


def test_classify_family_without_records_is_empty() -> None:
    result = classify_family("sizing", [_skipped(3), _skipped(4)], OverrideTables())

    assert result.properties == []
