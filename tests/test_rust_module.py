from __future__ import annotations

from core.classify.classifier import classify_family
from core.classify.models import FamilyClassification, VersionDocument
from core.emit.rust_module import render_declaration, render_module
from core.extract.models import ExtractResult, PropertyRecord
from core.overrides.models import OverrideTables

_URL = "https://drafts.csswg.org/css-overflow-5/"


def _classify(*records: PropertyRecord, tables: OverrideTables | None = None) -> FamilyClassification:
    document = VersionDocument(
        version=5,
        url=_URL,
        result=ExtractResult(outcome="ok", title="CSS Overflow Module Level 5", records=list(records)),
    )
    return classify_family("overflow", [document], tables or OverrideTables())


def test_render_module_matches_expected_layout() -> None:
    classification = _classify(
        PropertyRecord(
            name="overflow-x",
            value="visible | hidden | clip | scroll | auto",
            initial="visible",
            applies_to="block containers [CSS2], flex containers [CSS3-FLEXBOX], grid containers [CSS3-GRID-LAYOUT]",
            inherited="no",
            percentages="N/A",
            canonical_order="per grammar",
            animation_type="discrete",
        ),
        PropertyRecord(
            name="overflow",
            value="<'overflow-block'>{1,2}",
            initial="visible",
            applies_to="block containers",
            inherited="no",
            percentages="N/A",
            canonical_order="Per grammar",
            animation_type="discrete",
        ),
    )

    text = render_module(classification)

    assert text == (
        "mod impls;\n"
        "pub mod types;\n"
        "\n"
        "use impls::*;\n"
        "\n"
        "/*\n"
        " * https://drafts.csswg.org/css-overflow-5/\n"
        " * CSS Overflow Module Level 5\n"
        " */\n"
        "\n"
        "// https://drafts.csswg.org/css-overflow-5/#overflow-x\n"
        '#[value(" visible | hidden | clip | scroll | auto ")]\n'
        '#[initial("visible")]\n'
        '#[applies_to("block containers [CSS2], flex containers [CSS3-FLEXBOX], grid containers [CSS3-GRID-LAYOUT]")]\n'
        '#[inherited("no")]\n'
        '#[percentages("n/a")]\n'
        '#[canonical_order("per grammar")]\n'
        '#[animation_type("discrete")]\n'
        "pub enum OverflowXStyleValue {}\n"
        "\n"
        "// https://drafts.csswg.org/css-overflow-5/#overflow\n"
        "#[value(\" <'overflow-block'>{1,2} \")]\n"
        '#[initial("visible")]\n'
        '#[applies_to("block containers")]\n'
        '#[inherited("no")]\n'
        '#[percentages("n/a")]\n'
        '#[canonical_order("per grammar")]\n'
        '#[animation_type("discrete")]\n'
        "pub struct OverflowStyleValue;\n"
    )


def test_render_module_is_empty_without_properties() -> None:
    assert render_module(_classify()) == ""


def test_render_declaration_custom_property_and_defaults() -> None:
    classification = _classify(PropertyRecord(name="--*", value="<declaration-value>?"))

    text = render_declaration(classification.properties[0])

    assert "// https://drafts.csswg.org/css-overflow-5/#defining-variables\n" in text
    assert '#[animation_type("not animatable")]' in text
    assert text.endswith("pub struct CustomStyleValue;")


def test_render_declaration_adds_lifetime_and_extension() -> None:
    tables = OverrideTables(value_extensions={"overflow": {"scrollbar": " | <image>"}})
    classification = _classify(PropertyRecord(name="scrollbar", value="auto"), tables=tables)

    text = render_declaration(classification.properties[0])

    assert '#[value(" auto | <image> ")]' in text
    assert text.endswith("pub enum ScrollbarStyleValue<'a> {}")


def test_render_declaration_strips_newlines_and_escapes_quotes() -> None:
    classification = _classify(
        PropertyRecord(
            name="quotes",
            value='auto | none | [ "«" "»" ]+',
            applies_to="all\nelements",
        )
    )

    text = render_declaration(classification.properties[0])

    assert '#[applies_to("allelements")]' in text
    assert '#[value(" auto | none | [ \\"«\\" \\"»\\" ]+ ")]' in text
