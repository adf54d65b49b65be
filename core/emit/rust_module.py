"""Rust source rendering for classified property definitions.

The generated module expects sibling ``impls`` and ``types`` modules that are
maintained by hand. The header comment carries the highest scanned version's
URL; each declaration's comment links to the version its record came from.
"""

from __future__ import annotations

from core.classify.grammar import url_fragment
from core.classify.models import ClassifiedProperty, FamilyClassification

NOT_ANIMATABLE = "not animatable"
LIFETIME_PARAM = "<'a>"
DECLARATION_SUFFIX = "StyleValue"

_MODULE_PRELUDE = """mod impls;
pub mod types;

use impls::*;
"""


def render_module(classification: FamilyClassification) -> str:
    """Render the full module text, or an empty string when there is nothing to emit."""

    if not classification.properties:
        return ""

    declarations = "\n".join(render_declaration(item) for item in classification.properties)
    return (
        f"{_MODULE_PRELUDE}\n"
        "/*\n"
        f" * {classification.url}\n"
        f" * {classification.title}\n"
        " */\n"
        f"{declarations}\n"
    )


def render_declaration(item: ClassifiedProperty) -> str:
    record = item.record
    classified = item.classified
    generics = LIFETIME_PARAM if classified.needs_lifetime else ""
    if classified.shape == "enum":
        head, trail = "enum", " {}"
    else:
        head, trail = "struct", ";"
    animation_type = (record.animation_type or NOT_ANIMATABLE).lower()
    applies_to = record.applies_to.replace("\n", "")

    lines = [
        "",
        f"// {record.url or ''}#{url_fragment(record.name)}",
        f'#[value(" {_escape(item.value)} ")]',
        f'#[initial("{_escape(record.initial)}")]',
        f'#[applies_to("{_escape(applies_to)}")]',
        f'#[inherited("{_escape(record.inherited.lower())}")]',
        f'#[percentages("{_escape(record.percentages.lower())}")]',
        f'#[canonical_order("{_escape(record.canonical_order.lower())}")]',
        f'#[animation_type("{_escape(animation_type)}")]',
        f"pub {head} {classified.generated_name}{DECLARATION_SUFFIX}{generics}{trail}",
    ]
    return "\n".join(lines)


def _escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"')
