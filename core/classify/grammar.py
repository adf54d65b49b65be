"""Heuristics over CSS value definition grammar strings.

These never parse the grammar; they scan it for a few surface features:
- top-level ``|`` (single bar, not ``||``) means a choice between forms;
- ``<image>``-like references and ``#`` list multipliers mean the value
  holds borrowed data.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from core.classify.models import Shape
from core.utils.naming import pascal

CUSTOM_PROPERTY_NAME = "--*"
CUSTOM_PROPERTY_IDENT = "Custom"
CUSTOM_PROPERTY_FRAGMENT = "defining-variables"

_INNERMOST_BRACKET_RE = re.compile(r"\[[^\[\]]*\]")
_ANGLE_REFERENCE_RE = re.compile(r"<[^<>]*>")
_SINGLE_BAR_RE = re.compile(r"[^|]\|[^|]")
_HASH_MULTIPLIER_RE = re.compile(r"#[^{]")


def strip_groups(value: str) -> str:
    """Remove bracketed groups and angle-bracketed type references."""

    stripped = value
    while True:
        reduced = _INNERMOST_BRACKET_RE.sub(" ", stripped)
        if reduced == stripped:
            break
        stripped = reduced
    return _ANGLE_REFERENCE_RE.sub(" ", stripped)


def has_top_level_alternation(value: str) -> bool:
    return _SINGLE_BAR_RE.search(strip_groups(value)) is not None


def classify_shape(value: str, *, force_enum: bool = False) -> Shape:
    if force_enum or has_top_level_alternation(value):
        return "enum"
    return "struct"


def needs_lifetime(
    value: str,
    borrowed_kinds: Iterable[str],
    *,
    force: bool = False,
) -> bool:
    """Whether a declaration for this grammar needs an allocator lifetime.

    A ``#`` followed by ``{`` is a bounded ``#{n}`` multiplier; a trailing ``#``
    is not counted.
    """

    if force:
        return True
    if any(kind in value for kind in borrowed_kinds):
        return True
    return _HASH_MULTIPLIER_RE.search(value) is not None


def generated_name(property_name: str) -> str:
    if property_name == CUSTOM_PROPERTY_NAME:
        return CUSTOM_PROPERTY_IDENT
    return pascal(property_name)


def url_fragment(property_name: str) -> str:
    if property_name == CUSTOM_PROPERTY_NAME:
        return CUSTOM_PROPERTY_FRAGMENT
    return property_name
