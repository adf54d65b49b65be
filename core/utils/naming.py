"""Identifier case conversions for property and family names."""

from __future__ import annotations

import re

_SEPARATOR_RE = re.compile(r"[_\-\s](\w)")


def camel(name: str) -> str:
    """Drop separators and upper-case the character following each one."""

    return _SEPARATOR_RE.sub(lambda match: match.group(1).upper(), name)


def pascal(name: str) -> str:
    converted = camel(name)
    if not converted:
        return converted
    return converted[0].upper() + converted[1:]


def snake(name: str) -> str:
    """Convert separators to underscores and lower-case the result.

    ``"Canonical order"`` becomes ``"canonical_order"``; ``"page-floats"``
    becomes ``"page_floats"``.
    """

    return _SEPARATOR_RE.sub(lambda match: f"_{match.group(1)}", name).lower()
