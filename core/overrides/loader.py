"""Override table loading utilities."""

from __future__ import annotations

from pathlib import Path

import yaml  # type: ignore[import-untyped]
from pydantic import ValidationError

from core.overrides.models import OverrideTables


def default_overrides_path() -> Path:
    return Path(__file__).with_name("overrides.yaml")


def load_overrides(path: Path | None = None) -> OverrideTables:
    """Load and validate override tables from YAML."""

    overrides_path = path or default_overrides_path()

    try:
        raw = yaml.safe_load(overrides_path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ValueError(f"Overrides file not found: {overrides_path}") from exc
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in overrides file: {overrides_path}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"Overrides file must contain a mapping: {overrides_path}")

    try:
        return OverrideTables.model_validate(_drop_empty_families(raw))
    except ValidationError as exc:
        raise ValueError(f"Invalid overrides schema: {overrides_path}") from exc


def _drop_empty_families(raw: dict[object, object]) -> dict[object, object]:
    # `family:` with no entries parses as None in YAML.
    normalized: dict[object, object] = {}
    for key, table in raw.items():
        if isinstance(table, dict):
            normalized[key] = {
                family: entries for family, entries in table.items() if entries is not None
            }
        else:
            normalized[key] = table
    return normalized
