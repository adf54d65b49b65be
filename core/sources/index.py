"""Spec index resolution: which draft versions exist for each family."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

from core.sources.cache import TextCache
from core.sources.remote import SpecSourceClient
from core.sources.settings import FAMILY_PREFIX, GeneratorSettings
from core.utils.errors import UnknownFamilyError
from core.utils.events import log_event

logger = logging.getLogger("valuegen.index")

SpecIndex = Mapping[str, tuple[int, ...]]


def resolve_index(
    cache: TextCache,
    client: SpecSourceClient,
    settings: GeneratorSettings,
) -> SpecIndex:
    """Load the family -> versions index from cache, or build and persist it.

    A missing or unparsable cache entry triggers exactly one tree listing request.
    """

    def populate() -> str:
        entries = client.fetch_tree(settings.tree_url)
        index = build_index(entries)
        return json.dumps({family: list(versions) for family, versions in index.items()}, indent=2)

    text = cache.get_or_populate(
        settings.index_cache_key,
        populate,
        validate=lambda raw: parse_index_json(raw) is not None,
    )
    index = parse_index_json(text)
    if index is None:
        raise ValueError(f"Spec index is unreadable: {settings.index_cache_key}")
    return index


def build_index(entries: Iterable[Mapping[str, Any]]) -> SpecIndex:
    """Group `css-<family>-<version>` directory entries by family.

    Directories whose trailing token is not an integer are skipped with a warning.
    """

    grouped: dict[str, set[int]] = {}
    for entry in entries:
        path = entry.get("path")
        if entry.get("type") != "tree" or not isinstance(path, str):
            continue
        if not path.startswith(FAMILY_PREFIX):
            continue

        family, _, suffix = path[len(FAMILY_PREFIX) :].rpartition("-")
        try:
            version = int(suffix)
        except ValueError:
            log_event(logger, logging.WARNING, "version_skipped", path=path, suffix=suffix)
            continue
        if not family:
            log_event(logger, logging.WARNING, "version_skipped", path=path, suffix=suffix)
            continue
        grouped.setdefault(family, set()).add(version)

    return _freeze(grouped)


def parse_index_json(raw: str) -> SpecIndex | None:
    """Parse a cached index; return None when it does not have the expected shape."""

    try:
        payload = json.loads(raw)
    except json.JSONDecodeError:
        return None
    if not isinstance(payload, dict):
        return None

    grouped: dict[str, set[int]] = {}
    for family, versions in payload.items():
        if not isinstance(versions, list):
            return None
        if not all(_is_version(version) for version in versions):
            return None
        grouped[family] = set(versions)
    return _freeze(grouped)


def versions_for(index: SpecIndex, family: str) -> tuple[int, ...]:
    """Return ascending versions for family or fail with UnknownFamilyError."""

    known = sorted(index)
    if not family:
        raise UnknownFamilyError(
            "supply a working draft name", family=family, known_families=known
        )
    versions = index.get(family)
    if not versions:
        raise UnknownFamilyError(
            f"unknown working draft name: {family}", family=family, known_families=known
        )
    return versions


def _freeze(grouped: dict[str, set[int]]) -> SpecIndex:
    return MappingProxyType(
        {family: tuple(sorted(versions)) for family, versions in sorted(grouped.items())}
    )


def _is_version(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
