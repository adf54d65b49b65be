"""Draft document resolution through the text cache."""

from __future__ import annotations

from core.sources.cache import TextCache
from core.sources.remote import SpecSourceClient
from core.sources.settings import GeneratorSettings


def resolve_document(
    cache: TextCache,
    client: SpecSourceClient,
    settings: GeneratorSettings,
    family: str,
    version: int,
) -> str:
    """Return raw HTML for one (family, version) draft, fetching it at most once ever."""

    url = settings.document_url(family, version)
    return cache.get_or_populate(
        settings.document_cache_key(family, version),
        lambda: client.fetch_document(url),
    )
