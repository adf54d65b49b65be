"""Run settings for spec fetching, caching and module output."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_TREE_URL = "https://api.github.com/repos/w3c/csswg-drafts/git/trees/main"
DEFAULT_DRAFTS_BASE_URL = "https://drafts.csswg.org"
DEFAULT_OUT_ROOT = Path("crates/css_ast/src/values")
FAMILY_PREFIX = "css-"

_DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True)
class GeneratorSettings:
    """Locations and limits for one generation run."""

    cache_dir: Path = field(default_factory=lambda: Path("."))
    out_root: Path = DEFAULT_OUT_ROOT
    tree_url: str = DEFAULT_TREE_URL
    drafts_base_url: str = DEFAULT_DRAFTS_BASE_URL
    timeout_seconds: float = _DEFAULT_TIMEOUT_SECONDS

    @property
    def index_cache_key(self) -> str:
        return ".index-cache.json"

    def document_cache_key(self, family: str, version: int) -> str:
        return f".{family}-{version}-cache.txt"

    def document_url(self, family: str, version: int) -> str:
        return f"{self.drafts_base_url.rstrip('/')}/{FAMILY_PREFIX}{family}-{version}/"


def settings_from_env() -> GeneratorSettings:
    """Build settings, honouring VALUEGEN_* environment overrides."""

    return GeneratorSettings(
        cache_dir=_env_path("VALUEGEN_CACHE_DIR", Path(".")),
        out_root=_env_path("VALUEGEN_OUT_ROOT", DEFAULT_OUT_ROOT),
        timeout_seconds=_timeout_seconds(),
    )


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return Path(raw.strip())


def _timeout_seconds() -> float:
    raw = os.getenv("VALUEGEN_HTTP_TIMEOUT_SECONDS")
    if raw is None:
        return _DEFAULT_TIMEOUT_SECONDS
    try:
        parsed = float(raw)
    except ValueError:
        return _DEFAULT_TIMEOUT_SECONDS
    return parsed if parsed > 0 else _DEFAULT_TIMEOUT_SECONDS
