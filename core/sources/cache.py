"""Get-or-populate text caches for spec index and document sources.

Entries are never invalidated automatically: an existing entry is returned as-is
regardless of age. Delete the cache file to force a refetch.
"""

from __future__ import annotations

import tempfile
from collections.abc import Callable
from pathlib import Path
from typing import Protocol

Populate = Callable[[], str]
Validate = Callable[[str], bool]


class TextCache(Protocol):
    """Protocol for key -> text caches."""

    def get_or_populate(
        self, key: str, populate: Populate, validate: Validate | None = None
    ) -> str:
        """Return the cached text for key, calling populate and storing its result on a miss.

        A stored entry rejected by validate counts as a miss.
        """


class FileTextCache:
    """Persist cache entries as one UTF-8 file per key under a root directory."""

    def __init__(self, root: Path) -> None:
        self._root = root

    def path_for(self, key: str) -> Path:
        return self._root / key

    def get_or_populate(
        self, key: str, populate: Populate, validate: Validate | None = None
    ) -> str:
        path = self.path_for(key)
        cached = self._read(path)
        if cached is not None and (validate is None or validate(cached)):
            return cached

        text = populate()
        self._write(path, text)
        return text

    def _read(self, path: Path) -> str | None:
        try:
            return path.read_text(encoding="utf-8")
        except (FileNotFoundError, IsADirectoryError, UnicodeDecodeError):
            return None

    def _write(self, path: Path, text: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=path.parent,
            delete=False,
            prefix=f"{path.name}.",
            suffix=".tmp",
        ) as tmp:
            tmp_path = Path(tmp.name)
            tmp.write(text)

        tmp_path.replace(path)


class MemoryTextCache:
    """In-process cache used by tests."""

    def __init__(self, entries: dict[str, str] | None = None) -> None:
        self.entries: dict[str, str] = dict(entries or {})
        self.populated: list[str] = []

    def get_or_populate(
        self, key: str, populate: Populate, validate: Validate | None = None
    ) -> str:
        cached = self.entries.get(key)
        if cached is not None and (validate is None or validate(cached)):
            return cached

        text = populate()
        self.entries[key] = text
        self.populated.append(key)
        return text
