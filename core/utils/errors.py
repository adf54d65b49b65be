"""Custom exceptions for core logic."""

from __future__ import annotations


class UnknownFamilyError(Exception):
    """Raised when the requested family is missing or not present in the spec index."""

    def __init__(self, message: str, *, family: str, known_families: list[str]) -> None:
        super().__init__(message)
        self.family = family
        self.known_families = known_families


class SourceFetchError(Exception):
    """Raised when a remote spec source cannot be fetched."""

    def __init__(self, message: str, *, url: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code
