"""HTTP access to the csswg-drafts tree listing and published drafts."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from core.utils.errors import SourceFetchError
from core.utils.events import log_event

logger = logging.getLogger("valuegen.remote")


class SpecSourceClient:
    """Thin synchronous wrapper over httpx for the two remote reads a run makes."""

    def __init__(self, client: httpx.Client) -> None:
        self._client = client

    def fetch_tree(self, url: str) -> list[dict[str, Any]]:
        """Fetch the repository tree listing and return its entries."""

        response = self._get(url)
        if response.status_code != 200:
            raise SourceFetchError(
                f"Tree listing request failed with status {response.status_code}: {url}",
                url=url,
                status_code=response.status_code,
            )
        try:
            payload = response.json()
        except ValueError as exc:
            raise SourceFetchError(f"Tree listing is not valid JSON: {url}", url=url) from exc

        tree = payload.get("tree") if isinstance(payload, dict) else None
        if not isinstance(tree, list):
            raise SourceFetchError(f"Tree listing has no 'tree' array: {url}", url=url)
        return [entry for entry in tree if isinstance(entry, dict)]

    def fetch_document(self, url: str) -> str:
        """Fetch a draft's HTML.

        Error pages with a body are returned as-is; callers must tolerate pages
        without property tables.
        """

        response = self._get(url)
        if response.status_code != 200:
            if not response.text:
                raise SourceFetchError(
                    f"Document request failed with status {response.status_code}: {url}",
                    url=url,
                    status_code=response.status_code,
                )
            log_event(
                logger,
                logging.WARNING,
                "document_error_status",
                url=url,
                status_code=response.status_code,
            )
        return response.text

    def _get(self, url: str) -> httpx.Response:
        log_event(logger, logging.INFO, "fetch", url=url)
        try:
            return self._client.get(url, follow_redirects=True)
        except httpx.HTTPError as exc:
            raise SourceFetchError(f"Request failed: {url}: {exc}", url=url) from exc


def build_http_client(timeout_seconds: float) -> httpx.Client:
    return httpx.Client(
        timeout=timeout_seconds,
        headers={"User-Agent": "csswg-valuegen"},
    )
