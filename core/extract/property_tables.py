"""Property definition extraction from Bikeshed-generated draft HTML.

Rules:
- A document must contain the ``#property-index`` landmark heading.
- Exactly one ``table.index`` must follow it inside the adjacent
  ``.big-element-wrapper``; otherwise the document is treated as having no
  properties.
- Documents are parsed with the HTML5 tree builder; Bikeshed omits the
  optional ``</tr>``, ``</th>`` and ``</td>`` end tags.
- Every ``table.propdef`` becomes one record per comma-separated alias.
- Rows carrying a non-empty "New values" cell extend another spec's property
  and are dropped.
"""

from __future__ import annotations

import logging
import re
from types import MappingProxyType

from bs4 import BeautifulSoup
from bs4.element import Tag

from core.extract.models import PLACEHOLDER, ExtractResult, PropertyRecord
from core.utils.events import log_event
from core.utils.naming import snake

logger = logging.getLogger("valuegen.extract")

_LANDMARK_SELECTOR = "#property-index"
_INDEX_TABLE_SELECTOR = "#property-index + .big-element-wrapper table.index"
_PROPDEF_SELECTOR = "table.propdef"
_ALIAS_SPLIT_RE = re.compile(r"\s*,\s*")

_KNOWN_FIELDS = frozenset(
    {
        "name",
        "value",
        "initial",
        "applies_to",
        "inherited",
        "percentages",
        "canonical_order",
        "animation_type",
        "new_values",
    }
)


def extract_properties(html: str, *, source: str = "<document>") -> ExtractResult:
    """Parse one draft document into property records.

    Args:
        html: Raw document text as cached.
        source: Label used in log events, usually the document URL.

    Returns:
        ExtractResult whose outcome is "ok" when the property index checks
        passed; other outcomes carry no records.
    """

    soup = BeautifulSoup(html, "html5lib")

    if soup.select_one(_LANDMARK_SELECTOR) is None:
        log_event(
            logger, logging.WARNING, "document_skipped", source=source, reason="no_property_index"
        )
        return ExtractResult(outcome="no_property_index")

    index_tables = soup.select(_INDEX_TABLE_SELECTOR)
    if len(index_tables) != 1:
        log_event(
            logger,
            logging.WARNING,
            "document_skipped",
            source=source,
            reason="index_table_count",
            index_table_count=len(index_tables),
        )
        return ExtractResult(outcome="index_table_count", index_table_count=len(index_tables))

    heading = soup.find("h1")
    title = heading.get_text().strip() if heading is not None else ""

    records: list[PropertyRecord] = []
    for table in soup.select(_PROPDEF_SELECTOR):
        records.extend(
            record
            for record in records_from_row_map(read_row_map(table))
            if not record.is_new_values
        )

    return ExtractResult(outcome="ok", title=title, records=records, index_table_count=1)


def read_row_map(table: Tag) -> dict[str, str]:
    """Map normalized header text to trimmed data cell text for one propdef table."""

    row_map: dict[str, str] = {}
    for row in table.find_all("tr"):
        header = row.find("th")
        cell = row.find("td")
        if header is None or cell is None:
            continue
        row_map[normalize_header(header.get_text())] = cell.get_text().strip()
    return row_map


def normalize_header(text: str) -> str:
    stripped = text.strip()
    if stripped.endswith(":"):
        stripped = stripped[:-1].rstrip()
    return snake(stripped)


def records_from_row_map(row_map: dict[str, str]) -> list[PropertyRecord]:
    """Split the name cell into aliases, sharing every other field."""

    names = [name for name in _ALIAS_SPLIT_RE.split(row_map.get("name", "").strip()) if name]
    extra = MappingProxyType(
        {key: value for key, value in sorted(row_map.items()) if key not in _KNOWN_FIELDS}
    )
    return [
        PropertyRecord(
            name=name,
            value=row_map.get("value", PLACEHOLDER),
            initial=row_map.get("initial", PLACEHOLDER),
            applies_to=row_map.get("applies_to", PLACEHOLDER),
            inherited=row_map.get("inherited", PLACEHOLDER),
            percentages=row_map.get("percentages", PLACEHOLDER),
            canonical_order=row_map.get("canonical_order", PLACEHOLDER),
            animation_type=row_map.get("animation_type"),
            new_values=row_map.get("new_values", PLACEHOLDER),
            extra=extra,
        )
        for name in names
    ]
