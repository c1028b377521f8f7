"""
LinkedIn connection export mapping for the Network context.

Maps rows of a "Connections.csv" export onto LinkedInConnection records.
Columns are found by header name (case-insensitive, trimmed), so column
order doesn't matter; a missing column or a short row gives "" for the field.
"""

from collections import Counter
from dataclasses import asdict, dataclass
from typing import Optional

from cipher.contexts.network.csv_tokenizer import CsvTable, parse_csv
from cipher.contexts.network.logger import _log_debug, _log_info

# Record field → export header name
CONNECTION_HEADERS = {
    "first_name": "First Name",
    "last_name": "Last Name",
    "email": "Email Address",
    "company": "Company",
    "position": "Position",
    "connected_on": "Connected On",
    "location": "Location",
}

# Record field → camelCase key for JSON consumers
CAMEL_CASE_KEYS = {
    "first_name": "firstName",
    "last_name": "lastName",
    "email": "email",
    "company": "company",
    "position": "position",
    "connected_on": "connectedOn",
    "location": "location",
}


@dataclass(frozen=True)
class LinkedInConnection:
    """One row of a LinkedIn connections export."""

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    company: str = ""
    position: str = ""
    connected_on: str = ""
    location: str = ""

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)

    def to_dict(self) -> dict[str, str]:
        """Serialize with camelCase keys (firstName, connectedOn, ...)."""
        return {CAMEL_CASE_KEYS[key]: value for key, value in asdict(self).items()}


def normalize_header(value: str) -> str:
    """Lower-case and trim a header cell, dropping a stray byte-order mark."""
    return value.replace("\ufeff", "").strip().lower()


def build_column_index(headers: list[str]) -> dict[str, Optional[int]]:
    """
    Locate each known LinkedIn column in a header row.

    Args:
        headers: Raw header cells

    Returns:
        Dict mapping record field name to column index (None if absent).
        The first matching column wins when a header repeats.
    """
    normalized = [normalize_header(header) for header in headers]
    index: dict[str, Optional[int]] = {}

    for field_name, header_name in CONNECTION_HEADERS.items():
        target = normalize_header(header_name)
        index[field_name] = normalized.index(target) if target in normalized else None

    return index


def _is_header_row(row: list[str]) -> bool:
    """True when the row carries the export's "First Name" header."""
    target = normalize_header(CONNECTION_HEADERS["first_name"])
    return any(normalize_header(cell) == target for cell in row)


def _split_header(table: CsvTable) -> tuple[list[str], list[list[str]]]:
    """
    Return (headers, data rows), skipping any notes LinkedIn puts above the header.

    Newer exports start with a "Notes:" preamble; when the first row isn't the
    header, the first row that is takes its place. Otherwise the first row is used.
    """
    if _is_header_row(table.headers):
        return table.headers, table.rows

    for offset, row in enumerate(table.rows):
        if _is_header_row(row):
            return row, table.rows[offset + 1 :]

    return table.headers, table.rows


def _is_blank_row(row: list[str]) -> bool:
    return all(not cell.strip() for cell in row)


def _cell(row: list[str], index: Optional[int]) -> str:
    """Row value at index, or "" when the column is missing or the row is short."""
    if index is None or index >= len(row):
        return ""
    return row[index]


def parse_linkedin_connections(csv_text: str) -> list[LinkedInConnection]:
    """
    Parse a LinkedIn connections CSV export.

    Args:
        csv_text: Decoded CSV text

    Returns:
        One LinkedInConnection per non-blank data row; [] for blank input
    """
    if not (csv_text or "").strip():
        return []

    headers, rows = _split_header(parse_csv(csv_text))
    column_index = build_column_index(headers)

    missing = [CONNECTION_HEADERS[name] for name, idx in column_index.items() if idx is None]
    if missing:
        _log_debug(f"Export is missing columns: {', '.join(missing)}")

    connections = [
        LinkedInConnection(
            **{field_name: _cell(row, idx) for field_name, idx in column_index.items()}
        )
        for row in rows
        if not _is_blank_row(row)
    ]

    _log_info(f"Parsed {len(connections)} connections")
    return connections


def company_breakdown(
    connections: list[LinkedInConnection], top: Optional[int] = None
) -> list[tuple[str, int]]:
    """
    Count connections per company, most common first.

    Blank company names are skipped. Ties keep first-seen order.

    Args:
        connections: Parsed connections
        top: Limit to this many companies (None = all)

    Returns:
        List of (company, count) pairs
    """
    counts = Counter(conn.company.strip() for conn in connections if conn.company.strip())
    return counts.most_common(top)
