"""
Quoted-field CSV tokenizer for LinkedIn connection exports.

A single left-to-right scan with a quote-state flag:
- `"` toggles quote mode; `""` inside quotes is one literal quote
- `,` outside quotes ends the field
- `\\n`, `\\r`, or `\\r\\n` outside quotes ends the field and the row
- a trailing partial row (no final newline) is kept

The first row is the header row.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CsvTable:
    """Tokenized CSV: header cells plus data rows (rows may be shorter than headers)."""

    headers: list[str] = field(default_factory=list)
    rows: list[list[str]] = field(default_factory=list)


def tokenize_csv(text: str) -> list[list[str]]:
    """
    Split CSV text into rows of fields.

    Args:
        text: CSV text

    Returns:
        List of rows, each a list of raw field strings (quotes removed)
    """
    rows: list[list[str]] = []
    current: list[str] = []
    chars: list[str] = []
    in_quotes = False

    i = 0
    length = len(text)
    while i < length:
        char = text[i]
        next_char = text[i + 1] if i + 1 < length else ""

        if char == '"':
            if in_quotes and next_char == '"':
                chars.append('"')
                i += 2
                continue
            in_quotes = not in_quotes
            i += 1
            continue

        if char == "," and not in_quotes:
            current.append("".join(chars))
            chars = []
            i += 1
            continue

        if char in ("\n", "\r") and not in_quotes:
            # \r\n counts as one terminator
            i += 2 if char == "\r" and next_char == "\n" else 1
            current.append("".join(chars))
            chars = []
            rows.append(current)
            current = []
            continue

        chars.append(char)
        i += 1

    if chars or current:
        current.append("".join(chars))
        rows.append(current)

    return rows


def parse_csv(text: str) -> CsvTable:
    """
    Tokenize CSV text and split off the header row.

    Args:
        text: CSV text

    Returns:
        CsvTable; empty headers and rows for empty input
    """
    rows = tokenize_csv(text or "")
    if not rows:
        return CsvTable()

    return CsvTable(headers=rows[0], rows=rows[1:])


def decode_csv_bytes(data: bytes) -> str:
    """
    Decode an uploaded CSV export.

    UTF-8 (a leading byte-order mark is dropped), falling back to Latin-1,
    which accepts any byte sequence.
    """
    if not data:
        return ""

    try:
        return bytes(data).decode("utf-8-sig")
    except UnicodeDecodeError:
        return bytes(data).decode("latin-1")
