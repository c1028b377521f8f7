"""
Text processing utilities shared by the extractors and parsers.
"""

import re
import unicodedata

# Unicode replacements: problematic char → ASCII equivalent
UNICODE_REPLACEMENTS = {
    # Spaces
    "\u00a0": " ",  # non-breaking space → space
    "\u202f": " ",  # narrow no-break space
    # Zero-width characters → remove
    "\u200b": "",  # zero-width space
    "\u200c": "",  # zero-width non-joiner
    "\u200d": "",  # zero-width joiner
    "\u2060": "",  # word joiner
    "\ufeff": "",  # BOM / zero-width no-break space
    # Quotes
    "\u2018": "'",  # left single quote
    "\u2019": "'",  # right single quote
    "\u201c": '"',  # left double quote
    "\u201d": '"',  # right double quote
    # Dashes
    "\u2013": "-",  # en dash
    "\u2014": "-",  # em dash
    # Bullets and misc
    "\u2022": "*",  # bullet
    "\u2026": "...",  # ellipsis
    "\u00b7": "*",  # middle dot (used as bullet)
}

# The five predefined XML entities, in decoding order. &amp; goes last so an
# escaped entity such as &amp;lt; decodes once, to the literal text &lt;
XML_ENTITIES = (
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
    ("&amp;", "&"),
)

_WHITESPACE_RUN = re.compile(r"\s+")
_NON_PRINTABLE_RUN = re.compile(r"[^\x09\x0A\x0D\x20-\x7E]+")


def normalize_unicode(text: str) -> str:
    """
    Normalize unicode characters that cause parsing issues.

    Applies NFKC normalization and replaces common problematic characters
    with ASCII equivalents.

    Args:
        text: Raw text possibly containing problematic unicode

    Returns:
        Text with normalized unicode
    """
    text = unicodedata.normalize("NFKC", text)

    for char, replacement in UNICODE_REPLACEMENTS.items():
        text = text.replace(char, replacement)

    return text


def collapse_whitespace(text: str) -> str:
    """Replace every whitespace run with a single space and strip the ends."""
    return _WHITESPACE_RUN.sub(" ", text).strip()


def normalize_line(line: str) -> str:
    """Trim a line and collapse its internal whitespace."""
    return collapse_whitespace(line)


def decode_xml_entities(value: str) -> str:
    """
    Decode the five standard XML entities.

    Example:
        >>> decode_xml_entities("R&amp;D &lt;team&gt;")
        'R&D <team>'
        >>> decode_xml_entities("&amp;lt;br&amp;gt;")
        '&lt;br&gt;'
    """
    for entity, char in XML_ENTITIES:
        value = value.replace(entity, char)
    return value


def strip_non_printable(value: str) -> str:
    """
    Keep printable ASCII plus tab/newline/carriage return.

    Each run of other characters becomes one space, then whitespace is collapsed.
    """
    return collapse_whitespace(_NON_PRINTABLE_RUN.sub(" ", value))


def truncate_display(text: str, max_len: int) -> str:
    """
    Truncate text for display with ellipsis if needed.

    Args:
        text: Text to truncate
        max_len: Maximum length including ellipsis

    Returns:
        Original text if within max_len, otherwise truncated with "..."
    """
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
