"""
Byte-level patterns for document text extraction.

Pattern classes follow the frozen-dataclass convention:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Helper functions in the extractor modules use these patterns
"""

import re
from dataclasses import dataclass

# =============================================================================
# PDF CONTENT STREAM PATTERNS
# =============================================================================

# A literal string body: escaped char, or anything but backslash/parens
_PDF_LITERAL_BODY = r"(?:\\.|[^\\()])*"

# Array contents: literal strings plus anything that isn't a bracket or paren
# (spacing numbers, hex strings, whitespace)
_PDF_ARRAY_BODY = rf"(?:\({_PDF_LITERAL_BODY}\)|[^\[\]()])*"


@dataclass(frozen=True)
class PdfPatterns:
    """
    Regex patterns for the two PDF text-showing idioms.

    Only literal, uncompressed content operators are recognized:
    - (Hello World) Tj           show a single string
    - [(Hel) -20 (lo)] TJ        show an array of strings with spacing adjustments
    """

    # Either idiom, so fragments come back in source order
    SHOW_TEXT_ANY: re.Pattern = re.compile(
        rf"\((?P<literal>{_PDF_LITERAL_BODY})\)\s*Tj|\[(?P<array>{_PDF_ARRAY_BODY})\]\s*TJ",
        re.DOTALL,
    )

    # Literal strings inside a TJ array
    ARRAY_LITERAL: re.Pattern = re.compile(rf"\((?P<literal>{_PDF_LITERAL_BODY})\)", re.DOTALL)

    # Octal escape: backslash + 1-3 octal digits
    OCTAL_ESCAPE: re.Pattern = re.compile(r"\\([0-7]{1,3})")


# Simple escapes, applied in this order before octal decoding
PDF_SIMPLE_ESCAPES = (
    ("\\n", "\n"),
    ("\\r", "\r"),
    ("\\t", "\t"),
    ("\\b", "\b"),
    ("\\f", "\f"),
    ("\\(", "("),
    ("\\)", ")"),
    ("\\\\", "\\"),
)

# =============================================================================
# DOCX (OOXML) PATTERNS
# =============================================================================


@dataclass(frozen=True)
class DocxPatterns:
    """
    Patterns for pulling paragraph text out of word/document.xml.

    The body is split on the paragraph closing tag; within each paragraph,
    every <w:t> run's literal content is collected.
    """

    DOCUMENT_ENTRY: str = "word/document.xml"

    PARAGRAPH_END: str = "</w:p>"

    # <w:t>text</w:t> or <w:t xml:space="preserve">text</w:t>, not <w:tab/> or <w:tbl>
    TEXT_RUN: re.Pattern = re.compile(r"<w:t(?:\s[^>]*)?>([^<]*)</w:t>")


# =============================================================================
# FORMAT DETECTION
# =============================================================================

DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


@dataclass(frozen=True)
class FormatSignatures:
    """
    File extension, MIME type, and magic-byte signatures per document kind.

    Detection order: extension, then MIME type, then leading bytes.
    """

    PDF_EXTENSIONS: tuple = ("pdf",)
    DOCX_EXTENSIONS: tuple = ("docx",)
    DOC_EXTENSIONS: tuple = ("doc",)
    CSV_EXTENSIONS: tuple = ("csv",)

    PDF_MIME_TYPES: tuple = ("application/pdf",)
    DOCX_MIME_TYPES: tuple = (DOCX_MIME_TYPE,)
    DOC_MIME_TYPES: tuple = ("application/msword",)
    CSV_MIME_TYPES: tuple = ("text/csv", "application/csv")

    PDF_MAGIC: bytes = b"%PDF"
    ZIP_MAGIC: bytes = b"PK\x03\x04"
    OLE_MAGIC: bytes = b"\xd0\xcf\x11\xe0"


# data:<mime>;base64,<payload>
DATA_URL_PATTERN = re.compile(r"^data:(?P<mime>[^;,]*)(?:;[^,]*)?;base64,", re.IGNORECASE)
