"""
PDF ➜ raw text

Two paths:
- extract_pdf_text(): literal content-stream scanner. Treats the buffer as
  Latin-1 and recovers strings shown by `Tj` / `TJ` operators. No object graph,
  no stream decompression, so FlateDecode-compressed pages yield nothing.
  Never raises.
- extract_pdf_text_with_layout(): pdfplumber/pdfminer page extraction, which
  does handle compressed streams. Used by document dispatch before falling
  back to the literal scanner.
"""

import io
import logging
import re

import pdfplumber

from cipher.contexts.extraction.exceptions import EmptyDocumentError, MalformedDocumentError
from cipher.contexts.extraction.logger import _log_debug
from cipher.contexts.extraction.patterns import PDF_SIMPLE_ESCAPES, PdfPatterns
from cipher.utils.text_processing import collapse_whitespace

# silence noisy PDF logging
logging.getLogger("pdfplumber").setLevel(logging.ERROR)
logging.getLogger("pdfminer").setLevel(logging.ERROR)

_CID_RE = re.compile(r"\(cid:\d+\)")


def decode_pdf_string(value: str) -> str:
    """
    Decode escape sequences in a PDF literal string body.

    Precedence: \\n \\r \\t \\b \\f, then escaped parentheses, then escaped
    backslash, then octal escapes (1-3 digits) via codepoint construction.

    Example:
        >>> decode_pdf_string(r"Caf\\351 \\(Paris\\)")
        'Café (Paris)'
    """
    for escape, char in PDF_SIMPLE_ESCAPES:
        value = value.replace(escape, char)

    return PdfPatterns.OCTAL_ESCAPE.sub(lambda m: chr(int(m.group(1), 8)), value)


def _iter_text_fragments(content: str):
    """Yield decoded string fragments from Tj/TJ operators in source order."""
    for match in PdfPatterns.SHOW_TEXT_ANY.finditer(content):
        literal = match.group("literal")
        if literal is not None:
            if literal:
                yield decode_pdf_string(literal)
            continue

        for entry in PdfPatterns.ARRAY_LITERAL.finditer(match.group("array")):
            raw = entry.group("literal")
            if raw:
                yield decode_pdf_string(raw)


def extract_pdf_text(data: bytes) -> str:
    """
    Recover visible text from a PDF byte buffer's literal text operators.

    Malformed or compressed PDFs degrade to empty or partial output.

    Args:
        data: Raw PDF bytes

    Returns:
        Decoded fragments joined by single spaces with whitespace collapsed
    """
    if not data:
        return ""

    content = bytes(data).decode("latin-1")
    fragments = list(_iter_text_fragments(content))
    _log_debug(f"PDF literal scan: {len(fragments)} fragments")

    return collapse_whitespace(" ".join(fragments))


def _read_pages_with_layout(data: bytes) -> str:
    """
    Extract page text with pdfplumber.

    Raises:
        EmptyDocumentError: If the buffer is empty
        MalformedDocumentError: If pdfplumber/pdfminer can't read the document
    """
    if not data:
        raise EmptyDocumentError("PDF buffer is empty", kind="pdf")

    try:
        with pdfplumber.open(io.BytesIO(bytes(data))) as pdf:
            pages = [page.extract_text() or "" for page in pdf.pages]
    except Exception as e:
        raise MalformedDocumentError("pdfplumber could not read PDF", kind="pdf", detail=str(e))

    return _CID_RE.sub("", "\n".join(pages)).strip()


def extract_pdf_text_with_layout(data: bytes) -> str:
    """
    Extract PDF text with pdfplumber, returning "" on any failure.

    Args:
        data: Raw PDF bytes

    Returns:
        Page texts joined by newlines, with `(cid:N)` glyph artifacts removed
    """
    try:
        return _read_pages_with_layout(data)
    except (EmptyDocumentError, MalformedDocumentError) as e:
        _log_debug(f"Layout extraction unavailable: {e.message}")
        return ""
