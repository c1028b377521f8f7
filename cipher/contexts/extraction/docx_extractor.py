"""
DOCX ➜ raw text

Opens the OOXML zip package, reads word/document.xml, and rebuilds one line
per paragraph from its <w:t> text runs. Tables, headers/footers, text boxes
and footnotes live in other parts (or in nested markup) and are not recovered.
"""

import io
import zipfile
import zlib

from cipher.contexts.extraction.exceptions import EmptyDocumentError, MalformedDocumentError
from cipher.contexts.extraction.logger import _log_debug
from cipher.contexts.extraction.patterns import DocxPatterns
from cipher.utils.text_processing import decode_xml_entities


def _read_document_xml(data: bytes) -> str:
    """
    Read the main document part out of a DOCX package.

    Raises:
        EmptyDocumentError: If the buffer is empty
        MalformedDocumentError: If the buffer isn't a zip or lacks word/document.xml
    """
    if not data:
        raise EmptyDocumentError("DOCX buffer is empty", kind="docx")

    try:
        with zipfile.ZipFile(io.BytesIO(bytes(data))) as package:
            if DocxPatterns.DOCUMENT_ENTRY not in package.namelist():
                raise MalformedDocumentError(
                    f"{DocxPatterns.DOCUMENT_ENTRY} not found in package", kind="docx"
                )
            xml_bytes = package.read(DocxPatterns.DOCUMENT_ENTRY)
    except (
        zipfile.BadZipFile,
        zipfile.LargeZipFile,
        zlib.error,
        EOFError,
        NotImplementedError,
        RuntimeError,
        ValueError,
    ) as e:
        raise MalformedDocumentError("Not a readable zip package", kind="docx", detail=str(e))

    return xml_bytes.decode("utf-8", errors="replace")


def paragraph_texts(xml: str) -> list[str]:
    """
    Split document XML into paragraphs and rebuild each one's visible text.

    Args:
        xml: Contents of word/document.xml

    Returns:
        Non-empty paragraph strings in document order; runs joined by single spaces
    """
    paragraphs = []

    for chunk in xml.split(DocxPatterns.PARAGRAPH_END):
        runs = [decode_xml_entities(run) for run in DocxPatterns.TEXT_RUN.findall(chunk)]
        if not runs:
            continue
        text = " ".join(runs).strip()
        if text:
            paragraphs.append(text)

    return paragraphs


def extract_docx_text(data: bytes) -> str:
    """
    Extract paragraph text from a DOCX byte buffer.

    A buffer that isn't a zip, or a package without word/document.xml,
    yields "" rather than an error.

    Args:
        data: Raw DOCX bytes

    Returns:
        Paragraphs joined by newlines
    """
    try:
        xml = _read_document_xml(data)
    except (EmptyDocumentError, MalformedDocumentError) as e:
        _log_debug(f"DOCX extraction skipped: {e.message}")
        return ""

    paragraphs = paragraph_texts(xml)
    _log_debug(f"DOCX: {len(paragraphs)} paragraphs")

    return "\n".join(paragraphs).strip()
