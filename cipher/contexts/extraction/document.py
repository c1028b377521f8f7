"""
Uploaded document data structures and format dispatch for the Extraction context.

Provides RawDocument (bytes + declared name/MIME type) and extract_text(),
which picks the right extractor and reports non-fatal problems as warnings.

Extractors only produce text; dispatch adds the detected kind and the
warnings callers need to present.
"""

import base64
import binascii
from dataclasses import dataclass
from enum import Enum

from cipher.contexts.extraction.doc_extractor import extract_doc_text
from cipher.contexts.extraction.docx_extractor import extract_docx_text
from cipher.contexts.extraction.logger import _log_debug, _log_warning, log_extraction_result
from cipher.contexts.extraction.patterns import DATA_URL_PATTERN, FormatSignatures
from cipher.contexts.extraction.pdf_extractor import (
    extract_pdf_text,
    extract_pdf_text_with_layout,
)
from cipher.contexts.network.csv_tokenizer import decode_csv_bytes


class DocumentKind(Enum):
    """Supported upload formats."""

    PDF = "pdf"
    DOCX = "docx"
    DOC = "doc"
    CSV = "csv"
    UNKNOWN = "unknown"


# Warning strings surfaced to callers
EMPTY_DOCUMENT_WARNING = "Document is empty."
UNSUPPORTED_WARNING = "Unsupported file type for extraction."
NOISY_DOC_WARNING = "DOC extraction is best-effort; text may be noisy."

# Mirrors pdf.use_layout_engine in config/defaults.yaml
USE_LAYOUT_ENGINE = True


def decode_base64_payload(payload: str) -> tuple[bytes, str]:
    """
    Decode a base64 payload, accepting an optional data URL prefix.

    Args:
        payload: Plain base64 text or "data:<mime>;base64,<payload>"

    Returns:
        (data, mime_type) where mime_type comes from the data URL ("" otherwise).
        Undecodable input gives b"".
    """
    payload = (payload or "").strip()
    mime_type = ""

    match = DATA_URL_PATTERN.match(payload)
    if match:
        mime_type = match.group("mime").lower()
        payload = payload[match.end() :]

    try:
        return base64.b64decode(payload), mime_type
    except (binascii.Error, ValueError) as e:
        _log_warning(f"Could not decode base64 payload: {e}")
        return b"", mime_type


@dataclass(frozen=True)
class RawDocument:
    """
    An uploaded document: opaque bytes plus declared filename and MIME type.

    Factory methods:
        from_base64(payload, filename, mime_type) - Decode a base64 or data URL payload
    """

    data: bytes
    filename: str = ""
    mime_type: str = ""

    @classmethod
    def from_base64(cls, payload: str, filename: str = "", mime_type: str = "") -> "RawDocument":
        """
        Build a document from a base64 payload.

        A data URL's MIME type is used when mime_type isn't given.
        """
        data, url_mime_type = decode_base64_payload(payload)
        return cls(data=data, filename=filename, mime_type=mime_type or url_mime_type)

    @property
    def kind(self) -> DocumentKind:
        return detect_document_kind(self.filename, self.mime_type, self.data)


@dataclass(frozen=True)
class ExtractionResult:
    """Text recovered from one document, with the kind it was read as and any warnings."""

    text: str
    kind: DocumentKind
    warnings: tuple[str, ...] = ()


def detect_document_kind(
    filename: str = "", mime_type: str = "", data: bytes = b""
) -> DocumentKind:
    """
    Decide which extractor applies.

    Detection order: filename extension, declared MIME type, leading magic bytes.

    Args:
        filename: Declared filename
        mime_type: Declared MIME type
        data: Document bytes (only the first few are inspected)

    Returns:
        DocumentKind, UNKNOWN when nothing matches
    """
    signatures = FormatSignatures()
    name = (filename or "").lower()
    extension = name.rsplit(".", 1)[-1] if "." in name else ""
    mime = (mime_type or "").lower().split(";")[0].strip()

    by_extension = (
        (signatures.PDF_EXTENSIONS, DocumentKind.PDF),
        (signatures.DOCX_EXTENSIONS, DocumentKind.DOCX),
        (signatures.DOC_EXTENSIONS, DocumentKind.DOC),
        (signatures.CSV_EXTENSIONS, DocumentKind.CSV),
    )
    for extensions, kind in by_extension:
        if extension in extensions:
            return kind

    by_mime = (
        (signatures.PDF_MIME_TYPES, DocumentKind.PDF),
        (signatures.DOCX_MIME_TYPES, DocumentKind.DOCX),
        (signatures.DOC_MIME_TYPES, DocumentKind.DOC),
        (signatures.CSV_MIME_TYPES, DocumentKind.CSV),
    )
    for mime_types, kind in by_mime:
        if mime in mime_types:
            return kind

    head = bytes(data[:8]) if data else b""
    if head.startswith(signatures.PDF_MAGIC):
        return DocumentKind.PDF
    if head.startswith(signatures.ZIP_MAGIC):
        return DocumentKind.DOCX
    if head.startswith(signatures.OLE_MAGIC):
        return DocumentKind.DOC

    return DocumentKind.UNKNOWN


def _extract_pdf(data: bytes, use_layout_engine: bool) -> str:
    """Layout engine first (when enabled), literal scanner when it recovers nothing."""
    if use_layout_engine:
        text = extract_pdf_text_with_layout(data)
        if text:
            return text
        _log_debug("Layout engine returned no text; falling back to literal scan")
    return extract_pdf_text(data)


def extract_text(
    document: RawDocument, use_layout_engine: bool = USE_LAYOUT_ENGINE
) -> ExtractionResult:
    """
    Extract text from an uploaded document.

    Never raises on malformed or empty input: failures come back as empty
    text plus warnings.

    Args:
        document: Uploaded document
        use_layout_engine: Try pdfplumber for PDFs before the literal scanner.
                           When it recovers nothing the scanner still runs.

    Returns:
        ExtractionResult with the text, detected kind, and warnings
    """
    kind = document.kind
    warnings = []

    if not document.data or not bytes(document.data).strip():
        warnings.append(EMPTY_DOCUMENT_WARNING)
        result = ExtractionResult(text="", kind=kind, warnings=tuple(warnings))
        log_extraction_result(kind.value, document.filename, "", result.warnings)
        return result

    if kind is DocumentKind.PDF:
        text = _extract_pdf(document.data, use_layout_engine)
    elif kind is DocumentKind.DOCX:
        text = extract_docx_text(document.data)
    elif kind is DocumentKind.DOC:
        text = extract_doc_text(document.data)
        warnings.append(NOISY_DOC_WARNING)
    elif kind is DocumentKind.CSV:
        text = decode_csv_bytes(document.data)
    else:
        text = ""
        warnings.append(UNSUPPORTED_WARNING)

    if not text and kind is not DocumentKind.UNKNOWN:
        warnings.insert(0, f"{kind.value.upper()} text extraction returned empty output.")

    result = ExtractionResult(text=text, kind=kind, warnings=tuple(warnings))
    log_extraction_result(kind.value, document.filename, text, result.warnings)
    return result


def extract_text_from_base64(
    payload: str,
    filename: str = "",
    mime_type: str = "",
    use_layout_engine: bool = USE_LAYOUT_ENGINE,
) -> ExtractionResult:
    """
    Decode a base64 (or data URL) payload and extract its text.

    Args:
        payload: Base64 document bytes, optionally as a data URL
        filename: Declared filename (drives format detection)
        mime_type: Declared MIME type
        use_layout_engine: See extract_text()

    Returns:
        ExtractionResult
    """
    document = RawDocument.from_base64(payload, filename=filename, mime_type=mime_type)
    return extract_text(document, use_layout_engine=use_layout_engine)
