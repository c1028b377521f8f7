"""
Extraction Context

Responsibilities:
- Detects the format of an uploaded document (PDF, DOCX, DOC, CSV)
- Recovers plain text from the document bytes
- Reports non-fatal problems as warnings instead of raising

Owns: Binary document decoding and format dispatch
Never: Interprets the text it recovers (that belongs to Intake)
"""

from cipher.contexts.extraction.document import (
    DocumentKind,
    ExtractionResult,
    RawDocument,
    detect_document_kind,
    extract_text,
    extract_text_from_base64,
)
from cipher.contexts.extraction.exceptions import (
    DocumentExtractionError,
    EmptyDocumentError,
    MalformedDocumentError,
)

__all__ = [
    "DocumentExtractionError",
    "DocumentKind",
    "EmptyDocumentError",
    "ExtractionResult",
    "MalformedDocumentError",
    "RawDocument",
    "detect_document_kind",
    "extract_text",
    "extract_text_from_base64",
]
