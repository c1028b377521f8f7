"""Failure taxonomy for document extraction.

These are raised by private helpers only. Public extractor functions catch them
and degrade to an empty result (plus a warning in document dispatch).
"""

from typing import Optional

from cipher.utils.text_processing import truncate_display


class DocumentExtractionError(Exception):
    """
    Base class for recoverable extraction failures.

    Attributes:
        message: Error description
        kind: Document kind being extracted (e.g., 'pdf', 'docx')
        detail: Underlying cause, truncated for logging
    """

    def __init__(
        self,
        message: str,
        kind: Optional[str] = None,
        detail: Optional[str] = None,
    ):
        self.message = message
        self.kind = kind
        self.detail = detail

        parts = [message]

        if kind:
            parts.append(f"Kind: {kind}")

        if detail:
            parts.append(f"Detail: {truncate_display(detail, 200)}")

        super().__init__("\n".join(parts))


class MalformedDocumentError(DocumentExtractionError):
    """Byte structure is unrecognized or corrupt (e.g., a DOCX zip without word/document.xml)."""

    pass


class EmptyDocumentError(DocumentExtractionError):
    """Input is zero-length or whitespace-only."""

    pass
