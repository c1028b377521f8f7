"""
Legacy DOC ➜ raw text (best effort)

Word 97-2003 files are OLE compound documents. Rather than parse that
structure, this keeps the printable ASCII runs that DOC stores inline and
drops everything else. Expect stray tokens from style tables and metadata:
the result is lower fidelity than the PDF/DOCX paths and downstream
consumers should treat it as noisy.
"""

from cipher.contexts.extraction.logger import _log_debug
from cipher.utils.text_processing import strip_non_printable


def extract_doc_text(data: bytes) -> str:
    """
    Recover printable text from a legacy DOC byte buffer.

    Args:
        data: Raw DOC bytes

    Returns:
        Printable ASCII (plus tab/newline/CR) with whitespace runs collapsed
    """
    if not data:
        return ""

    text = strip_non_printable(bytes(data).decode("latin-1"))
    _log_debug(f"DOC printable filter kept {len(text)} of {len(data)} bytes")
    return text
