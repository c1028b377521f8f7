"""Unit tests for format detection and extraction dispatch."""

import base64
import io
import zipfile

import pytest

from cipher.contexts.extraction import (
    DocumentKind,
    RawDocument,
    detect_document_kind,
    extract_text,
    extract_text_from_base64,
)
from cipher.contexts.extraction.patterns import DOCX_MIME_TYPE


def make_docx(*paragraphs: str) -> bytes:
    body = "".join(f"<w:p><w:r><w:t>{text}</w:t></w:r></w:p>" for text in paragraphs)
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as package:
        package.writestr("word/document.xml", f"<w:document><w:body>{body}</w:body></w:document>")
    return buffer.getvalue()


@pytest.mark.unit
class TestDetectDocumentKind:
    """Test extension → MIME → magic-byte detection order."""

    @pytest.mark.parametrize(
        "filename,expected",
        [
            ("resume.pdf", DocumentKind.PDF),
            ("Resume.PDF", DocumentKind.PDF),
            ("cv.docx", DocumentKind.DOCX),
            ("old_cv.doc", DocumentKind.DOC),
            ("Connections.csv", DocumentKind.CSV),
        ],
    )
    def test_by_extension(self, filename, expected):
        """Extension decides when present."""
        assert detect_document_kind(filename) is expected

    @pytest.mark.parametrize(
        "mime_type,expected",
        [
            ("application/pdf", DocumentKind.PDF),
            (DOCX_MIME_TYPE, DocumentKind.DOCX),
            ("application/msword", DocumentKind.DOC),
            ("text/csv; charset=utf-8", DocumentKind.CSV),
        ],
    )
    def test_by_mime_type(self, mime_type, expected):
        """MIME type decides when the filename has no known extension."""
        assert detect_document_kind("upload", mime_type) is expected

    @pytest.mark.parametrize(
        "data,expected",
        [
            (b"%PDF-1.7\n...", DocumentKind.PDF),
            (b"PK\x03\x04\x14\x00", DocumentKind.DOCX),
            (b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1", DocumentKind.DOC),
            (b"hello", DocumentKind.UNKNOWN),
        ],
    )
    def test_by_magic_bytes(self, data, expected):
        """Leading bytes decide when name and MIME type don't."""
        assert detect_document_kind("", "", data) is expected

    def test_extension_beats_mime_type(self):
        """A .docx name wins over a conflicting MIME type."""
        assert detect_document_kind("cv.docx", "application/pdf") is DocumentKind.DOCX


@pytest.mark.unit
class TestRawDocumentFromBase64:
    """Test base64 and data URL payload decoding."""

    def test_plain_base64(self):
        """Plain base64 decodes to the original bytes."""
        payload = base64.b64encode(b"Resume body").decode()
        document = RawDocument.from_base64(payload, filename="cv.doc")
        assert document.data == b"Resume body"
        assert document.kind is DocumentKind.DOC

    def test_data_url_supplies_mime_type(self):
        """A data URL's MIME type is used for detection."""
        payload = "data:application/pdf;base64," + base64.b64encode(b"(Hi) Tj").decode()
        document = RawDocument.from_base64(payload)
        assert document.mime_type == "application/pdf"
        assert document.kind is DocumentKind.PDF

    def test_explicit_mime_type_wins(self):
        """An explicit MIME type overrides the data URL's."""
        payload = "data:text/plain;base64," + base64.b64encode(b"a,b").decode()
        document = RawDocument.from_base64(payload, mime_type="text/csv")
        assert document.mime_type == "text/csv"

    def test_undecodable_payload_is_empty(self):
        """Bad base64 gives empty data instead of raising."""
        assert RawDocument.from_base64("abc").data == b""


@pytest.mark.unit
class TestExtractText:
    """Test dispatch results and warnings."""

    def test_pdf(self):
        """PDF bytes go through the literal scanner."""
        document = RawDocument(b"%PDF-1.4 (Hello World) Tj", filename="cv.pdf")
        result = extract_text(document, use_layout_engine=False)
        assert result.kind is DocumentKind.PDF
        assert result.text == "Hello World"
        assert result.warnings == ()

    def test_pdf_layout_failure_falls_back(self):
        """When pdfplumber can't read the file, the literal scanner still runs."""
        document = RawDocument(b"%PDF-1.4\n(Hello) Tj\n", filename="cv.pdf")
        result = extract_text(document, use_layout_engine=True)
        assert "Hello" in result.text

    def test_docx(self):
        """DOCX bytes give newline-separated paragraphs."""
        document = RawDocument(make_docx("Alex Doe", "Experience"), filename="cv.docx")
        result = extract_text(document, use_layout_engine=False)
        assert result.kind is DocumentKind.DOCX
        assert result.text == "Alex Doe\nExperience"
        assert result.warnings == ()

    def test_doc_always_flagged_noisy(self):
        """DOC results carry the best-effort warning."""
        document = RawDocument(b"\xd0\xcf\x11\xe0Jane Doe", filename="cv.doc")
        result = extract_text(document, use_layout_engine=False)
        assert result.text == "Jane Doe"
        assert result.warnings == ("DOC extraction is best-effort; text may be noisy.",)

    def test_doc_empty_output(self):
        """Empty DOC output reports both warnings, empty-output first."""
        document = RawDocument(b"\x00\x01\x02", filename="cv.doc")
        result = extract_text(document, use_layout_engine=False)
        assert result.text == ""
        assert result.warnings == (
            "DOC text extraction returned empty output.",
            "DOC extraction is best-effort; text may be noisy.",
        )

    def test_corrupt_docx(self):
        """A corrupt DOCX gives empty text and a warning, not an exception."""
        document = RawDocument(b"not a zip file", filename="cv.docx")
        result = extract_text(document, use_layout_engine=False)
        assert result.text == ""
        assert result.warnings == ("DOCX text extraction returned empty output.",)

    def test_csv_decoded(self):
        """CSV bytes are decoded, dropping a UTF-8 BOM."""
        document = RawDocument(b"\xef\xbb\xbfFirst Name\nJamie", filename="Connections.csv")
        result = extract_text(document, use_layout_engine=False)
        assert result.kind is DocumentKind.CSV
        assert result.text == "First Name\nJamie"

    def test_empty_document(self):
        """Empty bytes give the empty-document warning."""
        result = extract_text(RawDocument(b"", filename="cv.pdf"), use_layout_engine=False)
        assert result.text == ""
        assert result.warnings == ("Document is empty.",)

    def test_whitespace_document(self):
        """Whitespace-only bytes count as empty."""
        result = extract_text(RawDocument(b"  \n\t", filename="cv.doc"), use_layout_engine=False)
        assert result.warnings == ("Document is empty.",)

    def test_unsupported(self):
        """Unknown formats give the unsupported warning."""
        result = extract_text(RawDocument(b"hello", filename="notes.xyz"), use_layout_engine=False)
        assert result.kind is DocumentKind.UNKNOWN
        assert result.text == ""
        assert result.warnings == ("Unsupported file type for extraction.",)

    def test_from_base64(self):
        """Convenience wrapper decodes and dispatches."""
        payload = base64.b64encode(make_docx("Data Analysis")).decode()
        result = extract_text_from_base64(payload, filename="cv.docx", use_layout_engine=False)
        assert result.text == "Data Analysis"

    def test_ignores_config_environment(self, tmp_path, monkeypatch):
        """Default arguments don't read settings, so a stale CIPHER_CONFIG_PATH is harmless."""
        monkeypatch.setenv("CIPHER_CONFIG_PATH", str(tmp_path / "missing.yaml"))
        result = extract_text(RawDocument(b"%PDF-1.4 (Hello World) Tj", filename="cv.pdf"))
        assert result.text == "Hello World"
