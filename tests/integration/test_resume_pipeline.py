"""
Integration tests for the upload → text → profile pipeline.
Tests: document bytes go through format dispatch and resume parsing end to end.
"""

import base64
import io
import zipfile

import pytest

from cipher.contexts.extraction import (
    DocumentKind,
    RawDocument,
    extract_text,
    extract_text_from_base64,
)
from cipher.contexts.intake import SkillCategory, SkillPolicy, parse_resume

RESUME_PARAGRAPHS = [
    "Morgan Reyes",
    "Austin, TX",
    "morgan.reyes@example.com",
    "Professional Summary",
    "Operations leader in healthcare logistics.",
    "Work Experience",
    "Director of Operations at MedShip (2016 - 2023)",
    "- Managed vendor contracts and procurement across 4 hospitals.",
    "- Presented quarterly results to the executive team.",
    "Education",
    "MBA, University of Texas",
    "B.A. Economics &amp; Statistics",
    "Skills",
    "Budgeting; Forecasting | Excel, SQL",
]


def make_docx(paragraphs: list[str]) -> bytes:
    body = "".join(
        f'<w:p><w:r><w:t xml:space="preserve">{text}</w:t></w:r></w:p>' for text in paragraphs
    )
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as package:
        package.writestr("word/document.xml", f"<w:document><w:body>{body}</w:body></w:document>")
    return buffer.getvalue()


@pytest.mark.integration
def test_docx_resume_end_to_end():
    """A DOCX resume yields a complete profile with no warnings."""
    extracted = extract_text(
        RawDocument(make_docx(RESUME_PARAGRAPHS), filename="morgan.docx"), use_layout_engine=False
    )
    assert extracted.kind is DocumentKind.DOCX
    assert extracted.warnings == ()

    result = parse_resume(extracted.text, reference_year=2024)
    profile = result.profile

    assert profile.name == "Morgan Reyes"
    assert profile.location == "Austin, TX"
    assert profile.current_role == "Director of Operations"
    assert profile.years_experience == "8"
    assert profile.education == "MBA, University of Texas | B.A. Economics & Statistics"
    assert profile.industries == "Healthcare, Education, Logistics"

    skills = {skill.name: skill.category for skill in result.skills}
    assert skills["Sql"] is SkillCategory.TECHNICAL
    assert skills["Forecasting"] is SkillCategory.ANALYTICAL
    assert "Negotiation" in skills
    assert "Leadership" in skills
    assert result.warnings == ()


@pytest.mark.integration
def test_docx_resume_section_only_policy():
    """Section-only policy keeps just the Skills list."""
    extracted = extract_text(
        RawDocument(make_docx(RESUME_PARAGRAPHS), filename="morgan.docx"), use_layout_engine=False
    )
    result = parse_resume(
        extracted.text, skill_policy=SkillPolicy.SECTION_ONLY, reference_year=2024
    )

    assert result.skill_names == ["Budgeting", "Forecasting", "Excel", "Sql"]


@pytest.mark.integration
def test_base64_doc_upload():
    """A base64 DOC upload comes back as noisy-but-usable text."""
    payload = base64.b64encode(b"\xd0\xcf\x11\xe0\x00Resume content for DOC format\x00\x00")
    result = extract_text_from_base64(
        payload.decode(), filename="legacy.doc", use_layout_engine=False
    )

    assert "Resume content for DOC format" in result.text
    assert "DOC extraction is best-effort; text may be noisy." in result.warnings


@pytest.mark.integration
def test_pdf_literal_text_reaches_parser():
    """Literal PDF text is joined into one line; the parser degrades with warnings."""
    pdf = (
        b"%PDF-1.4\nBT\n(Riley Chen) Tj\n[(Data) -120 (Analyst)] TJ\n"
        b"(SQL and Python reporting) Tj\nET\n%%EOF"
    )
    extracted = extract_text(RawDocument(pdf, filename="riley.pdf"), use_layout_engine=False)
    assert extracted.text == "Riley Chen Data Analyst SQL and Python reporting"

    result = parse_resume(extracted.text, reference_year=2024)
    assert result.sections == {}
    assert "Could not detect current role from resume." in result.warnings
    assert {"Sql", "Python"} <= set(result.skill_names)


@pytest.mark.integration
def test_empty_upload_gives_empty_profile():
    """Nothing to extract flows through as warnings on both stages."""
    extracted = extract_text(RawDocument(b"", filename="blank.pdf"), use_layout_engine=False)
    result = parse_resume(extracted.text)

    assert extracted.warnings == ("Document is empty.",)
    assert result.warnings == ("Resume text is empty.",)
    assert result.profile.to_dict() == {}
