"""Unit tests for resume records."""

import dataclasses

import pytest

from cipher.contexts.intake.resume_data_structure import (
    ResumeExtraction,
    ResumeProfile,
    SkillCategory,
    SkillEntry,
    SkillPolicy,
)


@pytest.mark.unit
class TestResumeProfile:
    def test_to_dict_camel_case_and_omits_none(self):
        profile = ResumeProfile(name="Alex Doe", current_role="PM", years_experience="5")
        assert profile.to_dict() == {
            "name": "Alex Doe",
            "currentRole": "PM",
            "yearsExperience": "5",
        }

    def test_empty_profile(self):
        assert ResumeProfile().to_dict() == {}
        assert ResumeProfile().resolved_fields() == []

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            ResumeProfile().name = "changed"


@pytest.mark.unit
class TestSkillEntry:
    @pytest.mark.parametrize(
        "name,slug",
        [
            ("Data Analysis", "data-analysis"),
            ("Go-To-Market / Strategy", "go-to-market-strategy"),
            ("C++", "c"),
            ("Node.js", "node-js"),
        ],
    )
    def test_slug(self, name, slug):
        assert SkillEntry(name, SkillCategory.TECHNICAL).slug == slug

    def test_to_dict(self):
        entry = SkillEntry("Team Leadership", SkillCategory.LEADERSHIP)
        assert entry.to_dict() == {
            "id": "team-leadership",
            "name": "Team Leadership",
            "category": "leadership",
        }


@pytest.mark.unit
class TestSkillPolicy:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("keywords", SkillPolicy.KEYWORDS),
            (" SECTION_ONLY ", SkillPolicy.SECTION_ONLY),
            (SkillPolicy.KEYWORDS, SkillPolicy.KEYWORDS),
        ],
    )
    def test_from_value(self, value, expected):
        assert SkillPolicy.from_value(value) is expected

    def test_unknown_value(self):
        with pytest.raises(ValueError, match="keywords, section_only"):
            SkillPolicy.from_value("blended")


@pytest.mark.unit
def test_extraction_to_dict():
    extraction = ResumeExtraction(
        profile=ResumeProfile(name="Alex Doe"),
        skills=(SkillEntry("Sql", SkillCategory.TECHNICAL),),
        warnings=("Could not detect current role from resume.",),
        sections={"skills": ["SQL"]},
    )

    assert extraction.to_dict() == {
        "profile": {"name": "Alex Doe"},
        "skills": [{"id": "sql", "name": "Sql", "category": "technical"}],
        "warnings": ["Could not detect current role from resume."],
        "sections": {"skills": ["SQL"]},
    }
    assert extraction.skill_names == ["Sql"]
