"""
Resume data structures for the Intake context.

Provides the records parse_resume() returns: ResumeProfile (header and
summary fields), SkillEntry (a normalized, categorized skill), and
ResumeExtraction (profile + skills + warnings + section map).

All records are frozen. Unresolved profile fields are None rather than
a placeholder, and are left out of to_dict() output.
"""

import re
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Optional


class SkillCategory(Enum):
    """Skill buckets used by the classifier."""

    TECHNICAL = "technical"
    SOFT = "soft/interpersonal"
    LEADERSHIP = "leadership"
    ANALYTICAL = "analytical"
    CREATIVE = "creative"
    DOMAIN_SPECIFIC = "domain-specific"


class SkillPolicy(Enum):
    """
    Where skills may come from.

    KEYWORDS: Skills-section tokens, then whole-document keyword matches,
              then skills inferred from experience wording
    SECTION_ONLY: Skills-section tokens only; no Skills heading means no skills
    """

    KEYWORDS = "keywords"
    SECTION_ONLY = "section_only"

    @classmethod
    def from_value(cls, value) -> "SkillPolicy":
        """
        Resolve a policy from an enum member or its config string.

        Raises:
            ValueError: If the value names no policy
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(policy.value for policy in cls)
            raise ValueError(f"Unknown skill policy '{value}'. Expected one of: {valid}")


# Profile field → camelCase key for JSON consumers
PROFILE_KEYS = {
    "name": "name",
    "current_role": "currentRole",
    "years_experience": "yearsExperience",
    "education": "education",
    "certifications": "certifications",
    "location": "location",
    "industries": "industries",
}

_SLUG_SEPARATORS = re.compile(r"[^a-z0-9]+")


@dataclass(frozen=True)
class ResumeProfile:
    """Profile fields recovered from a resume. None means not detected."""

    name: Optional[str] = None
    current_role: Optional[str] = None
    years_experience: Optional[str] = None
    education: Optional[str] = None
    certifications: Optional[str] = None
    location: Optional[str] = None
    industries: Optional[str] = None

    def resolved_fields(self) -> list[str]:
        """Names of the fields that were detected."""
        return [f.name for f in fields(self) if getattr(self, f.name) is not None]

    def to_dict(self) -> dict[str, str]:
        """Serialize detected fields with camelCase keys; undetected fields are omitted."""
        return {PROFILE_KEYS[name]: getattr(self, name) for name in self.resolved_fields()}


@dataclass(frozen=True)
class SkillEntry:
    """A title-cased skill name and its category."""

    name: str
    category: SkillCategory

    @property
    def slug(self) -> str:
        """
        Stable kebab-case identifier derived from the name.

        Example:
            >>> SkillEntry("Go-To-Market / Strategy", SkillCategory.LEADERSHIP).slug
            'go-to-market-strategy'
        """
        return _SLUG_SEPARATORS.sub("-", self.name.lower()).strip("-")

    def to_dict(self) -> dict[str, str]:
        return {"id": self.slug, "name": self.name, "category": self.category.value}


@dataclass(frozen=True)
class ResumeExtraction:
    """
    Everything parse_resume() recovers from one resume.

    sections maps each detected section key to its lines in document order.
    A key is present once its heading was seen, even with no lines under it.
    """

    profile: ResumeProfile = field(default_factory=ResumeProfile)
    skills: tuple[SkillEntry, ...] = ()
    warnings: tuple[str, ...] = ()
    sections: dict[str, list[str]] = field(default_factory=dict)

    @property
    def skill_names(self) -> list[str]:
        return [skill.name for skill in self.skills]

    def to_dict(self) -> dict:
        """JSON-ready representation (camelCase profile keys, category values as strings)."""
        return {
            "profile": self.profile.to_dict(),
            "skills": [skill.to_dict() for skill in self.skills],
            "warnings": list(self.warnings),
            "sections": {key: list(lines) for key, lines in self.sections.items()},
        }
