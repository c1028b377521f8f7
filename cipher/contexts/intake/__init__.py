"""
Intake Context

Responsibilities:
- Segments resume text into sections by heading
- Extracts profile fields (name, location, role, years, education, industries)
- Extracts, normalizes, and categorizes skills

Owns: Resume parsing heuristics and keyword tables
Never: Reads binary documents (that belongs to Extraction) or loads settings files
"""

from cipher.contexts.intake.resume_data_structure import (
    ResumeExtraction,
    ResumeProfile,
    SkillCategory,
    SkillEntry,
    SkillPolicy,
)
from cipher.contexts.intake.resume_parser import parse_resume, segment_sections
from cipher.contexts.intake.section_patterns import detect_heading
from cipher.contexts.intake.skill_classifier import (
    build_skill_entries,
    categorize_skill,
    classify_skills,
    parse_skills_from_lines,
)

__all__ = [
    "ResumeExtraction",
    "ResumeProfile",
    "SkillCategory",
    "SkillEntry",
    "SkillPolicy",
    "build_skill_entries",
    "categorize_skill",
    "classify_skills",
    "detect_heading",
    "parse_resume",
    "parse_skills_from_lines",
    "segment_sections",
]
