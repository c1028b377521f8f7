"""
Resume segmentation and field heuristics for the Intake context.

Splits resume text into lines, buckets lines under the most recent section
heading, then reads profile fields with line-oriented heuristics:

- name: first plausible line in the header block
- location: "City, ST" in the header block
- current role: first non-bullet experience line, minus dates and employer
- years of experience: reference year minus the earliest year in experience
- education / certifications: leading lines of those sections
- industries: industry keywords anywhere in the text

Everything is best effort. Fields that can't be found are left as None and
reported through warnings rather than errors.
"""

import re
from typing import Optional, Union

from cipher.contexts.intake.extraction_patterns import (
    ExperiencePatterns,
    HeaderPatterns,
    word_start_pattern,
)
from cipher.contexts.intake.keyword_tables import INDUSTRY_KEYWORDS
from cipher.contexts.intake.logger import _log_debug, log_parse_summary, log_sections_found
from cipher.contexts.intake.resume_data_structure import (
    ResumeExtraction,
    ResumeProfile,
    SkillPolicy,
)
from cipher.contexts.intake.section_patterns import detect_heading
from cipher.contexts.intake.skill_classifier import (
    build_skill_entries,
    collect_skill_names,
    has_hard_skill,
    has_soft_skill,
)
from cipher.utils.text_processing import normalize_line, normalize_unicode
from cipher.utils.timestamp import resolve_reference_year

# Defaults mirrored in config/defaults.yaml (resume.*)
HEADER_SCAN_LINES = 6
EDUCATION_LINES = 2
CERTIFICATION_LINES = 3
SHORT_TEXT_THRESHOLD = 80

# Warnings surfaced to callers, in reporting order
EMPTY_TEXT_WARNING = "Resume text is empty."
NO_ROLE_WARNING = "Could not detect current role from resume."
NO_EDUCATION_WARNING = "Could not detect education section from resume."
NO_SKILLS_WARNING = "No skills detected. Ensure your resume lists skills."
NO_SOFT_SKILLS_WARNING = "No soft skills detected. Add leadership or communication skills."
NO_HARD_SKILLS_WARNING = "No technical skills detected. Add tools, platforms, or systems."
SHORT_TEXT_WARNING = "Resume text is short; extraction accuracy may be reduced."

_LINE_BREAK = re.compile(r"\r?\n")


# =============================================================================
# SEGMENTATION
# =============================================================================


def split_lines(text: str) -> list[str]:
    """Split on \\n or \\r\\n and trim each line (blank lines are kept)."""
    return [line.strip() for line in _LINE_BREAK.split(text.strip())]


def segment_sections(lines: list[str]) -> dict[str, list[str]]:
    """
    Bucket lines under the most recently seen section heading.

    Args:
        lines: Trimmed resume lines

    Returns:
        Section key → lines in document order. A heading creates its key even
        when nothing follows it; a repeated heading appends to the same key.
        Lines before the first heading are dropped.
    """
    sections: dict[str, list[str]] = {}
    current = None

    for line in lines:
        if not line:
            continue

        heading = detect_heading(line)
        if heading:
            current = heading
            sections.setdefault(current, [])
            continue

        if current:
            sections[current].append(line)

    return sections


# =============================================================================
# HEADER FIELDS
# =============================================================================


def extract_name(lines: list[str], scan_lines: int = HEADER_SCAN_LINES) -> Optional[str]:
    """
    Pick the candidate's name from the top of the resume.

    The first of the first scan_lines lines that is non-blank, isn't a
    section heading, has no "@", no run of 3+ digits, doesn't mention
    "resume", and has at most five words.
    """
    patterns = HeaderPatterns()

    for line in lines[:scan_lines]:
        candidate = normalize_line(line)
        if not candidate or detect_heading(candidate):
            continue
        if "@" in candidate or patterns.DIGIT_RUN.search(candidate):
            continue
        if "resume" in candidate.lower():
            continue
        if len(candidate.split(" ")) <= patterns.MAX_NAME_TOKENS:
            return candidate

    return None


def extract_location(lines: list[str], scan_lines: int = HEADER_SCAN_LINES) -> Optional[str]:
    """First "City, ST" match in the first scan_lines lines, trimmed."""
    for line in lines[:scan_lines]:
        match = HeaderPatterns.LOCATION.search(line)
        if match:
            return match.group(0).strip()

    return None


# =============================================================================
# EXPERIENCE FIELDS
# =============================================================================


def extract_role_from_line(line: str) -> str:
    """
    Reduce a role line to the job title.

    Removes parentheticals containing a year, then keeps the text before the
    first separator found (tried in order: "|", " - ", " at ", ",", "@").

    Example:
        >>> extract_role_from_line("Product Manager | Acme Corp (2019-2024)")
        'Product Manager'
    """
    patterns = ExperiencePatterns()
    cleaned = patterns.DATED_PARENTHETICAL.sub("", normalize_line(line)).strip()

    for splitter in patterns.ROLE_SPLITTERS:
        if splitter in cleaned:
            return cleaned.split(splitter, 1)[0].strip()

    return cleaned


def extract_current_role(experience_lines: list[str]) -> Optional[str]:
    """Title from the first non-bullet experience line, or None."""
    for line in experience_lines:
        if line and not ExperiencePatterns.BULLET_PREFIX.match(line):
            return extract_role_from_line(line) or None

    return None


def extract_years_experience(
    experience_lines: list[str], reference_year: Optional[int] = None
) -> Optional[str]:
    """
    Estimate years of experience from the years mentioned in the experience section.

    Only years after 1900 and not after the reference year count, so future
    graduation dates and typos don't skew the result.

    Args:
        experience_lines: Experience section lines
        reference_year: Year to measure against (defaults to the current year)

    Returns:
        reference_year - earliest year, as a string; None when no year is found
    """
    reference = resolve_reference_year(reference_year)
    earliest_allowed = ExperiencePatterns.EARLIEST_YEAR

    years = [
        int(token)
        for token in ExperiencePatterns.YEAR.findall(" ".join(experience_lines))
        if earliest_allowed < int(token) <= reference
    ]
    if not years:
        return None

    return str(reference - min(years))


def join_leading_lines(lines: list[str], count: int) -> Optional[str]:
    """First count lines joined with " | ", or None when there are none."""
    joined = " | ".join(lines[:count])
    return joined or None


# =============================================================================
# WHOLE-DOCUMENT FIELDS
# =============================================================================


def extract_industries(text: str) -> list[str]:
    """
    Industries whose keywords start a word somewhere in the text.

    Returns:
        Industry names in table order, each at most once
    """
    return [
        industry
        for industry, keywords in INDUSTRY_KEYWORDS
        if any(word_start_pattern(keyword).search(text) for keyword in keywords)
    ]


# =============================================================================
# ENTRY POINT
# =============================================================================


def parse_resume(
    text: str,
    *,
    skill_policy: Union[SkillPolicy, str] = SkillPolicy.KEYWORDS,
    reference_year: Optional[int] = None,
    header_scan_lines: int = HEADER_SCAN_LINES,
    education_lines: int = EDUCATION_LINES,
    certification_lines: int = CERTIFICATION_LINES,
    short_text_threshold: int = SHORT_TEXT_THRESHOLD,
) -> ResumeExtraction:
    """
    Segment resume text and extract profile fields and skills.

    Never raises on odd input; missing pieces come back as warnings.
    Reads no settings itself: entry points pass configured values in.

    Args:
        text: Plain resume text (e.g., from extract_text())
        skill_policy: SkillPolicy or its string value
        reference_year: Year used for years-of-experience (defaults to the current year)
        header_scan_lines: Lines at the top searched for name and location
        education_lines: Leading education lines kept
        certification_lines: Leading certification lines kept
        short_text_threshold: Texts shorter than this get a short-text warning

    Returns:
        ResumeExtraction with profile, skills, warnings, and section map

    Raises:
        ValueError: If skill_policy names no known policy
    """
    policy = SkillPolicy.from_value(skill_policy)

    trimmed = normalize_unicode(text or "").strip()
    if not trimmed:
        return ResumeExtraction(warnings=(EMPTY_TEXT_WARNING,))

    lines = split_lines(trimmed)
    sections = segment_sections(lines)
    log_sections_found(sections)

    experience = sections.get("experience", [])
    current_role = extract_current_role(experience)
    education = join_leading_lines(sections.get("education", []), education_lines)
    industries = extract_industries(trimmed)

    profile = ResumeProfile(
        name=extract_name(lines, header_scan_lines),
        current_role=current_role,
        years_experience=extract_years_experience(experience, reference_year),
        education=education,
        certifications=join_leading_lines(
            sections.get("certifications", []), certification_lines
        ),
        location=extract_location(lines, header_scan_lines),
        industries=", ".join(industries) or None,
    )

    skill_names = collect_skill_names(sections, trimmed, policy)
    skills = build_skill_entries(skill_names)
    _log_debug(f"Skill policy {policy.value}: {len(skills)} skills")

    warnings = []
    if not current_role:
        warnings.append(NO_ROLE_WARNING)
    if not education:
        warnings.append(NO_EDUCATION_WARNING)
    if not skills:
        warnings.append(NO_SKILLS_WARNING)
    if not has_soft_skill(skill_names):
        warnings.append(NO_SOFT_SKILLS_WARNING)
    if not has_hard_skill(skill_names):
        warnings.append(NO_HARD_SKILLS_WARNING)
    if len(trimmed) < short_text_threshold:
        warnings.append(SHORT_TEXT_WARNING)

    log_parse_summary(len(profile.resolved_fields()), len(skills), warnings)

    return ResumeExtraction(
        profile=profile,
        skills=skills,
        warnings=tuple(warnings),
        sections=sections,
    )
