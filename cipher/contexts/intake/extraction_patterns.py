"""
Regex patterns for resume field heuristics.

Pattern classes follow the frozen-dataclass convention:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Helper functions that use these patterns
"""

import re
from dataclasses import dataclass

# =============================================================================
# HEADER FIELD PATTERNS
# =============================================================================


@dataclass(frozen=True)
class HeaderPatterns:
    """
    Patterns for the contact block at the top of a resume.

    Examples matched by LOCATION:
    - "New York, NY"
    - "St. John's, NL"
    - "Winston-Salem, NC 27101" (postal code ignored)
    """

    # City, two-letter region code
    LOCATION: re.Pattern = re.compile(r"[A-Za-z .'-]+,\s?[A-Z]{2}\b")

    # Phone numbers, street numbers, zip codes
    DIGIT_RUN: re.Pattern = re.compile(r"\d{3,}")

    MAX_NAME_TOKENS: int = 5


# =============================================================================
# EXPERIENCE PATTERNS
# =============================================================================


@dataclass(frozen=True)
class ExperiencePatterns:
    """
    Patterns for role lines and date ranges in the experience section.

    A role line looks like one of:
    - "Product Manager | Acme Corp (2019-2024)"
    - "Program Manager - Growth Team (2017-2023)"
    - "Senior Analyst at Initech, 2015 - Present"
    """

    # Four-digit years 1900-2099
    YEAR: re.Pattern = re.compile(r"\b(?:19|20)\d{2}\b")

    # Parenthetical holding a year: "(2019-2024)", "(Jan 2020 - Present)"
    DATED_PARENTHETICAL: re.Pattern = re.compile(r"\(.*?\d{4}.*?\)")

    # Bullet markers that disqualify a line from being the role line
    BULLET_PREFIX: re.Pattern = re.compile(r"^[-*•]")

    # Title/employer separators, tried in priority order
    ROLE_SPLITTERS: tuple = ("|", " - ", " at ", ",", "@")

    EARLIEST_YEAR: int = 1900


# =============================================================================
# SKILL LIST PATTERNS
# =============================================================================


@dataclass(frozen=True)
class SkillListPatterns:
    """Patterns for tokenizing a Skills section."""

    # Leading bullet plus following whitespace: "- SQL", "* SQL", "• SQL"
    LEADING_BULLET: re.Pattern = re.compile(r"^[-*•]\s*")

    # Token separators: "SQL, Python; Excel / Tableau | dbt"
    SEPARATORS: re.Pattern = re.compile(r"[,|;/]")

    MIN_TOKEN_LENGTH: int = 2


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================


def whole_word_pattern(keyword: str) -> re.Pattern:
    """
    Case-insensitive pattern matching keyword as a whole word or phrase.

    "ai" matches "AI roadmap" but not "maintained".
    """
    return re.compile(rf"\b{re.escape(keyword)}\b", re.IGNORECASE)


def word_start_pattern(stem: str) -> re.Pattern:
    """
    Case-insensitive pattern matching stem at the start of a word.

    "lead" matches "leading" and "Leadership" but not "pleaded".
    """
    return re.compile(rf"\b{re.escape(stem)}", re.IGNORECASE)
