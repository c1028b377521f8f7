"""
Skill extraction and categorization for the Intake context.

Skills come from up to three sources, controlled by SkillPolicy:
1. Tokens listed under an explicit Skills heading (always used)
2. Hard/soft skill keywords found anywhere in the resume (KEYWORDS only)
3. Soft skills implied by experience wording, e.g. "Led" → leadership (KEYWORDS only)

Names are de-duplicated case-insensitively (first occurrence wins),
title-cased for display, and scored against the category keyword tables.
"""

from cipher.contexts.intake.extraction_patterns import (
    SkillListPatterns,
    whole_word_pattern,
    word_start_pattern,
)
from cipher.contexts.intake.keyword_tables import (
    CATEGORY_KEYWORDS,
    HARD_SKILL_KEYWORDS,
    INFERRED_SOFT_SKILLS,
    SKILL_KEYWORDS,
    SOFT_SKILL_KEYWORDS,
)
from cipher.contexts.intake.logger import _log_debug
from cipher.contexts.intake.resume_data_structure import SkillCategory, SkillEntry, SkillPolicy
from cipher.utils.text_processing import normalize_line


def parse_skills_from_lines(lines: list[str]) -> list[str]:
    """
    Tokenize Skills-section lines into individual skill names.

    Args:
        lines: Raw lines under the Skills heading

    Returns:
        Trimmed tokens in order; single-character tokens are dropped

    Example:
        >>> parse_skills_from_lines(["- SQL, Python; Excel / R"])
        ['SQL', 'Python', 'Excel']
    """
    patterns = SkillListPatterns()
    tokens = []

    for line in lines:
        cleaned = patterns.LEADING_BULLET.sub("", normalize_line(line))
        for token in patterns.SEPARATORS.split(cleaned):
            token = token.strip()
            if len(token) >= patterns.MIN_TOKEN_LENGTH:
                tokens.append(token)

    return tokens


def to_title_case(value: str) -> str:
    """Upper-case the first character of each space-separated word, leaving the rest as-is."""
    return " ".join(word[:1].upper() + word[1:] for word in value.split(" "))


def categorize_skill(name: str) -> SkillCategory:
    """
    Score a skill against each category's keywords and pick the best.

    The score is the number of category keywords that occur as substrings
    of the lower-cased name. No match, or a tie for the top score, gives
    DOMAIN_SPECIFIC.

    Args:
        name: Skill name in any case

    Returns:
        Winning SkillCategory
    """
    lower = name.lower()
    scores = {
        category: sum(1 for keyword in keywords if keyword in lower)
        for category, keywords in CATEGORY_KEYWORDS.items()
    }

    best_score = max(scores.values())
    if best_score == 0:
        return SkillCategory.DOMAIN_SPECIFIC

    leaders = [category for category, score in scores.items() if score == best_score]
    if len(leaders) > 1:
        return SkillCategory.DOMAIN_SPECIFIC

    return leaders[0]


def _unique_casefold(names: list[str]) -> list[str]:
    """Drop case-insensitive repeats, keeping the first spelling seen."""
    seen = set()
    unique = []
    for name in names:
        key = name.lower()
        if key in seen:
            continue
        seen.add(key)
        unique.append(name)
    return unique


def build_skill_entries(names: list[str]) -> tuple[SkillEntry, ...]:
    """
    Normalize raw skill names into SkillEntry records.

    Args:
        names: Raw names, possibly with case-insensitive duplicates

    Returns:
        One entry per distinct name (first occurrence wins), title-cased and categorized
    """
    return tuple(
        SkillEntry(name=to_title_case(name), category=categorize_skill(name))
        for name in _unique_casefold(names)
    )


def match_skill_keywords(text: str) -> list[str]:
    """
    Find hard and soft skill keywords that appear as whole words in the text.

    Args:
        text: Full resume text

    Returns:
        Matched keywords in table order (hard skills first)
    """
    return [keyword for keyword in SKILL_KEYWORDS if whole_word_pattern(keyword).search(text)]


def infer_skills_from_experience(lines: list[str]) -> list[str]:
    """
    Infer soft skills from how the experience section is worded.

    Args:
        lines: Experience section lines

    Returns:
        Implied skills in rule order, without repeats

    Example:
        >>> infer_skills_from_experience(["Led a team of 6 analysts"])
        ['leadership', 'team leadership', 'coaching']
    """
    joined = " ".join(lines)
    inferred = []

    for stems, skills in INFERRED_SOFT_SKILLS:
        if any(word_start_pattern(stem).search(joined) for stem in stems):
            inferred.extend(skills)

    return _unique_casefold(inferred)


def _mentions_keyword(names: list[str], keywords: tuple[str, ...]) -> bool:
    patterns = [whole_word_pattern(keyword) for keyword in keywords]
    return any(pattern.search(name) for pattern in patterns for name in names)


def has_soft_skill(names: list[str]) -> bool:
    """True if any name contains a soft-skill keyword as a whole word."""
    return _mentions_keyword(names, SOFT_SKILL_KEYWORDS)


def has_hard_skill(names: list[str]) -> bool:
    """
    True if any name contains a hard-skill keyword as a whole word.

    "ai" counts in "ai roadmap" but not in "email" or "training".
    """
    return _mentions_keyword(names, HARD_SKILL_KEYWORDS)


def collect_skill_names(
    sections: dict[str, list[str]], text: str, policy: SkillPolicy = SkillPolicy.KEYWORDS
) -> list[str]:
    """
    Gather raw (lower-cased, de-duplicated) skill names under the given policy.

    Args:
        sections: Section map from segmentation
        text: Full resume text
        policy: Which sources may contribute skills

    Returns:
        Skill names in source order: section tokens, keyword matches, inferences
    """
    names = [token.lower() for token in parse_skills_from_lines(sections.get("skills", []))]
    _log_debug(f"Skills section tokens: {len(names)}")

    if policy is SkillPolicy.KEYWORDS:
        keywords = match_skill_keywords(text)
        inferred = infer_skills_from_experience(sections.get("experience", []))
        _log_debug(f"Keyword matches: {len(keywords)}, inferred: {len(inferred)}")
        names = names + keywords + inferred

    return _unique_casefold(names)


def classify_skills(
    sections: dict[str, list[str]], text: str, policy: SkillPolicy = SkillPolicy.KEYWORDS
) -> tuple[SkillEntry, ...]:
    """
    Extract, normalize, and categorize skills from a segmented resume.

    Args:
        sections: Section map from segmentation
        text: Full resume text
        policy: SkillPolicy.KEYWORDS or SkillPolicy.SECTION_ONLY

    Returns:
        Tuple of SkillEntry records with no case-insensitive duplicates
    """
    return build_skill_entries(collect_skill_names(sections, text, policy))
