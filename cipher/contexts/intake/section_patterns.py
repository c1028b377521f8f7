"""
Heading detection for resume section segmentation.

A line is a heading when, after normalization (internal whitespace collapsed,
trailing colons stripped, lower-cased), it exactly equals one of the labels
below. Partial matches never count: "Experience with Python" is body text.
"""

import re
from typing import Optional

from cipher.utils.text_processing import normalize_line

# =============================================================================
# SECTION LABELS
# =============================================================================

# Section key → heading labels, checked in this order
HEADING_MAP = (
    ("summary", ("summary", "professional summary", "profile")),
    ("experience", ("experience", "work experience", "employment", "work history")),
    ("education", ("education", "academic")),
    ("skills", ("skills", "core competencies", "expertise")),
    ("certifications", ("certifications", "licenses", "certifications and licenses")),
    ("projects", ("projects", "portfolio")),
    ("volunteer", ("volunteer", "community")),
)

_TRAILING_COLONS = re.compile(r":+$")


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================


def normalize_heading(line: str) -> str:
    """
    Normalize a line for heading comparison.

    Args:
        line: Raw resume line

    Returns:
        Lower-cased line with whitespace collapsed and trailing colons removed
        ("Experience :" and "Experience:" both give "experience")
    """
    return _TRAILING_COLONS.sub("", normalize_line(line)).strip().lower()


def detect_heading(line: str) -> Optional[str]:
    """
    Match a line against the section label table.

    Args:
        line: Raw resume line

    Returns:
        Section key (e.g. "experience"), or None if the line isn't a heading
    """
    cleaned = normalize_heading(line)
    if not cleaned:
        return None

    for key, labels in HEADING_MAP:
        if cleaned in labels:
            return key

    return None
