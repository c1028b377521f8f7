"""Timestamp and calendar helpers."""

from datetime import datetime


def now() -> str:
    """Compact local timestamp for directory and file names (e.g., 20251114_123456)."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def current_year() -> int:
    """Current calendar year."""
    return datetime.now().year


def resolve_reference_year(reference_year: int | None = None) -> int:
    """
    Pick the year that date arithmetic is measured against.

    Args:
        reference_year: Explicit year to use, or None for the current calendar year

    Returns:
        The explicit year when given, otherwise current_year()
    """
    return reference_year if reference_year is not None else current_year()
