"""
Intake context logger.

Provides logging interface for intake context with automatic [intake] prefix.
All intake modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from cipher.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[intake]"


def setup_intake_logger(log_dir: Path, source: str = "") -> Path:
    """
    Setup logger for intake context.

    Args:
        log_dir: Directory for this parsing session
        source: Resume file name for provenance

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="intake",
        log_dir=log_dir,
        extra_provenance={"Resume": source} if source else None,
    )


# Wrapper functions with automatic [intake] prefix


def _log_info(message: str) -> None:
    """Log info message with [intake] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [intake] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [intake] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level intake-specific logging helpers


def log_sections_found(sections: dict[str, list[str]]) -> None:
    """
    Log which resume sections were detected and how many lines each holds.

    Args:
        sections: Section key → lines
    """
    if not sections:
        _log_debug("No section headings detected")
        return

    summary = ", ".join(f"{key} ({len(lines)})" for key, lines in sections.items())
    _log_debug(f"Sections: {summary}")


def log_parse_summary(field_count: int, skill_count: int, warnings) -> None:
    """
    Log outcome of a single resume parse.

    Args:
        field_count: Number of profile fields resolved
        skill_count: Number of skills extracted
        warnings: Warning strings produced during parsing
    """
    _log_info(f"Resolved {field_count} profile fields, {skill_count} skills")
    for warning in warnings:
        _log_debug(f"  Warning: {warning}")
