"""
Extraction context logger.

Provides logging interface for extraction context with automatic [extract] prefix.
All extraction modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from cipher.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[extract]"


def setup_extraction_logger(log_dir: Path, source: str = "") -> Path:
    """
    Setup logger for extraction context.

    Args:
        log_dir: Directory for this extraction session
        source: Input file name for provenance

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="extract",
        log_dir=log_dir,
        extra_provenance={"Source": source} if source else None,
    )


# Wrapper functions with automatic [extract] prefix


def _log_info(message: str) -> None:
    """Log info message with [extract] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [extract] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [extract] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level extraction-specific logging helpers


def log_extraction_result(kind: str, filename: str, text: str, warnings) -> None:
    """
    Log outcome of a single document extraction.

    Args:
        kind: Document kind value (e.g., "pdf")
        filename: Declared filename (may be empty)
        text: Extracted text
        warnings: Warning strings produced during extraction
    """
    label = filename or "<unnamed>"
    if text:
        _log_info(f"{label}: extracted {len(text)} chars as {kind}")
    else:
        _log_warning(f"{label}: no text recovered ({kind})")

    for warning in warnings:
        _log_debug(f"  Warning: {warning}")
