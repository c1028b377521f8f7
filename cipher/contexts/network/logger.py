"""
Network context logger.

Provides logging interface for network context with automatic [network] prefix.
All network modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from cipher.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[network]"


def setup_network_logger(log_dir: Path, source: str = "") -> Path:
    """
    Setup logger for network context.

    Args:
        log_dir: Directory for this parsing session
        source: Export file name for provenance

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="network",
        log_dir=log_dir,
        extra_provenance={"Export": source} if source else None,
    )


def _log_info(message: str) -> None:
    """Log info message with [network] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [network] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [network] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
