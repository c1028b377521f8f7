"""
Generic logger setup utilities.

Loguru configuration shared by the command-line scripts. Records go to a
per-run log file and to stderr, so stdout stays free for the data a script
prints (JSON, extracted text). Context-specific wrappers are defined in
contexts/{context}/logger.py.
"""

import os
import sys
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

from cipher.utils.timestamp import now

DEFAULT_LOGS_PATH = "outs/logs"

# Console colors for the levels that need to stand out
LEVEL_COLORS = {
    "WARNING": "<white>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def setup_logger(context_name: str, log_dir: Path, extra_provenance: dict = None) -> Path:
    """
    Configure loguru for a context and log the run's provenance.

    Args:
        context_name: Context identifier (e.g., "extract", "intake", "network")
        log_dir: Directory for this logging session
        extra_provenance: Additional key-value pairs for provenance header

    Returns:
        Path to log file

    Example:
        log_file = setup_logger(
            context_name="extract",
            log_dir=Path("outs/logs/extract_20251114_123456"),
            extra_provenance={"Input": "resume.pdf"}
        )
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    logger.add(
        log_file, format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}", level="DEBUG"
    )

    # stderr, never stdout
    logger.add(
        sys.stderr,
        format="{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>",
        level="INFO",
        colorize=True,
    )

    log_provenance(extra_provenance)

    return log_file


def session_log_dir(prefix: str) -> Path:
    """
    Directory for one command-line run's logs.

    Each run gets its own directory under LOGS_PATH (environment or .env,
    default outs/logs) named after the command and the start time, e.g.
    outs/logs/parse_resume_20251114_123456/.

    Args:
        prefix: Run identifier used as the directory name prefix

    Returns:
        Path to the (not yet created) log directory
    """
    load_dotenv()
    logs_path = Path(os.getenv("LOGS_PATH", DEFAULT_LOGS_PATH))
    return logs_path / f"{prefix}_{now()}"


def log_provenance(extra_context: dict = None) -> None:
    """Log script, command line, working directory, Python version, plus extra_context."""
    logger.info("=" * 80)
    logger.info(f"Script: {sys.argv[0]}")
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]}")

    if extra_context:
        for key, value in extra_context.items():
            logger.info(f"{key}: {value}")

    logger.info("=" * 80)
