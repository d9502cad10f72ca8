"""
Extraction context logger.

Provides logging interface for extraction context with automatic [extract] prefix.
All extraction modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from jdfill.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[extract]"


def setup_extraction_logger(
    log_dir: Path, document_name: str = "stdin", console_level: str = "INFO"
) -> Path:
    """
    Setup logger for extraction context.

    Args:
        log_dir: Directory for this extraction session
        document_name: Name of the analyzed document, recorded in provenance
        console_level: Minimum level echoed to stdout

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="extract",
        log_dir=log_dir,
        extra_provenance={"Document": document_name},
        console_level=console_level,
    )


def _log_info(message: str) -> None:
    """Log info message with [extract] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [extract] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [extract] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_field_result(field_name: str, value) -> None:
    """Log the outcome of one sub-extractor."""
    if value is None or value == ():
        _log_debug(f"{field_name}: no match")
    else:
        _log_debug(f"{field_name}: {value!r}")
