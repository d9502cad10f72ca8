"""
Form context logger.

Provides logging interface for form context with automatic [form] prefix.
"""

from loguru import logger

CONTEXT_PREFIX = "[form]"


def _log_info(message: str) -> None:
    """Log info message with [form] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [form] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [form] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [form] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [form] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_extraction_merge(updated: list[str], skipped: list[str]) -> None:
    """Log which fields an extraction run filled and which it left alone."""
    _log_info(f"Applied extraction to {len(updated)} field(s): {', '.join(updated) or '-'}")
    if skipped:
        _log_debug(f"Kept user-confirmed field(s): {', '.join(skipped)}")


def log_validation_failure(violations) -> None:
    """Log every violation from a failed submission check."""
    _log_warning(f"Submission blocked by {len(violations)} violation(s)")
    for violation in violations:
        _log_warning(f"  {violation.field}: {violation.message}")
