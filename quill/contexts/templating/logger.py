"""
Templating context logger.

Provides logging interface for the templating context with automatic [template] prefix.
All templating modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from quill.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[template]"


def setup_templating_logger(log_dir: Path) -> Path:
    """
    Setup logger for templating context.

    Args:
        log_dir: Directory for this session

    Returns:
        Path to log file
    """
    return _setup_logger(context_name="template", log_dir=log_dir)


# Wrapper functions with automatic [template] prefix


def _log_warning(message: str) -> None:
    """Log warning message with [template] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level templating-specific logging helpers


def log_parse_summary(document) -> None:
    """Log the shape of a parsed ResumeDocument."""
    item_count = sum(len(section.items) for section in document.sections)
    _log_debug(
        f"Parsed {len(document.sections)} sections, {item_count} items "
        f"(header lines: {len(document.header.lines)})"
    )
    if document.sections:
        _log_debug(f"  Section headers: {', '.join(document.section_titles)}")


def log_fallback_triggered(signal, first_lines: list) -> None:
    """Log that the structured parse was abandoned for the fallback strategy."""
    _log_warning(f"Using fallback layout: {signal.reason} ({signal.line_count} lines)")
    for line in first_lines[:5]:
        _log_debug(f"  | {line}")
