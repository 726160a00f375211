"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

import os
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

from quill.utils.logger import setup_logger as _setup_logger

load_dotenv()

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, template_id: str = None) -> Path:
    """
    Setup logger for rendering context.

    Args:
        log_dir: Directory for this rendering session
        template_id: Template used for the session, recorded in the provenance header

    Returns:
        Path to log file

    Example:
        from quill.contexts.rendering.logger import setup_rendering_logger

        log_file = setup_rendering_logger(log_dir, template_id="classic")
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={
            "Template": template_id or os.getenv("QUILL_DEFAULT_TEMPLATE", "standard"),
        },
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_render_result(template_id: str, rendered, fallback: bool = False) -> None:
    """
    Log the outcome of a render call.

    Args:
        template_id: Template used
        rendered: RenderedDocument from TemplateRenderer.render()
        fallback: Whether the line-by-line fallback strategy was used
    """
    strategy = "fallback" if fallback else "structured"
    _log_debug(
        f"{template_id}: {rendered.page_count} page(s), "
        f"{len(rendered.commands)} draw commands ({strategy} layout)"
    )
    if rendered.page_count > 1:
        _log_info(f"{template_id}: output spans {rendered.page_count} pages")
