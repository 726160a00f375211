"""
Logger setup shared by the CLI entry points.

Library modules only log through loguru's global logger (via the per-context
wrappers in contexts/{context}/logger.py) and never add sinks themselves.
setup_logger() is called once per CLI session to route those messages to a
session log file and the console.
"""

import os
import sys
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

import quill

load_dotenv()

# Console verbosity; the session log file always records DEBUG
CONSOLE_LOG_LEVEL = os.getenv("QUILL_CONSOLE_LOG_LEVEL", "INFO").upper()

LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"
)


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: dict = None,
    level_colors: dict = None,
) -> Path:
    """
    Route loguru output to a session log file and the console.

    Replaces any existing sinks, then writes a provenance header (script,
    command, working directory, Python and QUILL versions, extras).

    Args:
        context_name: Context identifier, used as the log file name
                      ("render", "template", "intake")
        log_dir: Directory for this logging session (created if missing)
        extra_provenance: Additional key-value pairs for the provenance header
        level_colors: Console color overrides (e.g., {"INFO": "<cyan>"})

    Returns:
        Path to log file

    Example:
        log_file = setup_logger(
            context_name="render",
            log_dir=Path("outs/logs/render_20251114_123456"),
            extra_provenance={"Template": "classic"},
        )
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()

    for level_name, color in {**LEVEL_COLORS, **(level_colors or {})}.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level=CONSOLE_LOG_LEVEL, colorize=True)

    log_provenance(extra_provenance)
    return log_file


def log_provenance(extra_context: dict = None) -> None:
    """
    Log a provenance header describing how the current process was started.

    Args:
        extra_context: Additional key-value pairs to log
    """
    context = {
        "Script": sys.argv[0],
        "Command": " ".join(sys.argv),
        "Working directory": Path.cwd(),
        "Python": sys.version.split()[0],
        "QUILL": quill.__version__,
        **(extra_context or {}),
    }

    logger.info("=" * 80)
    for key, value in context.items():
        logger.info(f"{key}: {value}")
    logger.info("=" * 80)
