"""
Logging configuration for wolf_terminal.

Textual owns the terminal while the app runs, so the console sink is meant
for headless runs and the optional file sink for everything else.
"""

import os
import sys
from typing import Optional

from loguru import logger


LOG_LEVEL_ENV_VAR = "WOLF_TERMINAL_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"


def resolve_log_level(level: Optional[str] = None) -> str:
    """Pick the log level: explicit argument, then environment, then default."""
    if level:
        return level.upper()
    return os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()


def configure_logging(level: Optional[str] = None, log_file: Optional[str] = None, console: bool = True) -> str:
    """
    Configure loguru sinks for the application.

    This should be called once at startup.

    Args:
        level: Minimum level to log
        log_file: Optional path of a rotating log file
        console: Whether to also log to stderr

    Returns:
        The level that was applied
    """
    resolved = resolve_log_level(level)
    logger.remove()  # Remove default handler

    if console:
        logger.add(sink=sys.stderr, level=resolved, colorize=True)

    if log_file:
        logger.add(
            sink=log_file,
            level=resolved,
            rotation="10 MB",
            retention="7 days",
        )

    logger.debug(f"Logging configured: level={resolved}, file={log_file or 'none'}")
    return resolved
