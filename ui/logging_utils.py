"""Shared logging setup for the chart UI and CLI."""

import logging
from typing import Optional

from ui.constants import LOG_LEVEL

LOG_FORMAT = "[%(asctime)s] %(levelname)s: %(message)s"


def setup_logging(
    name: str = None,
    level: Optional[str] = None,
    format_string: Optional[str] = None,
    filename: Optional[str] = None,
) -> logging.Logger:
    """Set up standardized logging configuration.

    Parameters
    ----------
    name:
        Logger name, defaults to the root logger
    level:
        Log level, defaults to the LOG_LEVEL env var
    format_string:
        Log format string, defaults to standard format
    filename:
        Write to this file instead of stderr; used while the TUI owns the terminal

    Returns
    -------
    logging.Logger
        Configured logger instance
    """
    logging.basicConfig(
        level=level or LOG_LEVEL,
        format=format_string or LOG_FORMAT,
        filename=filename,
    )

    logger = logging.getLogger(name)

    # Suppress noisy third-party loggers
    logging.getLogger("aiohttp").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    return logger
