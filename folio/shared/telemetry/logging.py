"""Logging configuration for folio and its scripts."""

import logging
import sys

from folio.core.config import get_settings


def setup_logging() -> None:
    """Configure process-wide logging.

    Level is DEBUG when settings.debug is True, otherwise INFO.
    Output goes to stdout. httpx request lines are kept at WARNING so API keys
    in query strings do not reach the logs.
    """
    settings = get_settings()
    log_level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name.

    Args:
        name: Usually __name__ of the calling module.

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)
