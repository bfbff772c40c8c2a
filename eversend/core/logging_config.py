"""
Centralized logging configuration.

Library modules only ask for named loggers; applications (and the CLI) call
setup_logging once to decide where records go.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Quiet by default when used as a library
logging.getLogger('eversend').addHandler(logging.NullHandler())


def _handlers(log_file: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))
    return handlers


def setup_logging(
    level: str = 'INFO',
    format_string: Optional[str] = None,
    log_file: Optional[str] = None
) -> None:
    """
    Route client and CLI log records to stderr, plus a file when given.

    Args:
        level: Level name; unknown names mean INFO
        format_string: Record format (default: DEFAULT_FORMAT)
        log_file: Also append records to this path (LOG_FILE)
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format=format_string or DEFAULT_FORMAT,
        handlers=_handlers(log_file),
        force=True
    )

    # httpx logs every request at INFO
    logging.getLogger('httpx').setLevel(max(log_level, logging.WARNING))


def get_logger(name: str) -> logging.Logger:
    """Named logger, e.g. get_logger(__name__)."""
    return logging.getLogger(name)


def configure_from_settings(settings) -> None:
    """Configure logging from a Settings object (log_level, log_format, log_file)."""
    setup_logging(
        level=settings.log_level,
        format_string=settings.log_format,
        log_file=settings.log_file,
    )
