"""Logging setup for the schemacheck CLI.

Library code only ever calls ``logging.getLogger(__name__)``; handlers are
attached here, once, by the command-line entry point.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Third-party loggers that are chatty below WARNING
QUIET_LOGGERS = ('jinja2',)


def resolve_level(level: str) -> int:
    """Map a level name to its numeric value, INFO when unknown."""
    numeric_level = logging.getLevelName(level.upper())
    return numeric_level if isinstance(numeric_level, int) else logging.INFO


def _build_handlers(log_file: Optional[str]) -> List[logging.Handler]:
    # stderr keeps stdout free for JSON and rendered reports
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding='utf-8'))

    return handlers


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    format_string: Optional[str] = None
) -> None:
    """Configure the root logger.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Also append log records to this file
        format_string: Record format; defaults to DEFAULT_FORMAT
    """
    logging.basicConfig(
        level=resolve_level(level),
        format=format_string or DEFAULT_FORMAT,
        handlers=_build_handlers(log_file),
        force=True
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
