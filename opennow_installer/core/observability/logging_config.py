"""
Logging configuration — diagnostics for the installer package.

Called once at startup by main.py.  Every module that does
``logger = logging.getLogger(__name__)`` sits under the
``opennow_installer`` logger configured here; the root logger and any
embedding application's handlers are left alone.

Diagnostics only: user-facing progress lines are rendered by the CLI
from orchestrator events, not through logging.

Levels are resolved in precedence order:
    --debug  >  --verbose  >  --quiet  >  OPENNOW_LOG_LEVEL  >  WARNING

Optional file output via OPENNOW_LOG_FILE / OPENNOW_LOG_FILE_LEVEL.
"""

from __future__ import annotations

import logging
import os
import sys

PACKAGE_LOGGER = "opennow_installer"

LOG_LEVEL_ENV = "OPENNOW_LOG_LEVEL"
LOG_FILE_ENV = "OPENNOW_LOG_FILE"
LOG_FILE_LEVEL_ENV = "OPENNOW_LOG_FILE_LEVEL"

# Console formats, most detailed first: the first row whose level the
# console level does not exceed wins.
_CONSOLE_FORMATS: tuple[tuple[int, str, str | None], ...] = (
    (logging.DEBUG, "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d %(message)s", "%H:%M:%S"),
    (logging.INFO, "%(asctime)s [%(name)s] %(message)s", "%H:%M:%S"),
    (logging.CRITICAL, "%(levelname)s: %(message)s", None),
)

_FILE_FORMAT = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d %(message)s"
_FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"


def resolve_level(
    *,
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
    environ: dict[str, str] | None = None,
) -> str:
    """Pick the console log level from CLI flags and the environment."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    env = os.environ if environ is None else environ
    return env.get(LOG_LEVEL_ENV, "WARNING")


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> logging.Logger:
    """(Re)configure the installer's package logger.

    Safe to call more than once: handlers from a previous call are
    closed and replaced.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Unknown names fall back to WARNING.
        log_file: Optional path of a log file to append to.
        log_file_level: Level for the file; defaults to ``level``.

    Returns:
        The configured ``opennow_installer`` logger.
    """
    console_level = _parse_level(level)
    logger = logging.getLogger(PACKAGE_LOGGER)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_console_handler(console_level))
    threshold = console_level

    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else console_level
        logger.addHandler(_file_handler(log_file, file_level))
        threshold = min(threshold, file_level)

    logger.setLevel(threshold)
    logger.propagate = False

    # A console handler may outlive the stream it was bound to (tests, pipes)
    logging.raiseExceptions = False
    return logger


def _console_handler(level: int) -> logging.Handler:
    fmt, datefmt = next(
        (f, d) for limit, f, d in _CONSOLE_FORMATS if level <= limit
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    return handler


def _file_handler(path: str, level: int) -> logging.Handler:
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_FILE_DATEFMT))
    return handler


def _parse_level(name: str | None) -> int:
    """Level name → numeric level; WARNING for anything unrecognised."""
    level = logging.getLevelName((name or "").upper())
    return level if isinstance(level, int) else logging.WARNING
