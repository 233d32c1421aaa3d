"""
Logging configuration: set up once by the CLI entrypoint.

Every module that does ``logger = logging.getLogger(__name__)``
inherits this config. Logs go to stderr (and optionally a file);
stdout is reserved for progress and utilization lines.

Levels are resolved in precedence order:
    --debug  >  --verbose  >  --quiet  >  GPUMON_LOG_LEVEL  >  WARNING

Optional file output via GPUMON_LOG_FILE / GPUMON_LOG_FILE_LEVEL.
"""

from __future__ import annotations

import logging
import os
import sys

# WARNING level: message only
_FMT_MINIMAL = "%(message)s"

# INFO level: timestamped with module context
_FMT_VERBOSE = "%(asctime)s [%(name)s] %(message)s"
_DATEFMT_VERBOSE = "%H:%M:%S"

# DEBUG level and file output: file:line
_FMT_DEBUG = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d - %(message)s"
_DATEFMT_DEBUG = "%H:%M:%S"
_DATEFMT_FILE = "%Y-%m-%d %H:%M:%S"

# Only our own package is allowed to log below WARNING unless --debug
_OWN_LOGGER = "gpumon"

ENV_LOG_LEVEL = "GPUMON_LOG_LEVEL"
ENV_LOG_FILE = "GPUMON_LOG_FILE"
ENV_LOG_FILE_LEVEL = "GPUMON_LOG_FILE_LEVEL"


def resolve_level(
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
) -> str:
    """Pick the console level from CLI flags, then the environment."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    return os.environ.get(ENV_LOG_LEVEL, "WARNING")


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
    quiet_third_party: bool = True,
) -> None:
    """Configure Python logging for the entire process.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path to a log file.
        log_file_level: Optional separate level for the log file.
            Defaults to the same as ``level``.
        quiet_third_party: If True, loggers outside ``gpumon`` stay at
            WARNING unless we're at DEBUG level.
    """
    numeric_level = _parse_level(level)

    if numeric_level <= logging.DEBUG:
        fmt, datefmt = _FMT_DEBUG, _DATEFMT_DEBUG
    elif numeric_level <= logging.INFO:
        fmt, datefmt = _FMT_VERBOSE, _DATEFMT_VERBOSE
    else:
        fmt, datefmt = _FMT_MINIMAL, None

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(numeric_level)
    console.setFormatter(logging.Formatter(fmt, datefmt=datefmt))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)

    effective_level = numeric_level

    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else numeric_level
        effective_level = min(effective_level, file_level)

        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FMT_DEBUG, datefmt=_DATEFMT_FILE))
        root.addHandler(fh)

    if quiet_third_party and numeric_level > logging.DEBUG:
        root.setLevel(max(effective_level, logging.WARNING))
        logging.getLogger(_OWN_LOGGER).setLevel(effective_level)
    else:
        root.setLevel(effective_level)
        logging.getLogger(_OWN_LOGGER).setLevel(logging.NOTSET)

    logging.raiseExceptions = False


def _parse_level(level: str | None) -> int:
    """Convert a level name string to its numeric constant."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric
