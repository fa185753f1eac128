"""Logging configuration for taskq front ends.

The engine only emits records through module loggers; it is up to the
front end to decide where they go.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Marks handlers installed here so repeated setup replaces only our own.
_HANDLER_FLAG = "_taskq_handler"

# Root level in force before the first setup_logging call
_previous_root_level: int | None = None


def setup_logging(level: str | int = logging.WARNING, log_file: str | Path | None = None) -> None:
    """Configure the root logger.

    Console records go to stderr at `level`. When `log_file` is given,
    everything from DEBUG up is also written there. The root level is
    lowered only as far as those handlers need, and `reset_logging`
    restores it.

    Safe to call more than once; handlers from a previous call are replaced.
    The log file is opened before anything changes, so an unusable path
    raises OSError and leaves logging untouched.
    """
    global _previous_root_level

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    file_handler = None
    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(str(log_path), encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(fmt)
        setattr(file_handler, _HANDLER_FLAG, True)

    reset_logging()

    root = logging.getLogger()
    _previous_root_level = root.level
    root.setLevel(logging.DEBUG if file_handler is not None else level)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(fmt)
    setattr(console, _HANDLER_FLAG, True)
    root.addHandler(console)

    if file_handler is not None:
        root.addHandler(file_handler)


def reset_logging() -> None:
    """Remove handlers installed by `setup_logging` and restore the root level."""
    global _previous_root_level

    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_FLAG, False):
            root.removeHandler(handler)
            handler.close()

    if _previous_root_level is not None:
        root.setLevel(_previous_root_level)
        _previous_root_level = None
