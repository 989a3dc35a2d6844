"""Debug log file for the CLI and any embedding front end."""
from __future__ import annotations

import logging
import os
import sys
from pathlib import Path


logger = logging.getLogger(__name__)
DEBUG_LOG_PATH: Path | None = None
DEFAULT_LOG_NAME = "pmode_paint_debug.log"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_EXCEPTION_HOOK_INSTALLED = False


def resolve_log_path(log_path: Path | None = None) -> Path | None:
    """Pick the log file: an explicit path wins, then ``PMODE_PAINT_DEBUG``.

    With the environment switch set, ``PMODE_PAINT_DEBUG_LOG`` names the file
    (default ``pmode_paint_debug.log`` in the current directory). Returns None
    when file logging is off.
    """

    if log_path is not None:
        return Path(log_path)
    if not os.environ.get("PMODE_PAINT_DEBUG"):
        return None
    return Path(os.environ.get("PMODE_PAINT_DEBUG_LOG", DEFAULT_LOG_NAME))


def setup_debug_logging(log_path: Path | None = None, level: int = logging.DEBUG) -> Path | None:
    """Attach a truncating file handler at ``level``; returns the log path.

    Without an explicit ``log_path`` or the environment switch the package
    logger only gets a ``NullHandler``.
    """

    global DEBUG_LOG_PATH, _EXCEPTION_HOOK_INSTALLED
    path = resolve_log_path(log_path)
    if path is None:
        logging.getLogger("pmode_paint").addHandler(logging.NullHandler())
        return None
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.setLevel(level)
    root_logger = logging.getLogger()
    root_logger.setLevel(min(level, root_logger.level or level))
    # one debug file per process
    root_logger.handlers = [h for h in root_logger.handlers if not isinstance(h, logging.FileHandler)]
    root_logger.addHandler(handler)
    DEBUG_LOG_PATH = path
    root_logger.log(level, "pmode-paint debug logging enabled at %s (level %s)", path, logging.getLevelName(level))
    if not _EXCEPTION_HOOK_INSTALLED:
        previous_hook = sys.excepthook

        def _logging_excepthook(exc_type, exc_value, exc_traceback, _prev=previous_hook):
            root_logger.error("Unhandled exception", exc_info=(exc_type, exc_value, exc_traceback))
            _prev(exc_type, exc_value, exc_traceback)

        sys.excepthook = _logging_excepthook
        _EXCEPTION_HOOK_INSTALLED = True
    return path


def enable_console_logging(level: int = logging.DEBUG) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s [%(name)s] %(message)s"))
    package_logger = logging.getLogger("pmode_paint")
    package_logger.setLevel(level)
    package_logger.addHandler(handler)
