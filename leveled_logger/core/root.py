"""
Process-wide root logger

The free functions of this module delegate to whichever logger was most
recently installed with set_root(). init_root() installs a fresh
SimpleLogger; the package calls it once on import.
"""

from __future__ import annotations

import threading
from typing import Any

from leveled_logger.core.log_level import Level
from leveled_logger.core.logger import Logger
from leveled_logger.loggers.simple_logger import SimpleLogger

_lock = threading.Lock()
_root: Logger = None  # type: ignore[assignment]


def init_root() -> Logger:
    """Install a new SimpleLogger as root logger and return it."""
    logger = SimpleLogger()
    set_root(logger)
    return logger


def get_root() -> Logger:
    """Return the current root logger."""
    with _lock:
        return _root


def set_root(logger: Logger) -> None:
    """Replace the root logger. Safe for concurrent use."""
    global _root
    if not isinstance(logger, Logger):
        raise TypeError("root logger must implement Logger")
    with _lock:
        _root = logger


def log(level: Level, *args: Any) -> None:
    """Delegate to the root logger if it has ``level`` enabled."""
    root = _root
    if root.is_level_enabled(level):
        root.log(level, *args)


def logf(level: Level, fmt: str, *args: Any) -> None:
    """Delegate to the root logger if it has ``level`` enabled."""
    root = _root
    if root.is_level_enabled(level):
        root.logf(level, fmt, *args)


def verbose(*args: Any) -> None:
    """Print as DEBG if the root logger has the verbose level enabled."""
    log(Level.VERBOSE, *args)


def verbosef(fmt: str, *args: Any) -> None:
    logf(Level.VERBOSE, fmt, *args)


def debug(*args: Any) -> None:
    log(Level.DEBUG, *args)


def debugf(fmt: str, *args: Any) -> None:
    logf(Level.DEBUG, fmt, *args)


def info(*args: Any) -> None:
    log(Level.INFO, *args)


def infof(fmt: str, *args: Any) -> None:
    logf(Level.INFO, fmt, *args)


def warn(*args: Any) -> None:
    log(Level.WARN, *args)


def warnf(fmt: str, *args: Any) -> None:
    logf(Level.WARN, fmt, *args)


def error(*args: Any) -> None:
    log(Level.ERROR, *args)


def errorf(fmt: str, *args: Any) -> None:
    logf(Level.ERROR, fmt, *args)


def fatal(*args: Any) -> None:
    log(Level.FATAL, *args)


def fatalf(fmt: str, *args: Any) -> None:
    logf(Level.FATAL, fmt, *args)


def level() -> Level:
    """Return the level of the root logger."""
    return _root.level()


def set_level(lvl: Level) -> None:
    """Set a new level on the root logger."""
    _root.set_level(lvl)


def is_level_enabled(lvl: Level) -> bool:
    return _root.is_level_enabled(lvl)
