"""
Colored logger wrapper

Writes ANSI color codes around the output of a wrapped WriterLogger.
"""

from __future__ import annotations

import sys
import threading
from typing import Any, TextIO

from leveled_logger.core.log_level import Level
from leveled_logger.core.logger import WriterLogger

# ANSI color codes
COLOR_GRAY = "\033[30;1m"
COLOR_GREEN = "\033[32;1m"
COLOR_RED = "\033[31m"
COLOR_RESET = "\033[0m"
COLOR_YELLOW = "\033[33m"
COLOR_NONE = COLOR_RESET

LEVEL_COLORS = {
    Level.VERBOSE: COLOR_GRAY,
    Level.DEBUG: COLOR_NONE,
    Level.INFO: COLOR_GREEN,
    Level.WARN: COLOR_YELLOW,
    Level.ERROR: COLOR_RED,
    Level.FATAL: COLOR_RED,
}


def color_for_level(level: int) -> str:
    """Return the color code for ``level``, COLOR_NONE if unknown."""
    return LEVEL_COLORS.get(level, COLOR_NONE)


class ColoredLogger(WriterLogger):
    """
    Wrapper adding colors to any WriterLogger.

    Every enabled call produces three writes on the wrapped logger's sink:

    1. the color code for the level
    2. the line written by the wrapped logger itself
    3. the reset code

    The three writes of one call are serialized by this wrapper's lock.
    Calls made directly on the wrapped logger, or through another
    wrapper, are not.
    """

    def __init__(self, wrapped: WriterLogger):
        self._wrapped_lock = threading.Lock()
        self._wrapped = wrapped

    def _write_color(self, color: str) -> None:
        try:
            self._wrapped.out().write(color)
        except Exception as e:
            print(f"Writer error: {e}", file=sys.stderr)

    def log(self, level: Level, *args: Any) -> None:
        """Delegate to the wrapped logger between color codes."""
        color = color_for_level(level)
        with self._wrapped_lock:
            if self.is_level_enabled(level):
                self._write_color(color)
                try:
                    self._wrapped.log(level, *args)
                finally:
                    self._write_color(COLOR_RESET)

    def logf(self, level: Level, fmt: str, *args: Any) -> None:
        """Delegate to the wrapped logger between color codes."""
        color = color_for_level(level)
        with self._wrapped_lock:
            if self.is_level_enabled(level):
                self._write_color(color)
                try:
                    self._wrapped.logf(level, fmt, *args)
                finally:
                    self._write_color(COLOR_RESET)

    def wrapped(self) -> WriterLogger:
        return self._wrapped

    def level(self) -> Level:
        return self._wrapped.level()

    def set_level(self, level: Level) -> None:
        self._wrapped.set_level(level)

    def is_level_enabled(self, level: Level) -> bool:
        return self._wrapped.is_level_enabled(level)

    def out(self) -> TextIO:
        return self._wrapped.out()

    def set_out(self, out: TextIO) -> None:
        self._wrapped.set_out(out)

    def __repr__(self) -> str:
        return f"ColoredLogger(wrapped={self._wrapped!r})"
