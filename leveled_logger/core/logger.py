"""
Logger interfaces and the shared writer-logger base

Every logger variant implements Logger. Loggers that write to a sink
also implement WriterLogger.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional, TextIO
import sys
import threading

from leveled_logger.core.clock import Clock, RealClock
from leveled_logger.core.log_level import Level, is_enabled


def render_args(args: tuple) -> str:
    """Concatenate the string forms of ``args`` without separators."""
    return "".join(str(arg) for arg in args)


def render_format(fmt: str, args: tuple) -> str:
    """
    Apply printf-style substitution; ``fmt`` is used verbatim without args.

    Arguments that do not match the format are appended after a
    ``%!(BADARGS ...)`` marker instead of raising.
    """
    if not args:
        return fmt
    try:
        return fmt % args
    except (TypeError, ValueError) as e:
        print(f"Failed to format message {fmt!r}: {e}", file=sys.stderr)
        return f"{fmt} %!(BADARGS {args!r})"


class Logger(ABC):
    """
    Objects that log messages with a level.

    A message is printed if and only if its level is greater than or
    equal to the level of the logger. Fatal does not terminate the
    application.
    """

    @abstractmethod
    def log(self, level: Level, *args: Any) -> None:
        """Print the concatenated ``args`` with the given level."""
        pass

    @abstractmethod
    def logf(self, level: Level, fmt: str, *args: Any) -> None:
        """Print ``fmt % args`` with the given level."""
        pass

    @abstractmethod
    def level(self) -> Level:
        """Return the current level of this logger."""
        pass

    @abstractmethod
    def set_level(self, level: Level) -> None:
        """Change the level of this logger."""
        pass

    @abstractmethod
    def is_level_enabled(self, level: Level) -> bool:
        """True if and only if this logger would print ``level`` messages."""
        pass

    def inspect(self, value: Any) -> None:
        """Print detailed information about ``value``. Not supported."""
        raise NotImplementedError("Unsupported")

    def verbose(self, *args: Any) -> None:
        self.log(Level.VERBOSE, *args)

    def verbosef(self, fmt: str, *args: Any) -> None:
        self.logf(Level.VERBOSE, fmt, *args)

    def debug(self, *args: Any) -> None:
        self.log(Level.DEBUG, *args)

    def debugf(self, fmt: str, *args: Any) -> None:
        self.logf(Level.DEBUG, fmt, *args)

    def info(self, *args: Any) -> None:
        self.log(Level.INFO, *args)

    def infof(self, fmt: str, *args: Any) -> None:
        self.logf(Level.INFO, fmt, *args)

    def warn(self, *args: Any) -> None:
        self.log(Level.WARN, *args)

    def warnf(self, fmt: str, *args: Any) -> None:
        self.logf(Level.WARN, fmt, *args)

    def error(self, *args: Any) -> None:
        self.log(Level.ERROR, *args)

    def errorf(self, fmt: str, *args: Any) -> None:
        self.logf(Level.ERROR, fmt, *args)

    def fatal(self, *args: Any) -> None:
        """Log fatal message. Does not terminate the application."""
        self.log(Level.FATAL, *args)

    def fatalf(self, fmt: str, *args: Any) -> None:
        """Log formatted fatal message. Does not terminate the application."""
        self.logf(Level.FATAL, fmt, *args)


class WriterLogger(Logger):
    """Logger that writes its output to a sink."""

    @abstractmethod
    def out(self) -> TextIO:
        """Return the sink the output is written to."""
        pass

    @abstractmethod
    def set_out(self, out: TextIO) -> None:
        """Change the sink the output is written to."""
        pass


class BaseWriterLogger(WriterLogger):
    """
    Level, clock and sink handling shared by the formatting loggers.

    Each field has its own lock. A setter replaces its field under that
    lock only, so a line in flight may observe a level change and a sink
    change at slightly different moments.
    """

    def __init__(
        self,
        level: Level = Level.INFO,
        clock: Optional[Clock] = None,
        out: Optional[TextIO] = None,
    ):
        self._level_lock = threading.Lock()
        self._level = level

        self._clock_lock = threading.Lock()
        self._clock = clock or RealClock()

        self._out_lock = threading.Lock()
        self._out = out if out is not None else sys.stdout

    @abstractmethod
    def _prepare_message(self, level: Level, message: str) -> str:
        """Build the full line for an enabled message."""
        pass

    def log(self, level: Level, *args: Any) -> None:
        if self.is_level_enabled(level):
            self._write(self._prepare_message(level, render_args(args)))

    def logf(self, level: Level, fmt: str, *args: Any) -> None:
        if self.is_level_enabled(level):
            self._write(self._prepare_message(level, render_format(fmt, args)))

    def _write(self, line: str) -> None:
        """Write one finished line; sink failures are reported, not raised."""
        try:
            self._out.write(line)
        except Exception as e:
            print(f"Writer error: {e}", file=sys.stderr)

    def level(self) -> Level:
        return self._level

    def set_level(self, level: Level) -> None:
        with self._level_lock:
            self._level = level

    def is_level_enabled(self, level: Level) -> bool:
        return is_enabled(level, self._level)

    def clock(self) -> Clock:
        return self._clock

    def set_clock(self, clock: Clock) -> None:
        with self._clock_lock:
            self._clock = clock

    def out(self) -> TextIO:
        return self._out

    def set_out(self, out: TextIO) -> None:
        with self._out_lock:
            self._out = out
