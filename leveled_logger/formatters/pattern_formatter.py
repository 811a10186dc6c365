"""
Pattern formatter with a user supplied template

Templates use str.format syntax. The format spec of a placeholder is its
argument, e.g. ``{timestamp:%H:%M}`` or ``{function:short}``.
"""

from __future__ import annotations

from string import Formatter
from types import FrameType
from typing import Dict, Any, Optional

from leveled_logger.core.clock import Clock, DEFAULT_TIME_LAYOUT, format_timestamp
from leveled_logger.core.log_level import Level, level_label
from leveled_logger.core.runtime_information import CallerInfo, RuntimeInformation

DEFAULT_PATTERN = "{timestamp} [{level}] - {message}\n"

PATTERN_FIELDS = frozenset({"message", "level", "timestamp", "file", "line", "function"})


class PatternError(ValueError):
    """Raised when a pattern cannot be compiled."""


class PatternContext:
    """
    Values available to a template while rendering one line.

    The timestamp is read from the clock at most once, and the caller
    location is looked up only if the template uses it.
    """

    def __init__(
        self,
        clock: Clock,
        level: Level,
        message: str,
        frame: Optional[FrameType] = None,
        depth: int = 0,
        runtime: Optional[RuntimeInformation] = None,
    ):
        self.clock = clock
        self.level = level
        self.message = message
        self._frame = frame
        self._depth = depth
        self._runtime = runtime or RuntimeInformation()
        self._now = None
        self._caller: Optional[CallerInfo] = None

    def now(self):
        if self._now is None:
            self._now = self.clock.now()
        return self._now

    def caller(self) -> CallerInfo:
        if self._caller is None:
            self._caller = self._runtime.caller(self._frame, self._depth)
            self._frame = None
        return self._caller

    def fields(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "level": f"{level_label(self.level):<4}",
            "timestamp": _TimestampField(self),
            "file": _FileField(self),
            "line": _LineField(self),
            "function": _FunctionField(self),
        }


class _TimestampField:
    def __init__(self, context: PatternContext):
        self._context = context

    def __format__(self, spec: str) -> str:
        return format_timestamp(self._context.now(), spec or DEFAULT_TIME_LAYOUT)

    def __str__(self) -> str:
        return format(self, "")


class _FileField:
    def __init__(self, context: PatternContext):
        self._context = context

    def __format__(self, spec: str) -> str:
        return self._context.caller().file_name(spec or "short")

    def __str__(self) -> str:
        return format(self, "")


class _LineField:
    def __init__(self, context: PatternContext):
        self._context = context

    def __format__(self, spec: str) -> str:
        return format(self._context.caller().line, spec)

    def __str__(self) -> str:
        return format(self, "")


class _FunctionField:
    def __init__(self, context: PatternContext):
        self._context = context

    def __format__(self, spec: str) -> str:
        return self._context.caller().function_name(spec or "package")

    def __str__(self) -> str:
        return format(self, "")


class PatternFormatter:
    """
    A compiled pattern.

    Available placeholders:
        - {message}: Log message
        - {level}: Level label, at least 4 characters
        - {timestamp}, {timestamp:<strftime layout>}: Timestamp,
          default layout "YYYY-MM-DD HH:MM:SS.mmm"
        - {file}, {file:short}, {file:full}: Calling file
        - {line}: Calling line number
        - {function}, {function:short}, {function:package},
          {function:full}: Calling function

    Example:
        formatter = PatternFormatter(
            "{timestamp} {file}:{line} {function} [{level}] - {message}\\n"
        )
        # 2018-11-24 15:26:44.453 main.py:16 main.main [INFO] - Hello World!
    """

    def __init__(self, pattern: str):
        self.pattern = pattern
        self._validate(pattern)

    @staticmethod
    def _validate(pattern: str) -> None:
        try:
            parsed = list(Formatter().parse(pattern))
        except ValueError as e:
            raise PatternError(f"invalid pattern {pattern!r}: {e}") from e

        for _, field_name, _, _ in parsed:
            if field_name is None:
                continue
            base = field_name.split(".", 1)[0].split("[", 1)[0]
            if base not in PATTERN_FIELDS:
                raise PatternError(f"unknown field {field_name!r} in pattern {pattern!r}")

    def format(self, context: PatternContext) -> str:
        """
        Render the pattern for one log call.

        Raises:
            Any exception raised while evaluating a placeholder
        """
        return self.pattern.format_map(context.fields())

    def __repr__(self) -> str:
        return f"PatternFormatter(pattern={self.pattern!r})"


DEFAULT_FORMATTER = PatternFormatter(DEFAULT_PATTERN)


def compile_pattern(pattern: str) -> PatternFormatter:
    """Compile ``pattern``, raising PatternError if it is invalid."""
    if not isinstance(pattern, str):
        raise PatternError(f"pattern must be a string, not {type(pattern).__name__}")
    return PatternFormatter(pattern)


def default_line(context: PatternContext) -> str:
    """Build the default layout without the template engine."""
    try:
        timestamp = format_timestamp(context.now())
    except Exception:
        timestamp = "????-??-?? ??:??:??.???"
    return f"{timestamp} [{level_label(context.level):<4}] - {context.message}\n"
