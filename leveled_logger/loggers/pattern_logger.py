"""Logger formatting lines with a user supplied pattern"""

from __future__ import annotations

import sys
import threading
from typing import Optional, TextIO

from leveled_logger.core.clock import Clock
from leveled_logger.core.log_level import Level
from leveled_logger.core.logger import BaseWriterLogger
from leveled_logger.core.runtime_information import RuntimeInformation
from leveled_logger.formatters.pattern_formatter import (
    DEFAULT_FORMATTER,
    DEFAULT_PATTERN,
    PatternContext,
    PatternError,
    PatternFormatter,
    compile_pattern,
    default_line,
)


class PatternLogger(BaseWriterLogger):
    """
    Logger that renders every line with a PatternFormatter.

    The rendered text is written as is: if neither the pattern nor the
    message ends with a line break, none is written.

    If rendering fails, the logger switches to DEFAULT_PATTERN for good
    and renders the line again. The caller never sees the failure.
    """

    def __init__(
        self,
        pattern: str = DEFAULT_PATTERN,
        level: Level = Level.INFO,
        clock: Optional[Clock] = None,
        out: Optional[TextIO] = None,
        caller_depth: int = 0,
        lazy: bool = False,
    ):
        """
        Initialize pattern logger.

        Args:
            pattern: Template, see PatternFormatter for placeholders
            level: Initial level
            clock: Time source (default: RealClock)
            out: Sink (default: sys.stdout)
            caller_depth: Frames to skip above the first frame outside this
                          package when resolving {file}, {line} and
                          {function}. Use 1 when logging through a helper.
            lazy: Compile on first use and fall back to the default
                  pattern silently instead of raising

        Raises:
            PatternError: If lazy is False and the pattern is invalid
        """
        super().__init__(level=level, clock=clock, out=out)
        if caller_depth < 0:
            raise ValueError("caller_depth cannot be negative")
        self._pattern = pattern
        self._caller_depth_lock = threading.Lock()
        self._caller_depth = caller_depth
        self._runtime = RuntimeInformation()
        self._formatter_lock = threading.Lock()
        self._formatter: Optional[PatternFormatter] = None
        if not lazy:
            self._formatter = compile_pattern(pattern)

    def _get_formatter(self) -> PatternFormatter:
        formatter = self._formatter
        if formatter is not None:
            return formatter

        with self._formatter_lock:
            if self._formatter is None:
                try:
                    self._formatter = compile_pattern(self._pattern)
                except PatternError as e:
                    print(
                        f"Failed to initialize logger, using default pattern: {e}",
                        file=sys.stderr,
                    )
                    self._pattern = DEFAULT_PATTERN
                    self._formatter = DEFAULT_FORMATTER
            return self._formatter

    def _prepare_message(self, level: Level, message: str) -> str:
        context = PatternContext(
            clock=self._clock,
            level=level,
            message=message,
            frame=sys._getframe(1),
            depth=self._caller_depth,
            runtime=self._runtime,
        )

        formatter = self._get_formatter()
        try:
            return formatter.format(context)
        except Exception as e:
            print(f"Failed to execute template, using default pattern: {e}", file=sys.stderr)

        with self._formatter_lock:
            self._pattern = DEFAULT_PATTERN
            self._formatter = DEFAULT_FORMATTER
        try:
            return DEFAULT_FORMATTER.format(context)
        except Exception as e:
            print(f"Failed to execute default pattern: {e}", file=sys.stderr)
            return default_line(context)

    def pattern(self) -> str:
        return self._pattern

    def caller_depth(self) -> int:
        return self._caller_depth

    def set_caller_depth(self, depth: int) -> None:
        if depth < 0:
            raise ValueError("caller_depth cannot be negative")
        with self._caller_depth_lock:
            self._caller_depth = depth

    def __repr__(self) -> str:
        return f"PatternLogger(pattern={self._pattern!r}, level={self._level!r})"


def must(factory, *args, **kwargs):
    """
    Call a logger constructor and abort if it reports a bad configuration.

    Example:
        logger = must(PatternLogger, "{timestamp} {file}:{line} - {message}\\n")

    Raises:
        SystemExit: If the constructor raised PatternError
    """
    try:
        return factory(*args, **kwargs)
    except PatternError as e:
        raise SystemExit(f"must: {e}") from e
