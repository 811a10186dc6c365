"""
Log formatters module

Provides the pattern formatter used by PatternLogger.
"""

from leveled_logger.formatters.pattern_formatter import (
    DEFAULT_PATTERN,
    PatternContext,
    PatternError,
    PatternFormatter,
    compile_pattern,
)

__all__ = [
    "DEFAULT_PATTERN",
    "PatternContext",
    "PatternError",
    "PatternFormatter",
    "compile_pattern",
]
