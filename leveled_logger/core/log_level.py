"""
Log level enumeration

Levels are ordered; a message is emitted when its level is greater than or
equal to the logger's level.
"""

from enum import IntEnum
from typing import Dict, Optional


class Level(IntEnum):
    """
    Log level enumeration.

    VERBOSE and DEBUG share the "DEBG" label but are gated separately.
    """

    VERBOSE = 0     # Most verbose, printed as DEBG
    DEBUG = 1       # Debug information
    INFO = 2        # Informational messages
    WARN = 3        # Warning messages
    ERROR = 4       # Error messages
    FATAL = 5       # Fatal errors, the process keeps running

    def __str__(self) -> str:
        """Label used in log lines."""
        return level_label(self)

    @property
    def label(self) -> str:
        return level_label(self)

    @classmethod
    def from_string(cls, level_str: Optional[str]) -> "Level":
        """
        Convert string to Level.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            Level enum value. Unrecognized names give Level.WARN.
        """
        if not level_str:
            return cls.WARN
        return LEVEL_FROM_NAME.get(level_str.strip().lower(), cls.WARN)


# Mapping from log level to the label printed in log lines
LEVEL_LABELS: Dict[int, str] = {
    Level.VERBOSE: "DEBG",
    Level.DEBUG: "DEBG",
    Level.INFO: "INFO",
    Level.WARN: "WARN",
    Level.ERROR: "ERR",
    Level.FATAL: "FATAL",
}

# Names accepted by Level.from_string
LEVEL_FROM_NAME: Dict[str, Level] = {
    "verbose": Level.VERBOSE,
    "debug": Level.DEBUG,
    "debg": Level.DEBUG,
    "info": Level.INFO,
    "warn": Level.WARN,
    "warning": Level.WARN,
    "error": Level.ERROR,
    "err": Level.ERROR,
    "fatal": Level.FATAL,
}


def level_label(level: int) -> str:
    """Return the label of a level, or an empty string for unknown values."""
    return LEVEL_LABELS.get(level, "")


def is_enabled(level: int, threshold: int) -> bool:
    """True iff a message at ``level`` passes a logger set to ``threshold``."""
    return level >= threshold
