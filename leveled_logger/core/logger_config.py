"""
Logger configuration management
"""

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional, Union
from pathlib import Path

from leveled_logger.core.log_level import Level

LOGGER_KINDS = ("simple", "named", "pattern")


@dataclass
class LoggerConfig:
    """
    Logger configuration.

    Used by LoggerBuilder and build_logger() to create a logger from
    settings read by an external configuration loader.
    """

    # Basic settings
    kind: str = "simple"
    name: str = ""
    level: Union[Level, str] = Level.INFO

    # Pattern settings (kind == "pattern")
    pattern: Optional[str] = None
    lazy_pattern: bool = False
    caller_depth: int = 0

    # Console settings
    console_output: bool = True
    colored: bool = False

    # File settings
    log_file: Optional[Path] = None
    rotating: bool = False
    max_file_size: int = 10 * 1024 * 1024  # 10 MB
    max_backup_files: int = 5

    def __post_init__(self):
        """Validate configuration after initialization."""
        if isinstance(self.level, str):
            self.level = Level.from_string(self.level)
        if self.kind not in LOGGER_KINDS:
            raise ValueError(f"kind must be one of {LOGGER_KINDS}, not {self.kind!r}")
        if self.kind == "named" and not self.name:
            raise ValueError("named logger requires a name")
        if self.kind == "pattern" and self.pattern is None:
            raise ValueError("pattern logger requires a pattern")
        if self.caller_depth < 0:
            raise ValueError("caller_depth cannot be negative")
        if self.max_file_size <= 0:
            raise ValueError("max_file_size must be positive")
        if self.max_backup_files < 0:
            raise ValueError("max_backup_files cannot be negative")

        # Convert log_file to Path if it's a string
        if isinstance(self.log_file, str):
            self.log_file = Path(self.log_file)

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging."""
        return cls(
            level=Level.VERBOSE,
            console_output=True,
            colored=True,
        )

    @classmethod
    def production_config(cls, log_file: Union[str, Path] = "logs/app.log") -> "LoggerConfig":
        """Create configuration for production."""
        return cls(
            level=Level.WARN,
            console_output=False,
            log_file=log_file,
            rotating=True,
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LoggerConfig":
        """
        Create configuration from a mapping.

        Unknown keys are rejected; level names go through Level.from_string.

        Args:
            data: Mapping with configuration values

        Returns:
            New LoggerConfig instance
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"unknown configuration keys: {sorted(unknown)}")
        return cls(**dict(data))
