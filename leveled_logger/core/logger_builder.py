"""Logger builder pattern"""

from typing import Any, List, Optional, Union
from pathlib import Path

from leveled_logger.core.clock import Clock
from leveled_logger.core.log_level import Level
from leveled_logger.core.logger import WriterLogger
from leveled_logger.core.logger_config import LoggerConfig
from leveled_logger.loggers.colored_logger import ColoredLogger
from leveled_logger.loggers.named_logger import NamedLogger
from leveled_logger.loggers.pattern_logger import PatternLogger
from leveled_logger.loggers.simple_logger import SimpleLogger
from leveled_logger.writers.console_writer import ConsoleWriter
from leveled_logger.writers.discard_writer import DiscardWriter
from leveled_logger.writers.file_writer import FileWriter
from leveled_logger.writers.multi_writer import MultiWriter
from leveled_logger.writers.rotating_file_writer import RotatingFileWriter


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self, config: Optional[LoggerConfig] = None):
        self._config = config or LoggerConfig()
        self._custom_writers: List[Any] = []
        self._clock: Optional[Clock] = None

    def with_name(self, name: str) -> "LoggerBuilder":
        """Use a NamedLogger with the given name."""
        self._config.name = name
        if self._config.kind == "simple":
            self._config.kind = "named"
        return self

    def with_level(self, level: Union[Level, str]) -> "LoggerBuilder":
        """Set minimum log level."""
        if isinstance(level, str):
            level = Level.from_string(level)
        self._config.level = level
        return self

    def with_pattern(self, pattern: str, lazy: bool = False) -> "LoggerBuilder":
        """
        Use a PatternLogger.

        Args:
            pattern: Template, see PatternFormatter
            lazy: Compile on first use instead of in build()
        """
        self._config.kind = "pattern"
        self._config.pattern = pattern
        self._config.lazy_pattern = lazy
        return self

    def with_caller_depth(self, depth: int) -> "LoggerBuilder":
        """Skip ``depth`` helper frames when resolving caller fields."""
        if depth < 0:
            raise ValueError("caller_depth cannot be negative")
        self._config.caller_depth = depth
        return self

    def with_color(self, enabled: bool = True) -> "LoggerBuilder":
        """Wrap the logger in a ColoredLogger."""
        self._config.colored = enabled
        return self

    def with_console(self, enabled: bool = True) -> "LoggerBuilder":
        """Enable console output."""
        self._config.console_output = enabled
        return self

    def with_file(self, filepath: str, rotating: bool = False) -> "LoggerBuilder":
        """Enable file output."""
        self._config.log_file = Path(filepath)
        self._config.rotating = rotating
        return self

    def with_output(self, writer: Any) -> "LoggerBuilder":
        """
        Add a custom sink.

        Args:
            writer: Any object with a write(text) method

        Returns:
            Self for method chaining
        """
        self._custom_writers.append(writer)
        return self

    def with_clock(self, clock: Clock) -> "LoggerBuilder":
        """Set the time source."""
        self._clock = clock
        return self

    def build(self) -> WriterLogger:
        """Build and return configured logger."""
        return build_logger(self._config, extra_writers=self._custom_writers, clock=self._clock)


def _build_output(config: LoggerConfig, extra_writers: List[Any]) -> Any:
    writers: List[Any] = []

    if config.console_output:
        writers.append(ConsoleWriter())

    if config.log_file:
        if config.rotating:
            writers.append(RotatingFileWriter(
                str(config.log_file),
                max_bytes=config.max_file_size,
                backup_count=config.max_backup_files,
            ))
        else:
            writers.append(FileWriter(str(config.log_file)))

    writers.extend(extra_writers)

    if not writers:
        return DiscardWriter()
    if len(writers) == 1:
        return writers[0]
    return MultiWriter(*writers)


def build_logger(
    config: LoggerConfig,
    extra_writers: Optional[List[Any]] = None,
    clock: Optional[Clock] = None,
) -> WriterLogger:
    """
    Create a logger from a finished configuration.

    Raises:
        PatternError: If the pattern is invalid and not compiled lazily
    """
    out = _build_output(config, extra_writers or [])

    if config.kind == "named":
        logger: WriterLogger = NamedLogger(config.name, level=config.level, clock=clock, out=out)
    elif config.kind == "pattern":
        logger = PatternLogger(
            config.pattern,
            level=config.level,
            clock=clock,
            out=out,
            caller_depth=config.caller_depth,
            lazy=config.lazy_pattern,
        )
    else:
        logger = SimpleLogger(level=config.level, clock=clock, out=out)

    if config.colored:
        logger = ColoredLogger(logger)
    return logger
