"""Logger variants"""

from leveled_logger.loggers.simple_logger import SimpleLogger
from leveled_logger.loggers.named_logger import NamedLogger
from leveled_logger.loggers.pattern_logger import PatternLogger, must
from leveled_logger.loggers.colored_logger import ColoredLogger

__all__ = ["SimpleLogger", "NamedLogger", "PatternLogger", "ColoredLogger", "must"]
