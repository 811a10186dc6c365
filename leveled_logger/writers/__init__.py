"""Writers module - Sinks for formatted log lines"""

from leveled_logger.writers.console_writer import ConsoleWriter
from leveled_logger.writers.discard_writer import DiscardWriter
from leveled_logger.writers.file_writer import FileWriter
from leveled_logger.writers.multi_writer import MultiWriter
from leveled_logger.writers.rotating_file_writer import RotatingFileWriter

__all__ = ["ConsoleWriter", "DiscardWriter", "FileWriter", "MultiWriter", "RotatingFileWriter"]
