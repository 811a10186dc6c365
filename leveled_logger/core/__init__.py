"""
Core module for logger system

This module contains the fundamental classes:
- Logger, WriterLogger: Logger interfaces
- Level: Log level enumeration
- Clock: Time sources
- LoggerConfig, LoggerBuilder: Configuration and construction
- root: Process-wide root logger
"""

from leveled_logger.core.log_level import Level, level_label, is_enabled
from leveled_logger.core.clock import Clock, RealClock, MockClock
from leveled_logger.core.logger import Logger, WriterLogger, BaseWriterLogger
from leveled_logger.core.runtime_information import CallerInfo, RuntimeInformation
from leveled_logger.core.logger_config import LoggerConfig
from leveled_logger.core.logger_builder import LoggerBuilder, build_logger

__all__ = [
    "Level",
    "level_label",
    "is_enabled",
    "Clock",
    "RealClock",
    "MockClock",
    "Logger",
    "WriterLogger",
    "BaseWriterLogger",
    "CallerInfo",
    "RuntimeInformation",
    "LoggerConfig",
    "LoggerBuilder",
    "build_logger",
]
