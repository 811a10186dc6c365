"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Leveled Logger - Level-gated logging with pluggable sinks and a swappable
root logger
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from leveled_logger.core.log_level import Level
from leveled_logger.core.clock import Clock, RealClock, MockClock
from leveled_logger.core.logger import Logger, WriterLogger
from leveled_logger.core.logger_config import LoggerConfig
from leveled_logger.core.logger_builder import LoggerBuilder, build_logger
from leveled_logger.loggers import SimpleLogger, NamedLogger, PatternLogger, ColoredLogger, must
from leveled_logger.formatters import PatternError
from leveled_logger.core.root import (
    init_root,
    get_root,
    set_root,
    log,
    logf,
    verbose,
    verbosef,
    debug,
    debugf,
    info,
    infof,
    warn,
    warnf,
    error,
    errorf,
    fatal,
    fatalf,
    level,
    set_level,
    is_level_enabled,
)

# Import submodules (not all classes by default)
from leveled_logger import formatters
from leveled_logger import writers

init_root()

__all__ = [
    "Level",
    "Clock",
    "RealClock",
    "MockClock",
    "Logger",
    "WriterLogger",
    "LoggerConfig",
    "LoggerBuilder",
    "build_logger",
    "SimpleLogger",
    "NamedLogger",
    "PatternLogger",
    "ColoredLogger",
    "PatternError",
    "must",
    "init_root",
    "get_root",
    "set_root",
    "log",
    "logf",
    "verbose",
    "verbosef",
    "debug",
    "debugf",
    "info",
    "infof",
    "warn",
    "warnf",
    "error",
    "errorf",
    "fatal",
    "fatalf",
    "level",
    "set_level",
    "is_level_enabled",
    "formatters",
    "writers",
]
