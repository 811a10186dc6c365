#!/usr/bin/env python3
"""Every logger variant side by side"""

from leveled_logger import (
    ColoredLogger,
    Level,
    LoggerBuilder,
    NamedLogger,
    PatternLogger,
    SimpleLogger,
    must,
)


def main():
    loggers = [
        SimpleLogger(),
        NamedLogger("MyLogger"),
        must(PatternLogger, "{timestamp} {file}:{line} {function} [{level}] - {message}\n"),
        ColoredLogger(SimpleLogger()),
        (LoggerBuilder()
            .with_name("built")
            .with_level("debug")
            .with_color()
            .build()),
    ]

    for logger in loggers:
        logger.set_level(Level.DEBUG)

        logger.info("I'm alive...")
        logger.debug("...and can print debug output!")
        logger.warn("Also, I can warn you if something important happens.")

if __name__ == "__main__":
    main()
