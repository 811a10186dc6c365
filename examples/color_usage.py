#!/usr/bin/env python3
"""Colored output example"""

from leveled_logger import ColoredLogger, Level, SimpleLogger


def main():
    logger = ColoredLogger(SimpleLogger())
    logger.set_level(Level.VERBOSE)

    logger.verbose("Hello World!")
    logger.verbosef("fmt: Hello %s!", "World")
    logger.debug("Hello World!")
    logger.debugf("fmt: Hello %s!", "World")
    logger.info("Hello World!")
    logger.infof("fmt: Hello %s!", "World")
    logger.warn("Hello World!")
    logger.warnf("fmt: Hello %s!", "World")
    logger.error("Hello World!")
    logger.errorf("fmt: Hello %s!", "World")
    logger.fatal("Hello World!")
    logger.fatalf("fmt: Hello %s!", "World")

if __name__ == "__main__":
    main()
