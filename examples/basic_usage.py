#!/usr/bin/env python3
"""Basic usage example"""

from leveled_logger import Level, SimpleLogger, set_root
import leveled_logger


def main():
    logger = SimpleLogger()
    logger.set_level(Level.DEBUG)

    logger.info("I'm alive!")

    logger.verbose("This will not print, since VERBOSE is below DEBUG")

    logger.fatal("This will not terminate the application")
    logger.debug("See? Nothing can stop me!")

    logger.set_level(Level.WARN)

    logger.error("Still printing...")

    set_root(logger)
    leveled_logger.warn("Now you can use me globally")

if __name__ == "__main__":
    main()
