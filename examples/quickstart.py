#!/usr/bin/env python3
"""Root logger quickstart"""

import leveled_logger
from leveled_logger import Level


def main():
    leveled_logger.set_level(Level.VERBOSE)  # default level is INFO

    leveled_logger.verbose("Hello World")             # prints as DEBG
    leveled_logger.verbosef("fmt: %s", "Hello World")  # prints as DEBG

    leveled_logger.debug("Hello World")
    leveled_logger.debugf("fmt: %s", "Hello World")

    leveled_logger.info("Hello World")
    leveled_logger.infof("fmt: %s", "Hello World")

    leveled_logger.warn("Hello World")
    leveled_logger.warnf("fmt: %s", "Hello World")

    leveled_logger.error("Hello World")
    leveled_logger.errorf("fmt: %s", "Hello World")

    leveled_logger.fatal("Hello World")
    leveled_logger.fatalf("fmt: %s", "Hello World")

    print("Still running")

if __name__ == "__main__":
    main()
