#!/usr/bin/env python3
"""Write to a file and the console at the same time"""

import sys

from leveled_logger import SimpleLogger
from leveled_logger.writers import FileWriter, MultiWriter


def main():
    file_writer = FileWriter("logs/my.log")

    logger = SimpleLogger()
    logger.set_out(MultiWriter(file_writer, sys.stdout))  # writes to file and stdout
    logger.info("Some piece of information")

    file_writer.close()

if __name__ == "__main__":
    main()
