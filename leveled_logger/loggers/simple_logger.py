"""Simple logger with a fixed line layout"""

from typing import Optional, TextIO

from leveled_logger.core.clock import Clock, format_timestamp
from leveled_logger.core.log_level import Level, level_label
from leveled_logger.core.logger import BaseWriterLogger


class SimpleLogger(BaseWriterLogger):
    """
    Logger printing ``<timestamp> [<LEVEL>] - <message>`` lines.

    Example:
        logger = SimpleLogger()
        logger.set_level(Level.DEBUG)
        logger.info("I'm alive!")
        # 2018-11-24 15:26:44.453 [INFO] - I'm alive!
    """

    def __init__(
        self,
        level: Level = Level.INFO,
        clock: Optional[Clock] = None,
        out: Optional[TextIO] = None,
    ):
        super().__init__(level=level, clock=clock, out=out)

    def _prepare_message(self, level: Level, message: str) -> str:
        timestamp = format_timestamp(self._clock.now())
        return f"{timestamp} [{level_label(level):<4}] - {message}\n"

    def __repr__(self) -> str:
        return f"SimpleLogger(level={self._level!r})"
