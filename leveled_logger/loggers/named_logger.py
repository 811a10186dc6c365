"""Logger that prints its name in every line"""

import threading
from typing import Optional, TextIO

from leveled_logger.core.clock import Clock, format_timestamp
from leveled_logger.core.log_level import Level, level_label
from leveled_logger.core.logger import BaseWriterLogger


class NamedLogger(BaseWriterLogger):
    """
    Logger printing ``<timestamp> <name> [<LEVEL>] - <message>`` lines.

    The name can be changed at any time and has its own lock.
    """

    def __init__(
        self,
        name: str,
        level: Level = Level.INFO,
        clock: Optional[Clock] = None,
        out: Optional[TextIO] = None,
    ):
        super().__init__(level=level, clock=clock, out=out)
        self._name_lock = threading.Lock()
        self._name = name

    def _prepare_message(self, level: Level, message: str) -> str:
        timestamp = format_timestamp(self._clock.now())
        return f"{timestamp} <{self._name}> [{level_label(level):<4}] - {message}\n"

    def name(self) -> str:
        return self._name

    def set_name(self, name: str) -> None:
        with self._name_lock:
            self._name = name

    def __repr__(self) -> str:
        return f"NamedLogger(name={self._name!r}, level={self._level!r})"
