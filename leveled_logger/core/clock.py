"""Time sources used for log timestamps"""

from abc import ABC, abstractmethod
from datetime import datetime
import threading


class Clock(ABC):
    """
    Abstract time source.

    Loggers read timestamps only through their clock so tests can
    freeze time with MockClock.
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return the current time."""
        pass

    def after(self, seconds: float) -> threading.Event:
        """
        Return an event that is set once ``seconds`` have elapsed.

        Args:
            seconds: Delay before the event fires

        Returns:
            threading.Event set exactly once by a daemon timer
        """
        fired = threading.Event()
        timer = threading.Timer(seconds, fired.set)
        timer.daemon = True
        timer.start()
        return fired


class RealClock(Clock):
    """Clock backed by the system time."""

    def now(self) -> datetime:
        return datetime.now()

    def __repr__(self) -> str:
        return "RealClock()"


class MockClock(Clock):
    """Clock that always returns the zero timestamp 0001-01-01 00:00:00."""

    def now(self) -> datetime:
        return datetime.min

    def __repr__(self) -> str:
        return "MockClock()"


# Default layout of log timestamps: YYYY-MM-DD HH:MM:SS.mmm
DEFAULT_TIME_LAYOUT = "%Y-%m-%d %H:%M:%S.%f"


def format_timestamp(timestamp: datetime, layout: str = DEFAULT_TIME_LAYOUT) -> str:
    """
    Format a timestamp for a log line.

    The default layout is rendered with millisecond precision and a
    four-digit year, also for years below 1000 (strftime pads those
    differently per platform). Any other layout goes through strftime
    with %Y replaced by the zero-padded four-digit year.
    """
    if layout == DEFAULT_TIME_LAYOUT:
        return timestamp.replace(tzinfo=None).isoformat(sep=" ", timespec="milliseconds")
    year = f"{timestamp.year:04d}"
    layout = "%%".join(part.replace("%Y", year) for part in layout.split("%%"))
    return timestamp.strftime(layout)
