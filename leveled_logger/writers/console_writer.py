"""Console sink"""

import sys
from typing import Optional, TextIO


class ConsoleWriter:
    """Write log lines to the console."""

    def __init__(self, stream: Optional[TextIO] = None):
        """
        Initialize console writer.

        Args:
            stream: Output stream (default: sys.stdout at write time)
        """
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write(self, text: str) -> int:
        """Write text and flush the stream."""
        stream = self.stream
        written = stream.write(text)
        stream.flush()
        return written

    def flush(self):
        """Flush stream."""
        self.stream.flush()
