"""Fan-out sink"""

from typing import Any, List


class MultiWriter:
    """
    Write every line to several sinks.

    Example:
        logger.set_out(MultiWriter(FileWriter("my.log"), sys.stdout))
    """

    def __init__(self, *writers: Any):
        self.writers: List[Any] = list(writers)

    def write(self, text: str) -> int:
        """Write text to every sink in order."""
        for writer in self.writers:
            writer.write(text)
        return len(text)

    def flush(self):
        for writer in self.writers:
            if hasattr(writer, "flush"):
                writer.flush()

    def close(self):
        for writer in self.writers:
            if hasattr(writer, "close"):
                writer.close()

    def __repr__(self) -> str:
        return f"MultiWriter({len(self.writers)} writers)"
