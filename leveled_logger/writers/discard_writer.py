"""Discarding sink"""


class DiscardWriter:
    """Sink that accepts and drops everything."""

    def write(self, text: str) -> int:
        return len(text)

    def flush(self):
        pass
