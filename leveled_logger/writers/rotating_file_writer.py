"""Rotating file sink"""

from pathlib import Path
import threading


class RotatingFileWriter:
    """Write log lines with size-based rotation."""

    def __init__(
        self,
        filepath: str,
        max_bytes: int = 10 * 1024 * 1024,
        backup_count: int = 5,
        encoding: str = "utf-8",
    ):
        """
        Initialize rotating file writer.

        Args:
            filepath: Path to log file
            max_bytes: Maximum file size before rotation
            backup_count: Number of backup files to keep
            encoding: File encoding (default: 'utf-8')
        """
        if max_bytes <= 0:
            raise ValueError("max_bytes must be positive")
        if backup_count < 0:
            raise ValueError("backup_count cannot be negative")
        self.filepath = Path(filepath)
        self.max_bytes = max_bytes
        self.backup_count = backup_count
        self.encoding = encoding
        self._lock = threading.Lock()
        self._file = None
        self._open()

    def _open(self):
        """Open log file."""
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        self._file = open(self.filepath, "a", encoding=self.encoding)

    def backup_path(self, index: int) -> Path:
        return self.filepath.with_suffix(f".{index}")

    def _should_rotate(self) -> bool:
        """Check if file should be rotated."""
        if not self._file:
            return False
        return self._file.tell() >= self.max_bytes

    def _do_rotate(self):
        """Perform file rotation."""
        if self._file:
            self._file.close()

        if self.backup_count == 0:
            self.filepath.unlink()
        else:
            # Rotate existing files
            for i in range(self.backup_count - 1, 0, -1):
                src = self.backup_path(i)
                dst = self.backup_path(i + 1)
                if src.exists():
                    if dst.exists():
                        dst.unlink()
                    src.rename(dst)

            # Move current to .1
            if self.filepath.exists():
                dst = self.backup_path(1)
                if dst.exists():
                    dst.unlink()
                self.filepath.rename(dst)

        self._open()

    def write(self, text: str) -> int:
        """Write text, rotating first if the file is full."""
        with self._lock:
            if self._should_rotate():
                self._do_rotate()
            if self._file:
                return self._file.write(text)
        return 0

    def flush(self):
        """Flush file buffer."""
        with self._lock:
            if self._file:
                self._file.flush()

    def close(self):
        """Close file."""
        with self._lock:
            if self._file:
                self._file.close()
                self._file = None
