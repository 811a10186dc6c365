"""Tests for sinks"""

import io

import pytest

from leveled_logger import MockClock, SimpleLogger
from leveled_logger.writers import (
    ConsoleWriter,
    DiscardWriter,
    FileWriter,
    MultiWriter,
    RotatingFileWriter,
)


class TestConsoleWriter:
    """Test console sink."""

    def test_default_stream_is_stdout(self, capsys):
        logger = SimpleLogger(clock=MockClock(), out=ConsoleWriter())
        logger.info("abc")
        assert capsys.readouterr().out == "0001-01-01 00:00:00.000 [INFO] - abc\n"

    def test_custom_stream(self):
        stream = io.StringIO()
        writer = ConsoleWriter(stream)
        assert writer.write("abc") == 3
        writer.flush()
        assert stream.getvalue() == "abc"


class TestFileWriter:
    """Test file sink."""

    def test_write_creates_parents(self, tmp_path):
        path = tmp_path / "nested" / "app.log"
        with FileWriter(str(path)) as writer:
            SimpleLogger(clock=MockClock(), out=writer).info("abc")
        assert path.read_text(encoding="utf-8") == "0001-01-01 00:00:00.000 [INFO] - abc\n"

    def test_appends(self, tmp_path):
        path = tmp_path / "app.log"
        path.write_text("old\n", encoding="utf-8")
        writer = FileWriter(str(path))
        writer.write("new\n")
        writer.close()
        assert path.read_text(encoding="utf-8") == "old\nnew\n"

    def test_write_after_close(self, tmp_path):
        writer = FileWriter(str(tmp_path / "app.log"))
        writer.close()
        assert writer.write("abc") == 0
        writer.flush()


class TestRotatingFileWriter:
    """Test size-based rotation."""

    def test_rotation(self, tmp_path):
        path = tmp_path / "app.log"
        writer = RotatingFileWriter(str(path), max_bytes=10, backup_count=2)

        for i in range(4):
            writer.write(f"line-{i:04d}\n")
            writer.flush()
        writer.close()

        assert path.read_text(encoding="utf-8") == "line-0003\n"
        assert writer.backup_path(1).read_text(encoding="utf-8") == "line-0002\n"
        assert writer.backup_path(2).read_text(encoding="utf-8") == "line-0001\n"
        assert not writer.backup_path(3).exists()

    def test_no_backups(self, tmp_path):
        path = tmp_path / "app.log"
        writer = RotatingFileWriter(str(path), max_bytes=5, backup_count=0)
        writer.write("first\n")
        writer.write("second\n")
        writer.close()
        assert path.read_text(encoding="utf-8") == "second\n"

    @pytest.mark.parametrize("kwargs", [{"max_bytes": 0}, {"backup_count": -1}])
    def test_validation(self, tmp_path, kwargs):
        with pytest.raises(ValueError):
            RotatingFileWriter(str(tmp_path / "app.log"), **kwargs)


class TestMultiWriter:
    """Test fan-out sink."""

    def test_fan_out(self):
        a = io.StringIO()
        b = io.StringIO()
        logger = SimpleLogger(clock=MockClock(), out=MultiWriter(a, b))

        logger.info("abc")

        assert a.getvalue() == b.getvalue() == "0001-01-01 00:00:00.000 [INFO] - abc\n"

    def test_flush_and_close(self, tmp_path):
        file_writer = FileWriter(str(tmp_path / "app.log"))
        writer = MultiWriter(file_writer, DiscardWriter())
        assert writer.write("abc") == 3
        writer.flush()
        writer.close()
        assert (tmp_path / "app.log").read_text(encoding="utf-8") == "abc"


class TestDiscardWriter:
    """Test discarding sink."""

    def test_discard(self):
        writer = DiscardWriter()
        assert writer.write("abc") == 3
        writer.flush()
