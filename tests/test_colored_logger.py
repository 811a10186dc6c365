"""Tests for the colored logger wrapper"""

import io
import threading
from unittest.mock import Mock

import pytest

from leveled_logger import ColoredLogger, Level, MockClock, NamedLogger, SimpleLogger
from leveled_logger.loggers.colored_logger import (
    COLOR_GRAY,
    COLOR_GREEN,
    COLOR_NONE,
    COLOR_RED,
    COLOR_RESET,
    COLOR_YELLOW,
    color_for_level,
)

LINE = "0001-01-01 00:00:00.000 [{}] - abc\n"


class TestColoredLogger:
    """Test colored wrapper output."""

    @pytest.fixture
    def buf(self):
        return io.StringIO()

    @pytest.fixture
    def inner(self, buf):
        return SimpleLogger(level=Level.DEBUG, clock=MockClock(), out=buf)

    @pytest.fixture
    def logger(self, inner):
        return ColoredLogger(inner)

    @pytest.mark.parametrize(
        "level, color, label",
        [
            (Level.INFO, COLOR_GREEN, "INFO"),
            (Level.DEBUG, COLOR_NONE, "DEBG"),
            (Level.WARN, COLOR_YELLOW, "WARN"),
            (Level.ERROR, COLOR_RED, "ERR "),
            (Level.FATAL, COLOR_RED, "FATAL"),
        ],
    )
    def test_logf(self, logger, buf, level, color, label):
        logger.logf(level, "%s", "abc")
        assert buf.getvalue() == color + LINE.format(label) + COLOR_RESET

    def test_log(self, logger, buf):
        logger.info("abc")
        assert buf.getvalue() == COLOR_GREEN + LINE.format("INFO") + COLOR_RESET

    def test_suppressed_level_writes_nothing(self, logger, buf):
        logger.verbose("abc")
        logger.verbosef("%s", "abc")
        assert buf.getvalue() == ""

    @pytest.mark.parametrize("fmt", ["%d items", "100% of %s"])
    def test_mismatched_format_still_resets(self, logger, buf, fmt):
        logger.infof(fmt, "abc")
        assert buf.getvalue().startswith(COLOR_GREEN)
        assert "BADARGS" in buf.getvalue()
        assert buf.getvalue().endswith(COLOR_RESET)

    def test_reset_written_when_wrapped_raises(self, buf):
        inner = Mock()
        inner.out.return_value = buf
        inner.is_level_enabled.return_value = True
        inner.logf.side_effect = RuntimeError("boom")
        logger = ColoredLogger(inner)

        with pytest.raises(RuntimeError):
            logger.errorf("%s", "abc")

        assert buf.getvalue() == COLOR_RED + COLOR_RESET

    def test_gate_checked_before_any_write(self):
        out = Mock()
        inner = SimpleLogger(level=Level.ERROR, clock=MockClock(), out=out)

        ColoredLogger(inner).warn("abc")

        out.write.assert_not_called()

    def test_three_writes_per_call(self):
        out = Mock()
        inner = SimpleLogger(clock=MockClock(), out=out)

        ColoredLogger(inner).info("abc")

        assert [c.args[0] for c in out.write.call_args_list] == [
            COLOR_GREEN,
            LINE.format("INFO"),
            COLOR_RESET,
        ]

    def test_verbose_is_gray(self, buf):
        logger = ColoredLogger(SimpleLogger(level=Level.VERBOSE, clock=MockClock(), out=buf))
        logger.verbose("abc")
        assert buf.getvalue() == COLOR_GRAY + LINE.format("DEBG") + COLOR_RESET

    def test_colors(self):
        assert color_for_level(Level.VERBOSE) == COLOR_GRAY
        assert color_for_level(Level.DEBUG) == COLOR_NONE
        assert color_for_level(Level.INFO) == COLOR_GREEN
        assert color_for_level(Level.WARN) == COLOR_YELLOW
        assert color_for_level(Level.ERROR) == COLOR_RED
        assert color_for_level(Level.FATAL) == COLOR_RED
        assert color_for_level(99) == COLOR_NONE
        assert COLOR_NONE == COLOR_RESET

    def test_delegates_level_and_out(self, logger, inner, buf):
        assert logger.level() == Level.DEBUG
        logger.set_level(Level.WARN)
        assert inner.level() == Level.WARN
        assert not logger.is_level_enabled(Level.INFO)

        other = io.StringIO()
        assert logger.out() is buf
        logger.set_out(other)
        assert inner.out() is other
        assert logger.wrapped() is inner

    def test_wraps_named_logger(self, buf):
        inner = NamedLogger("MyLogger", clock=MockClock(), out=buf)
        ColoredLogger(inner).error("abc")
        assert buf.getvalue() == (
            COLOR_RED + "0001-01-01 00:00:00.000 <MyLogger> [ERR ] - abc\n" + COLOR_RESET
        )

    def test_inspect_is_unsupported(self, logger):
        with pytest.raises(NotImplementedError):
            logger.inspect(object())

    def test_concurrent_calls_do_not_interleave_colors(self, logger, buf):
        def work():
            for _ in range(200):
                logger.info("abc")

        threads = [threading.Thread(target=work) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        chunk = COLOR_GREEN + LINE.format("INFO") + COLOR_RESET
        assert buf.getvalue() == chunk * 800
