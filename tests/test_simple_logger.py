"""Tests for the simple logger"""

import io

import pytest

from leveled_logger import Level, MockClock, SimpleLogger


@pytest.fixture
def buf():
    return io.StringIO()


@pytest.fixture
def logger(buf):
    return SimpleLogger(level=Level.DEBUG, clock=MockClock(), out=buf)


class TestSimpleLogger:
    """Test simple logger output."""

    def test_defaults(self):
        import sys

        logger = SimpleLogger()
        assert logger.level() == Level.INFO
        assert logger.out() is sys.stdout

    @pytest.mark.parametrize(
        "level, expected",
        [
            (Level.INFO, "0001-01-01 00:00:00.000 [INFO] - abc\n"),
            (Level.DEBUG, "0001-01-01 00:00:00.000 [DEBG] - abc\n"),
            (Level.VERBOSE, ""),
        ],
    )
    def test_logf(self, logger, buf, level, expected):
        logger.logf(level, "%s", "abc")
        assert buf.getvalue() == expected

    @pytest.mark.parametrize(
        "level, expected",
        [
            (Level.INFO, "0001-01-01 00:00:00.000 [INFO] - abc\n"),
            (Level.DEBUG, "0001-01-01 00:00:00.000 [DEBG] - abc\n"),
            (Level.VERBOSE, ""),
        ],
    )
    def test_log(self, logger, buf, level, expected):
        logger.log(level, "abc")
        assert buf.getvalue() == expected

    def test_log_concatenates_arguments(self, logger, buf):
        logger.debug("a", 1, None, ["b", "c"])
        assert buf.getvalue() == "0001-01-01 00:00:00.000 [DEBG] - a1None['b', 'c']\n"

    def test_logf_without_arguments_is_verbatim(self, logger, buf):
        logger.infof("100%")
        assert buf.getvalue() == "0001-01-01 00:00:00.000 [INFO] - 100%\n"

    def test_all_outputs(self, buf):
        logger = SimpleLogger(level=Level.VERBOSE, clock=MockClock(), out=buf)
        calls = [
            (logger.verbose, ("verbose: abc",), "[DEBG] - verbose: abc"),
            (logger.verbosef, ("verbose: fmt: %s", "abc"), "[DEBG] - verbose: fmt: abc"),
            (logger.debug, ("abc",), "[DEBG] - abc"),
            (logger.debugf, ("fmt: %s", "abc"), "[DEBG] - fmt: abc"),
            (logger.info, ("abc",), "[INFO] - abc"),
            (logger.infof, ("fmt: %s", "abc"), "[INFO] - fmt: abc"),
            (logger.warn, ("abc",), "[WARN] - abc"),
            (logger.warnf, ("fmt: %s", "abc"), "[WARN] - fmt: abc"),
            (logger.error, ("abc",), "[ERR ] - abc"),
            (logger.errorf, ("fmt: %s", "abc"), "[ERR ] - fmt: abc"),
            (logger.fatal, ("abc",), "[FATAL] - abc"),
            (logger.fatalf, ("fmt: %s", "abc"), "[FATAL] - fmt: abc"),
        ]

        for method, args, expected in calls:
            buf.seek(0)
            buf.truncate()
            method(*args)
            assert buf.getvalue() == f"0001-01-01 00:00:00.000 {expected}\n"

    def test_set_out(self):
        buf1 = io.StringIO()
        buf2 = io.StringIO()
        logger = SimpleLogger(level=Level.VERBOSE, clock=MockClock(), out=buf1)

        logger.info("foo")
        logger.set_out(buf2)
        logger.info("bar")
        logger.set_out(buf1)
        logger.info("abc")

        assert buf1.getvalue() == (
            "0001-01-01 00:00:00.000 [INFO] - foo\n"
            "0001-01-01 00:00:00.000 [INFO] - abc\n"
        )
        assert buf2.getvalue() == "0001-01-01 00:00:00.000 [INFO] - bar\n"
        assert logger.out() is buf1

    def test_set_level(self, buf):
        logger = SimpleLogger(level=Level.VERBOSE, clock=MockClock(), out=buf)

        logger.verbose("foo")
        assert buf.getvalue() == "0001-01-01 00:00:00.000 [DEBG] - foo\n"

        buf.seek(0)
        buf.truncate()
        logger.set_level(Level.INFO)
        logger.verbose("foo")
        assert buf.getvalue() == ""

    def test_unknown_level_prints_empty_label(self, buf):
        logger = SimpleLogger(level=Level.VERBOSE, clock=MockClock(), out=buf)
        logger.log(42, "abc")
        assert buf.getvalue() == "0001-01-01 00:00:00.000 [    ] - abc\n"

    def test_mismatched_format_arguments_do_not_raise(self, logger, buf, capsys):
        logger.infof("%d items", "abc")
        logger.infof("100% of %s", "abc")

        lines = buf.getvalue().splitlines()
        assert lines == [
            "0001-01-01 00:00:00.000 [INFO] - %d items %!(BADARGS ('abc',))",
            "0001-01-01 00:00:00.000 [INFO] - 100% of %s %!(BADARGS ('abc',))",
        ]
        assert "Failed to format message" in capsys.readouterr().err
