import io

import pytest

from skyline.logger import LogLevel, Logger, get_logger


@pytest.fixture
def captured():
    out = io.StringIO()
    err = io.StringIO()
    return Logger(out=out, err=err), out, err


@pytest.mark.parametrize(
    "level", [LogLevel.DEBUG, LogLevel.INFO, LogLevel.WARNING, LogLevel.ERROR]
)
def test_set_level(level):
    logger = Logger()
    logger.set_level(level)
    assert logger.level is level


def test_default_level_is_info():
    assert Logger().level is LogLevel.INFO


@pytest.mark.parametrize(
    "level, message, want_log",
    [
        (LogLevel.DEBUG, "test debug message", True),
        (LogLevel.INFO, "should not show", False),
    ],
)
def test_debug(captured, level, message, want_log):
    logger, out, _ = captured
    logger.set_level(level)
    logger.debug("%s", message)
    text = out.getvalue()
    assert (len(text) > 0) is want_log
    if want_log:
        assert message in text
        assert text.startswith("DEBUG: ")
        assert "test_logger.py:" in text


@pytest.mark.parametrize(
    "level, message, want_log",
    [
        (LogLevel.DEBUG, "test info message", True),
        (LogLevel.INFO, "test info message", True),
        (LogLevel.WARNING, "should not show", False),
    ],
)
def test_info(captured, level, message, want_log):
    logger, out, _ = captured
    logger.set_level(level)
    logger.info("%s", message)
    assert out.getvalue() == (message + "\n" if want_log else "")


@pytest.mark.parametrize(
    "level, message",
    [
        (LogLevel.DEBUG, "test error message"),
        (LogLevel.ERROR, "test error message"),
    ],
)
def test_error(captured, level, message):
    logger, out, err = captured
    logger.set_level(level)
    logger.error("%s", message)
    assert message in err.getvalue()
    assert err.getvalue().startswith("ERROR: ")
    assert out.getvalue() == ""


def test_warning_formats_arguments(captured):
    logger, out, _ = captured
    logger.warning("failed %d of %s", 3, "items")
    text = out.getvalue()
    assert text.startswith("WARNING: ")
    assert text.endswith("failed 3 of items\n")


def test_warning_suppressed_at_error_level(captured):
    logger, out, _ = captured
    logger.set_level(LogLevel.ERROR)
    logger.warning("hidden")
    assert out.getvalue() == ""


def test_message_without_args_is_not_formatted(captured):
    logger, out, _ = captured
    logger.info("100% done")
    assert out.getvalue() == "100% done\n"


@pytest.mark.parametrize(
    "level, expected",
    [
        (LogLevel.DEBUG, "DEBUG"),
        (LogLevel.INFO, "INFO"),
        (LogLevel.WARNING, "WARNING"),
        (LogLevel.ERROR, "ERROR"),
    ],
)
def test_log_level_string(level, expected):
    assert str(level) == expected


def test_get_logger_shares_state_between_calls():
    first = get_logger()
    previous = first.level
    try:
        first.set_level(LogLevel.WARNING)
        assert get_logger().level is LogLevel.WARNING
    finally:
        first.set_level(previous)