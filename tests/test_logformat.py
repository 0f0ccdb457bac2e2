import logging

from atribot.logformat import COLOR_RESET, LogFormatter, level_color


def _record(level, msg, *args):
    return logging.LogRecord("t", level, __file__, 1, msg, args, None)


def test_level_colors_from_table():
    assert level_color(logging.ERROR) == "\x1b[31m"
    assert level_color(logging.WARNING) == "\x1b[33m"
    assert level_color(logging.CRITICAL) == "\x1b[1;31m"
    assert level_color(logging.DEBUG) == "\x1b[32m"


def test_unknown_level_uses_info_color():
    assert level_color(25) == level_color(logging.INFO)


def test_format_warning():
    out = LogFormatter().format(_record(logging.WARNING, "hello %s", "there"))
    assert out == "\x1b[33m[WARNING] hello there \n" + COLOR_RESET


def test_format_wraps_with_level_color():
    out = LogFormatter().format(_record(logging.INFO, "x"))
    assert out.startswith(level_color(logging.INFO) + "[INFO] ")
    assert out.endswith(COLOR_RESET)