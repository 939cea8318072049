"""Testing of util."""

import logging
from datetime import timezone
from unittest import mock

import numpy as np

from pygsd import util


def test_logger_level():
    """That that we get the right logger level when running a tty."""
    with mock.patch("sys.stdout.isatty", return_value=True):
        log = util.logger()
        assert log.level == logging.INFO


def test_logger_not_tty():
    """Test the default level for a non-interactive session."""
    with mock.patch("sys.stdout.isatty", return_value=False):
        log = util.logger(name="pygsd.testing")
        assert log.level == logging.WARNING


def test_custom_formatter():
    """Test that the formatter includes the message."""
    record = logging.LogRecord(
        "pygsd", logging.INFO, "gsd.py", 10, "Hello %s", ("World",), None
    )
    res = util.CustomFormatter().format(record)
    assert res.endswith("Hello World")
    assert "gsd.py:10" in res


def test_utc():
    """Does the utc() function work as expected."""
    answer = util.utc(2017, 2, 1, 2, 20)
    assert answer.tzinfo == timezone.utc
    assert answer.hour == 2
    assert util.utc().tzinfo == timezone.utc


def test_convert_value():
    """Test the metpy conversion helper."""
    res = util.convert_value(np.array([1.0, 10.0]), "meter / second", "knot")
    assert abs(res[0] - 1.9438) < 0.001
    assert abs(res[1] - 19.438) < 0.01


def test_get_test_file():
    """Test that we can load a bundled example."""
    text = util.get_test_file("GSD/SLC_RAOB.txt")
    assert text.startswith("RAOB")
