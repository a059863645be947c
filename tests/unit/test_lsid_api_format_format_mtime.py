"""Unit tests for lsid.api.format.format_mtime."""

from lsid.api.format import format_mtime


def test_epoch():
    assert format_mtime(0) == "70.0101.0000"


def test_is_utc():
    assert format_mtime(1700000000) == "23.1114.2213"


def test_fractional_seconds_truncate():
    assert format_mtime(1700000000.999) == "23.1114.2213"
