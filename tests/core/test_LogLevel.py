#  Copyright © 2025 Dr.-Ing. Paul Wilhelm <paul@wilhelm.dev>
#  This file is part of Log Prefix. See LICENSE for details.

import logging

import pytest

from log_prefix.core.LogLevel import LogLevel
from log_prefix.core.LogPrefixError import LogPrefixError, UnknownLevelError


def test_ordering():
    assert LogLevel.DEBUG < LogLevel.INFO < LogLevel.WARN < LogLevel.ERROR


def test_stdlib_values():
    assert int(LogLevel.DEBUG) == logging.DEBUG
    assert int(LogLevel.WARN) == logging.WARNING
    assert int(LogLevel.ERROR) == logging.ERROR


def test_from_name():
    assert LogLevel.from_name("debug") is LogLevel.DEBUG
    assert LogLevel.from_name(" Info ") is LogLevel.INFO
    assert LogLevel.from_name("WARNING") is LogLevel.WARN
    assert LogLevel.from_name("warn") is LogLevel.WARN
    assert LogLevel.from_name("error") is LogLevel.ERROR


def test_from_name_unknown():
    with pytest.raises(UnknownLevelError, match="verbose"):
        LogLevel.from_name("verbose")

    # Also catchable as the package base error and as ValueError.
    with pytest.raises(LogPrefixError):
        LogLevel.from_name("")
    with pytest.raises(ValueError):
        LogLevel.from_name("trace")


def test_from_levelno():
    assert LogLevel.from_levelno(logging.DEBUG) is LogLevel.DEBUG
    assert LogLevel.from_levelno(5) is LogLevel.DEBUG
    assert LogLevel.from_levelno(25) is LogLevel.INFO
    assert LogLevel.from_levelno(logging.WARNING) is LogLevel.WARN
    assert LogLevel.from_levelno(logging.CRITICAL) is LogLevel.ERROR
