#  Copyright © 2025 Dr.-Ing. Paul Wilhelm <paul@wilhelm.dev>
#  This file is part of Log Prefix. See LICENSE for details.

import logging
from enum import IntEnum

from log_prefix.core.LogPrefixError import UnknownLevelError


class LogLevel(IntEnum):
    """
    Ordered log level, valued by the matching standard library level number.
    """

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR

    @classmethod
    def from_name(cls, name: str) -> 'LogLevel':
        """
        Resolve level from name.
        :param name: Level name (case-insensitive), `warning` is accepted for `warn`.
        :return: Log level.
        :raises UnknownLevelError: If the name is not a known level.
        """
        key = name.strip().upper()
        if key == "WARNING":
            key = "WARN"
        try:
            return cls[key]
        except KeyError:
            raise UnknownLevelError(f"Unknown log level: '{name}'") from None

    @classmethod
    def from_levelno(cls, levelno: int) -> 'LogLevel':
        """
        Resolve level from a standard library level number.
        Picks the highest level not above `levelno`; anything below DEBUG is DEBUG.
        :param levelno: Level number (e.g. `logging.CRITICAL`).
        :return: Log level.
        """
        result = cls.DEBUG
        for level in cls:
            if level <= levelno:
                result = level
        return result
