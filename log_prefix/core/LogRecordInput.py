#  Copyright © 2025 Dr.-Ing. Paul Wilhelm <paul@wilhelm.dev>
#  This file is part of Log Prefix. See LICENSE for details.

import sys
from dataclasses import dataclass, field, replace

from log_prefix.core.LogLevel import LogLevel


@dataclass(frozen=True)
class SourceLocation:
    """
    Source position of a log call.
    """

    filename: str
    lineno: int
    function: str

    @classmethod
    def unknown(cls) -> 'SourceLocation':
        """
        Location used when the caller cannot be determined (same placeholders as `logging`).
        :return: Source location.
        """
        return cls(filename="(unknown file)", lineno=0, function="(unknown function)")

    @classmethod
    def from_caller(cls, depth: int = 1) -> 'SourceLocation':
        """
        Capture the location of a calling frame.
        :param depth: Number of frames above the caller of this method (1 = the caller's caller).
        :return: Source location, or `unknown()` if the stack is not deep enough.
        """
        try:
            frame = sys._getframe(depth + 1)
        except ValueError:
            return cls.unknown()
        code = frame.f_code
        return cls(filename=code.co_filename, lineno=frame.f_lineno, function=code.co_name)


@dataclass(frozen=True)
class LogRecordInput:
    """
    One log event as handed to a log sink.
    Only `message` is ever rewritten by a prefix scope.
    """

    level: LogLevel
    message: str
    source: str = ""
    location: SourceLocation = field(default_factory=SourceLocation.unknown)

    def with_message(self, message: str) -> 'LogRecordInput':
        """
        Copy record with a different message.
        :param message: New message.
        :return: New record.
        """
        return replace(self, message=message)
