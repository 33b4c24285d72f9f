#  Copyright © 2025 Dr.-Ing. Paul Wilhelm <paul@wilhelm.dev>
#  This file is part of Log Prefix. See LICENSE for details.

from log_prefix.core.LogLevel import LogLevel
from log_prefix.core.LogRecordInput import LogRecordInput, SourceLocation
from log_prefix.core.scope import current_scope, default_scope


def _emit(level: LogLevel, message: str, source: str, depth: int) -> None:
    record = LogRecordInput(
        level=level,
        message=message,
        source=source,
        location=SourceLocation.from_caller(depth + 1),
    )
    scope = current_scope() or default_scope()
    scope.log(record)


def log(level: LogLevel, message: str, source: str = "") -> None:
    """
    Emit a message through the active scope (or the root logger outside of any scope).
    :param level: Log level.
    :param message: Message.
    :param source: Log source (e.g. a sub-logger name), empty for none.
    """
    _emit(level, message, source, depth=1)


def debug(message: str, source: str = "") -> None:
    _emit(LogLevel.DEBUG, message, source, depth=1)


def info(message: str, source: str = "") -> None:
    _emit(LogLevel.INFO, message, source, depth=1)


def warn(message: str, source: str = "") -> None:
    _emit(LogLevel.WARN, message, source, depth=1)


def error(message: str, source: str = "") -> None:
    _emit(LogLevel.ERROR, message, source, depth=1)
