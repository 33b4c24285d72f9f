#  Copyright © 2025 Dr.-Ing. Paul Wilhelm <paul@wilhelm.dev>
#  This file is part of Log Prefix. See LICENSE for details.

import logging
from typing import Any

from log_prefix.core.LogSink import PREFIX_APPLIED_ATTR
from log_prefix.core.scope import current_prefix


def prefix_message(prefix: str, msg: Any, args: Any) -> Any:
    """
    Prepend prefix to a standard library log message.
    With lazy `%` arguments the prefix is merged into the format string, so its `%` are doubled.
    :param prefix: Prefix.
    :param msg: Message (any object, as accepted by `logging`).
    :param args: Record arguments.
    :return: Prefixed message (`msg` itself when there is no prefix).
    """
    if not prefix:
        return msg
    if args:
        prefix = prefix.replace("%", "%%")
    return f"{prefix}{msg}"


class PrefixFilter(logging.Filter):
    """
    A logging filter that prepends the active prefix to records from plain loggers.
    Attach it to handlers (or loggers) whose records are not created through a prefix-aware logger.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, PREFIX_APPLIED_ATTR, False):
            return True

        prefix = current_prefix()
        record.msg = prefix_message(prefix, record.msg, record.args)
        setattr(record, PREFIX_APPLIED_ATTR, True)
        return True
