#  Copyright © 2025 Dr.-Ing. Paul Wilhelm <paul@wilhelm.dev>
#  This file is part of Log Prefix. See LICENSE for details.

import logging
from logging import Logger
from typing import Any, Optional

from log_prefix.config.PrefixSettings import PrefixSettings, DEFAULT_SETTINGS
from log_prefix.core.LogSink import PREFIX_APPLIED_ATTR
from log_prefix.core.PrefixFilter import prefix_message
from log_prefix.core.scope import current_prefix


class PrefixedLogger(Logger):
    """
    A logger that prepends the active scope prefix, followed by its own prefix, to all log messages
    while delegating everything to the parent logger.
    """

    def __init__(self, parent_logger: Logger, prefix: str = "", settings: PrefixSettings = DEFAULT_SETTINGS):
        """
        Initialize the prefixed logger.
        :param parent_logger: Parent logger to delegate to.
        :param prefix: Fixed prefix, emitted after the active scope prefix.
        :param settings: Segment format used by `child`.
        """
        # Initialize with parent's name and level, but don't add handlers
        super().__init__(parent_logger.name, parent_logger.level)
        self.prefix = prefix
        self.settings = settings
        self.parent_logger = parent_logger

        # Clear any handlers that might have been added during initialization
        self.handlers = []
        self.propagate = False

    def child(self, label: str) -> 'PrefixedLogger':
        """
        Create a logger one nesting level deeper.
        :param label: Label of the new level.
        :return: New logger; `self` is unchanged.
        """
        return PrefixedLogger(self.parent_logger, self.prefix + self.settings.format_segment(label), self.settings)

    def isEnabledFor(self, level: int) -> bool:
        return self.parent_logger.isEnabledFor(level)

    def getEffectiveLevel(self) -> int:
        return self.parent_logger.getEffectiveLevel()

    def setLevel(self, level) -> None:
        self.parent_logger.setLevel(level)

    def _log(self, level: int, msg: Any, args, exc_info=None, extra=None, stack_info=False, stacklevel=1):
        """
        Override _log to prepend prefix and delegate to parent logger.
        """
        prefixed_msg = prefix_message(current_prefix() + self.prefix, msg, args)
        extra = {**(extra or {}), PREFIX_APPLIED_ATTR: True}
        # One extra frame (this method) sits between the public logging call and the parent's `_log`
        self.parent_logger._log(
            level, prefixed_msg, args,
            exc_info=exc_info, extra=extra, stack_info=stack_info, stacklevel=stacklevel + 1,
        )

    def __getattr__(self, name):
        """
        Delegate any other attributes to the parent logger.
        """
        if name == "parent_logger":
            raise AttributeError(name)
        return getattr(self.parent_logger, name)


def get_logger(name: Optional[str] = None) -> PrefixedLogger:
    """
    Get a prefix-aware logger over `logging.getLogger(name)`.
    :param name: Logger name (None for the root logger).
    :return: Prefixed logger.
    """
    return PrefixedLogger(logging.getLogger(name))
