#  Copyright © 2025 Dr.-Ing. Paul Wilhelm <paul@wilhelm.dev>
#  This file is part of Log Prefix. See LICENSE for details.

"""
Nested, greppable prefixes for log messages.

    from log_prefix import get_logger, prefixed

    logger = get_logger(__name__)

    logger.info("No prefix here")
    with prefixed("foo"):
        logger.info("There's a [foo] there!")
        with prefixed("bar"):
            logger.info("Now there's a [foo] *and* a [bar]")
"""

from importlib.metadata import version, PackageNotFoundError

from logging import DEBUG, INFO, WARNING, ERROR, CRITICAL

from log_prefix.config.PrefixSettings import PrefixSettings, DEFAULT_SETTINGS, parse_settings
from log_prefix.core.LogLevel import LogLevel
from log_prefix.core.LogPrefixError import LogPrefixError, UnknownLevelError
from log_prefix.core.LogRecordInput import LogRecordInput, SourceLocation
from log_prefix.core.LogSink import LogSink, LoggerSink, ListSink
from log_prefix.core.PrefixScope import PrefixScope
from log_prefix.core.PrefixFilter import PrefixFilter
from log_prefix.core.PrefixedLogger import PrefixedLogger, get_logger
from log_prefix.core.scope import (
    aprefix_logs,
    bind_scope,
    current_prefix,
    current_scope,
    prefix_logs,
    prefixed,
    run_logging,
    with_prefix,
)
from log_prefix.core.emit import log, debug, info, warn, error
from log_prefix.util.logging_setup import PrefixHighlighter, setup_logging

# Get version
try:
    __version__ = version("log-prefix")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL",
    "PrefixSettings", "DEFAULT_SETTINGS", "parse_settings",
    "LogLevel",
    "LogPrefixError", "UnknownLevelError",
    "LogRecordInput", "SourceLocation",
    "LogSink", "LoggerSink", "ListSink",
    "PrefixScope",
    "PrefixFilter",
    "PrefixedLogger", "get_logger",
    "aprefix_logs", "bind_scope", "current_prefix", "current_scope",
    "prefix_logs", "prefixed", "run_logging", "with_prefix",
    "log", "debug", "info", "warn", "error",
    "PrefixHighlighter", "setup_logging",
]
