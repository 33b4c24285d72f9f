#  Copyright © 2025 Dr.-Ing. Paul Wilhelm <paul@wilhelm.dev>
#  This file is part of Log Prefix. See LICENSE for details.


class LogPrefixError(Exception):
    """
    Log prefix error.
    """
    pass


class UnknownLevelError(LogPrefixError, ValueError):
    """
    Log prefix error: level name does not map to any known log level.
    """
    pass
