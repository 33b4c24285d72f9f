#  Copyright © 2025 Dr.-Ing. Paul Wilhelm <paul@wilhelm.dev>
#  This file is part of Log Prefix. See LICENSE for details.

import logging
import threading
from abc import ABC, abstractmethod
from typing import List

from log_prefix.core.LogRecordInput import LogRecordInput

# Set on standard library records whose message already carries its prefix.
PREFIX_APPLIED_ATTR = "log_prefix_applied"

# Set on standard library records emitted by `LoggerSink` (the record's source).
SOURCE_ATTR = "log_source"


class LogSink(ABC):
    """
    Log sink: the underlying logging capability a prefix scope writes to.
    """

    @abstractmethod
    def log(self, record: LogRecordInput) -> None:
        """
        Emit record.
        :param record: Log record.
        """
        raise NotImplementedError


class LoggerSink(LogSink):
    """
    Log sink backed by a standard library logger.
    """

    def __init__(self, logger: logging.Logger):
        """
        Initialize logger sink.
        :param logger: Target logger; a non-empty record source selects `logger.getChild(source)`.
        """
        self.logger = logger

    def log(self, record: LogRecordInput) -> None:
        """
        Build a standard library record (keeping the original location) and hand it to the logger.
        :param record: Log record.
        """
        target = self.logger.getChild(record.source) if record.source else self.logger

        if not target.isEnabledFor(int(record.level)):
            return

        std_record = target.makeRecord(
            target.name,
            int(record.level),
            record.location.filename,
            record.location.lineno,
            record.message,
            (),
            None,
            func=record.location.function,
            extra={PREFIX_APPLIED_ATTR: True, SOURCE_ATTR: record.source},
        )
        target.handle(std_record)


class ListSink(LogSink):
    """
    Log sink that keeps every received record in memory, in arrival order.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._records: List[LogRecordInput] = []

    def log(self, record: LogRecordInput) -> None:
        with self._lock:
            self._records.append(record)

    @property
    def records(self) -> List[LogRecordInput]:
        """
        Snapshot of received records.
        :return: Records.
        """
        with self._lock:
            return list(self._records)

    @property
    def messages(self) -> List[str]:
        """
        Snapshot of received messages.
        :return: Messages.
        """
        return [record.message for record in self.records]

    def clear(self) -> None:
        with self._lock:
            self._records.clear()
