#  Copyright © 2025 Dr.-Ing. Paul Wilhelm <paul@wilhelm.dev>
#  This file is part of Log Prefix. See LICENSE for details.

from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union

from log_prefix.config.PrefixSettings import PrefixSettings, DEFAULT_SETTINGS
from log_prefix.core.LogRecordInput import LogRecordInput
from log_prefix.core.LogSink import LogSink


@dataclass(frozen=True, eq=False)
class PrefixScope:
    """
    One level of prefix nesting over a log sink.

    Frames form a singly-linked chain: `inner` is either the parent frame or the raw sink.
    `prefix` already holds the segments of every enclosing frame, so a record is rewritten once,
    by the frame that receives it, and then handed straight to the sink at the bottom of the chain.
    Everything that is not prefixing is looked up on `inner`, down to the sink.

    `log` never goes through `inner`: a frame built by hand over a non-root frame must carry the full
    prefix itself (use `enter` to derive frames), otherwise the inner frame's segments are not emitted.
    """

    inner: Union['PrefixScope', LogSink]
    prefix: str = ""
    label: Optional[str] = None
    settings: PrefixSettings = DEFAULT_SETTINGS

    @classmethod
    def root(cls, backend: LogSink, settings: Optional[PrefixSettings] = None) -> 'PrefixScope':
        """
        Create an empty-prefix frame directly over a sink.
        :param backend: Log sink.
        :param settings: Segment format (inherited by all nested frames).
        :return: Root frame.
        """
        return cls(inner=backend, settings=settings or DEFAULT_SETTINGS)

    def enter(self, label: str) -> 'PrefixScope':
        """
        Create a nested frame.
        :param label: Label of the new level.
        :return: New frame; `self` is unchanged.
        """
        return PrefixScope(
            inner=self,
            prefix=self.prefix + self.settings.format_segment(label),
            label=label,
            settings=self.settings,
        )

    def log(self, record: LogRecordInput) -> None:
        """
        Prepend the accumulated prefix and emit through the sink.
        :param record: Log record with unmodified message.
        """
        self.backend.log(record.with_message(self.prefix + record.message))

    @property
    def parent(self) -> Optional['PrefixScope']:
        return self.inner if isinstance(self.inner, PrefixScope) else None

    @property
    def backend(self) -> LogSink:
        """
        Sink at the bottom of the chain.
        """
        frame = self
        while isinstance(frame.inner, PrefixScope):
            frame = frame.inner
        return frame.inner

    @property
    def labels(self) -> Tuple[str, ...]:
        """
        Labels from outermost to innermost.
        """
        labels = []
        frame: Optional[PrefixScope] = self
        while frame is not None:
            if frame.label is not None:
                labels.append(frame.label)
            frame = frame.parent
        return tuple(reversed(labels))

    @property
    def depth(self) -> int:
        return len(self.labels)

    def __getattr__(self, name: str) -> Any:
        """
        Delegate any other attributes to the inner frame or sink.
        """
        if name.startswith("__") or name == "inner":
            raise AttributeError(name)
        return getattr(self.inner, name)
