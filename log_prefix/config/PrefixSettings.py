#  Copyright © 2025 Dr.-Ing. Paul Wilhelm <paul@wilhelm.dev>
#  This file is part of Log Prefix. See LICENSE for details.

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PrefixSettings(BaseModel):
    """
    Prefix segment format.
    The defaults produce `[label] `; labels are inserted verbatim unless `escape_labels` is set,
    so a label containing brackets shows up as-is in the final message.
    """
    open: str = Field("[", description="Text written before the label.")
    close: str = Field("] ", description="Text written after the label.")
    escape_labels: bool = Field(False, description="Backslash-escape `\\`, `[` and `]` inside labels.")

    model_config = ConfigDict(extra='forbid', frozen=True)

    @model_validator(mode='after')
    def validate_single_line(self) -> 'PrefixSettings':
        """
        Prefixes are prepended to the first line of a message, so the delimiters must not break lines.
        """
        for name, value in (("open", self.open), ("close", self.close)):
            if "\n" in value or "\r" in value:
                raise ValueError(f"'{name}' must not contain line breaks.")
        return self

    def format_segment(self, label: str) -> str:
        """
        Format one nesting level.
        :param label: Label.
        :return: Segment (e.g. `[label] `).
        """
        if self.escape_labels:
            label = label.replace("\\", "\\\\").replace("[", "\\[").replace("]", "\\]")
        return f"{self.open}{label}{self.close}"


DEFAULT_SETTINGS = PrefixSettings()


def parse_settings(settings_dict: Optional[Dict[str, Any]]) -> PrefixSettings:
    """
    Parse and validate raw settings.
    :param settings_dict: Raw settings (or None for defaults).
    :return: Validated settings.
    :raises ValidationError: If the dict has unknown keys or invalid values.
    """
    if settings_dict is None:
        return DEFAULT_SETTINGS
    return PrefixSettings(**settings_dict)
