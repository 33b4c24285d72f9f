#  Copyright © 2025 Dr.-Ing. Paul Wilhelm <paul@wilhelm.dev>
#  This file is part of Log Prefix. See LICENSE for details.

import logging
import re

from rich.highlighter import ReprHighlighter
from rich.logging import RichHandler
from rich.text import Text

from log_prefix.config.PrefixSettings import PrefixSettings, DEFAULT_SETTINGS
from log_prefix.core.PrefixFilter import PrefixFilter


class PrefixHighlighter(ReprHighlighter):
    """
    A highlighter that keeps Rich's useful formatting (e.g., numbers, strings)
    and styles the leading prefix segments of each message.
    """

    def __init__(self, settings: PrefixSettings = DEFAULT_SETTINGS, style: str = "bold cyan3") -> None:
        """
        Initialize with prefix segment pattern.
        :param settings: Segment format to recognize.
        :param style: Style applied to the prefix.
        """
        super().__init__()

        self.style = style

        segment = rf"{re.escape(settings.open)}(?:\\.|[^\\\n])*?{re.escape(settings.close)}"
        self.prefix_re = re.compile(rf"^(?:{segment})+")

    def highlight(self, text: Text) -> None:
        """
        Apply ReprHighlighter base, then restyle the leading prefix.

        :param text: The rich Text object to be highlighted.
        """
        super().highlight(text)

        match = self.prefix_re.match(text.plain)
        if match:
            text.stylize("default", match.start(), match.end())
            text.stylize(self.style, match.start(), match.end())


def setup_logging(
        level: int = logging.INFO,
        settings: PrefixSettings = DEFAULT_SETTINGS,
        force: bool = False,
) -> RichHandler:
    """
    Configure the root logger with a Rich console handler that prefixes and highlights records.
    :param level: Root log level.
    :param settings: Segment format to highlight.
    :param force: Replace existing root handlers.
    :return: Handler; attached to the root logger only if the root logger had no handlers or `force` is set
             (otherwise logging is left untouched and the caller may attach it).
    """
    handler = RichHandler(
        markup=False,
        rich_tracebacks=True,
        highlighter=PrefixHighlighter(settings),
        show_path=False,  # Enable this for file:line traceback
    )
    handler.addFilter(PrefixFilter())

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[handler],
        force=force,
    )
    return handler
