#  Copyright © 2025 Dr.-Ing. Paul Wilhelm <paul@wilhelm.dev>
#  This file is part of Log Prefix. See LICENSE for details.

import logging

from rich.logging import RichHandler
from rich.text import Text

from log_prefix.config.PrefixSettings import PrefixSettings
from log_prefix.core.PrefixFilter import PrefixFilter
from log_prefix.util.logging_setup import PrefixHighlighter, setup_logging


def _prefix_spans(text: Text, style: str = "bold cyan3"):
    return [(span.start, span.end) for span in text.spans if span.style == style]


def test_setup_logging_installs_rich_handler():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    try:
        handler = setup_logging(level=logging.DEBUG, force=True)

        assert isinstance(handler, RichHandler)
        assert root.handlers == [handler]
        assert root.level == logging.DEBUG
        assert any(isinstance(f, PrefixFilter) for f in handler.filters)
        assert isinstance(handler.highlighter, PrefixHighlighter)
    finally:
        # Put back the handlers pytest installed for this test
        root.handlers = handlers
        root.setLevel(level)


def test_highlighter_styles_leading_prefix():
    text = Text("[a] [b] value 42")
    PrefixHighlighter().highlight(text)
    assert _prefix_spans(text) == [(0, 8)]


def test_highlighter_ignores_brackets_later_in_message():
    text = Text("value [x] 42")
    PrefixHighlighter().highlight(text)
    assert _prefix_spans(text) == []


def test_highlighter_custom_settings():
    text = Text("<job> <step> running")
    PrefixHighlighter(PrefixSettings(open="<", close="> "), style="magenta").highlight(text)
    assert _prefix_spans(text, style="magenta") == [(0, 13)]


def test_highlighter_escaped_brackets():
    text = Text("[a\\]b] rest")
    PrefixHighlighter().highlight(text)
    assert _prefix_spans(text) == [(0, 7)]


def test_highlighter_escaped_bracket_followed_by_space():
    text = Text("[a\\] b] rest")
    PrefixHighlighter().highlight(text)
    assert _prefix_spans(text) == [(0, 8)]


def test_setup_logging_keeps_existing_handlers():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    existing = logging.NullHandler()
    try:
        root.handlers = [existing]
        handler = setup_logging(level=logging.DEBUG)

        assert isinstance(handler, RichHandler)
        assert root.handlers == [existing]
        assert handler not in root.handlers
    finally:
        root.handlers = handlers
        root.setLevel(level)
