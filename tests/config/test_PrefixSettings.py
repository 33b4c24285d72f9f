#  Copyright © 2025 Dr.-Ing. Paul Wilhelm <paul@wilhelm.dev>
#  This file is part of Log Prefix. See LICENSE for details.

import pytest
from pydantic import ValidationError

from log_prefix.config.PrefixSettings import PrefixSettings, DEFAULT_SETTINGS, parse_settings


class TestPrefixSettings:
    """Test suite for PrefixSettings Pydantic model."""

    def test_default_format(self):
        assert DEFAULT_SETTINGS.format_segment("foo") == "[foo] "
        assert DEFAULT_SETTINGS.format_segment("") == "[] "

    def test_labels_verbatim_by_default(self):
        assert DEFAULT_SETTINGS.format_segment("a]b[c") == "[a]b[c] "

    def test_escape_labels(self):
        settings = PrefixSettings(escape_labels=True)
        assert settings.format_segment("a]b[c") == "[a\\]b\\[c] "
        assert settings.format_segment("back\\slash") == "[back\\\\slash] "

    def test_custom_delimiters(self):
        settings = PrefixSettings(open="<", close=">: ")
        assert settings.format_segment("x") == "<x>: "

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            PrefixSettings(separator="|")

    def test_line_break_rejected(self):
        with pytest.raises(ValidationError, match="line breaks"):
            PrefixSettings(close="]\n")

    def test_frozen(self):
        with pytest.raises(ValidationError):
            DEFAULT_SETTINGS.open = "("


class TestParseSettings:
    """Test suite for parse_settings helper."""

    def test_none_gives_defaults(self):
        assert parse_settings(None) is DEFAULT_SETTINGS

    def test_partial_dict(self):
        settings = parse_settings({"open": "{", "close": "} "})
        assert settings.format_segment("x") == "{x} "
        assert settings.escape_labels is False

    def test_invalid_type(self):
        with pytest.raises(ValidationError):
            parse_settings({"escape_labels": "sometimes"})
