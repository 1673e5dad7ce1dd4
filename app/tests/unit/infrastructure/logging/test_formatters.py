"""Unit tests for infrastructure.logging.formatters module."""

import pytest
from infrastructure.logging.formatters import add_app_info, truncate_large_values


@pytest.mark.unit
class TestAddAppInfo:
    def test_add_app_info_adds_name_and_version(self):
        """Processor adds app_name and app_version to event dict."""
        processor = add_app_info("site-shell", "abc123")
        event_dict = {"event": "locale_loaded", "language": "it"}

        result = processor(None, "info", event_dict)

        assert result["app_name"] == "site-shell"
        assert result["app_version"] == "abc123"
        assert result["language"] == "it"

    def test_add_app_info_with_unknown_version(self):
        result = add_app_info("site-shell")(None, "info", {"event": "x"})
        assert result["app_version"] == "unknown"


@pytest.mark.unit
class TestTruncateLargeValues:
    def test_long_strings_are_truncated(self):
        processor = truncate_large_values(max_length=10)
        markup = "<section>" + "x" * 50 + "</section>"

        result = processor(None, "info", {"event": "content", "markup": markup})

        assert result["markup"].startswith("<section>x")
        assert f"{len(markup)} chars total" in result["markup"]

    def test_short_strings_and_other_values_untouched(self):
        processor = truncate_large_values(max_length=10)
        result = processor(None, "info", {"event": "ok", "count": 12345678901})
        assert result == {"event": "ok", "count": 12345678901}
