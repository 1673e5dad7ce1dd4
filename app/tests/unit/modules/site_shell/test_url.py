"""Tests for modules.site_shell.url."""

from unittest.mock import MagicMock, PropertyMock

import pytest

from modules.site_shell import url
from modules.site_shell.browser import History, InMemoryHistory, Location
from modules.site_shell.url import UrlSynchronizer


@pytest.mark.unit
class TestSyncUrl:
    def test_keeps_query_and_fragment(self):
        history = InMemoryHistory("https://example.org/en/home/?ref=mail#top")

        assert UrlSynchronizer(history).sync_url("it", "start") is True

        assert history.location.href == "https://example.org/it/start/?ref=mail#top"
        assert history.state == {"lang": "it"}

    def test_replaces_instead_of_pushing(self):
        history = InMemoryHistory("https://example.org/")
        sync = UrlSynchronizer(history)

        sync.sync_url("it", "start")
        sync.sync_url("ru", "start")

        assert history.location.pathname == "/ru/start/"
        assert len(history.replacements) == 2

    def test_duplicate_separators_collapsed(self):
        history = InMemoryHistory("https://example.org/")
        UrlSynchronizer(history).sync_url("cs", "/domu/")
        assert history.location.pathname == "/cs/domu/"

    def test_failure_returns_false(self):
        history = MagicMock(spec=History)
        type(history).location = PropertyMock(return_value=Location.from_url("https://x/"))
        history.replace_state.side_effect = RuntimeError("SecurityError")

        assert UrlSynchronizer(history).sync_url("it", "start") is False

    def test_location_failure_returns_false(self):
        history = MagicMock(spec=History)
        type(history).location = PropertyMock(side_effect=RuntimeError("no location"))

        assert UrlSynchronizer(history).sync_url("it", "start") is False
        history.replace_state.assert_not_called()

    def test_failure_logged_as_warning(self, monkeypatch):
        history = MagicMock(spec=History)
        type(history).location = PropertyMock(return_value=Location.from_url("https://x/"))
        history.replace_state.side_effect = RuntimeError("SecurityError")
        mock_logger = MagicMock()
        monkeypatch.setattr(url, "logger", mock_logger)

        UrlSynchronizer(history).sync_url("it", "start")

        mock_logger.warning.assert_called_once()
        args, kwargs = mock_logger.warning.call_args
        assert args == ("url_sync_failed",)
        assert kwargs["language"] == "it"
        assert kwargs["url"] == "https://x/it/start/"
        assert "SecurityError" in kwargs["error"]


@pytest.mark.unit
class TestLocation:
    def test_from_url(self):
        location = Location.from_url("https://example.org/pt/x/?a=1#b")
        assert location.origin == "https://example.org"
        assert location.pathname == "/pt/x/"
        assert location.search == "?a=1"
        assert location.hash == "#b"

    def test_from_path_only(self):
        location = Location.from_url("/it/")
        assert location.origin == ""
        assert location.href == "/it/"
