"""Unit tests for infrastructure.clients.http module."""

from unittest.mock import MagicMock

import pytest
import requests

from infrastructure.clients.http import DirectoryFetcher, FetchError, RequestsFetcher


def make_response(status_code=200, text=""):
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    response.text = text
    return response


@pytest.fixture
def session():
    session = MagicMock(spec=requests.Session)
    session.headers = {}
    return session


@pytest.mark.unit
class TestRequestsFetcher:
    def test_sets_user_agent(self, session):
        RequestsFetcher(origin="https://example.org", user_agent="tests/1.0", session=session)
        assert session.headers["User-Agent"] == "tests/1.0"

    async def test_fetch_text_resolves_against_origin(self, session):
        session.get.return_value = make_response(text="<template></template>")
        fetcher = RequestsFetcher(origin="https://example.org", timeout=3, session=session)

        body = await fetcher.fetch_text("/template.html")

        assert body == "<template></template>"
        session.get.assert_called_once_with("https://example.org/template.html", timeout=3)

    async def test_fetch_json(self, session):
        session.get.return_value = make_response(text='{"hero": {"title": "Ciao"}}')
        fetcher = RequestsFetcher(session=session)

        data = await fetcher.fetch_json("/locales/it.json")

        assert data == {"hero": {"title": "Ciao"}}

    async def test_non_success_status_raises(self, session):
        session.get.return_value = make_response(status_code=404)
        fetcher = RequestsFetcher(session=session)

        with pytest.raises(FetchError) as exc_info:
            await fetcher.fetch_text("/locales/xx.json")

        assert exc_info.value.status_code == 404
        assert exc_info.value.url == "/locales/xx.json"

    async def test_transport_error_raises(self, session):
        session.get.side_effect = requests.ConnectionError("refused")
        fetcher = RequestsFetcher(session=session)

        with pytest.raises(FetchError) as exc_info:
            await fetcher.fetch_text("/template.html")

        assert isinstance(exc_info.value.cause, requests.ConnectionError)

    async def test_invalid_json_raises(self, session):
        session.get.return_value = make_response(text="<html>")
        fetcher = RequestsFetcher(session=session)

        with pytest.raises(FetchError):
            await fetcher.fetch_json("/locales/en.json")

    def test_close(self, session):
        RequestsFetcher(session=session).close()
        session.close.assert_called_once()


@pytest.mark.unit
class TestDirectoryFetcher:
    def test_missing_directory(self, tmp_path):
        with pytest.raises(ValueError):
            DirectoryFetcher(tmp_path / "missing")

    async def test_reads_file(self, tmp_path):
        (tmp_path / "content").mkdir()
        (tmp_path / "content" / "home-it.html").write_text("<p>Ciao</p>", encoding="utf-8")

        body = await DirectoryFetcher(tmp_path).fetch_text("/content/home-it.html")

        assert body == "<p>Ciao</p>"

    async def test_ignores_query_string(self, tmp_path):
        (tmp_path / "template.html").write_text("<template></template>", encoding="utf-8")
        body = await DirectoryFetcher(tmp_path).fetch_text("/template.html?v=2")
        assert body == "<template></template>"

    async def test_missing_file_is_404(self, tmp_path):
        with pytest.raises(FetchError) as exc_info:
            await DirectoryFetcher(tmp_path).fetch_text("/locales/ru.json")
        assert exc_info.value.status_code == 404

    async def test_paths_outside_root_are_not_served(self, tmp_path):
        site = tmp_path / "site"
        site.mkdir()
        (tmp_path / "secret.txt").write_text("nope", encoding="utf-8")

        with pytest.raises(FetchError):
            await DirectoryFetcher(site).fetch_text("/../secret.txt")
