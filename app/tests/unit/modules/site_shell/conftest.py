"""Fixtures for the site shell tests."""

import pytest

from modules.site_shell import (
    Document,
    InMemoryHistory,
    InMemoryPreferenceStore,
    QueuedFrameScheduler,
    SiteShell,
)
from tests.factories import make_config, make_site_fetcher


@pytest.fixture
def config():
    return make_config()


@pytest.fixture
def fetcher():
    return make_site_fetcher()


@pytest.fixture
def store():
    return InMemoryPreferenceStore()


@pytest.fixture
def history():
    return InMemoryHistory("https://example.org/?ref=mail#top")


@pytest.fixture
def scheduler():
    return QueuedFrameScheduler()


@pytest.fixture
def document(config):
    return Document.blank(config.mount_point_id)


@pytest.fixture
def reported_errors():
    return []


@pytest.fixture
def make_shell(document, fetcher, store, history, scheduler, config, reported_errors):
    """Build a SiteShell; keyword arguments replace the default collaborators."""

    def _make(**overrides):
        kwargs = dict(
            document=document,
            fetcher=fetcher,
            store=store,
            history=history,
            scheduler=scheduler,
            config=config,
            browser_locale=None,
            error_reporter=reported_errors.append,
        )
        kwargs.update(overrides)
        return SiteShell(**kwargs)

    return _make


@pytest.fixture
def shell(make_shell):
    return make_shell()


@pytest.fixture
async def started_shell(shell):
    """Shell after start(): mounted and showing the default language."""
    await shell.start()
    return shell
