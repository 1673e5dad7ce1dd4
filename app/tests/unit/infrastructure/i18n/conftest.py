"""Feature-level fixtures for i18n system tests."""

import pytest

from infrastructure.i18n import FetchLocaleLoader, SupportedLanguages
from tests.factories import make_bundle_data
from tests.fixtures.fetchers import FakeFetcher


@pytest.fixture
def supported():
    """The five languages of the site, English as default."""
    return SupportedLanguages.of(["en", "cs", "pt", "it", "ru"], default="en")


@pytest.fixture
def locale_fetcher():
    """Fetcher serving English and Italian bundles."""
    fetcher = FakeFetcher()
    fetcher.add_json("/locales/en.json", make_bundle_data("en"))
    fetcher.add_json("/locales/it.json", make_bundle_data("it"))
    return fetcher


@pytest.fixture
def locale_loader(locale_fetcher):
    """FetchLocaleLoader without caching."""
    return FetchLocaleLoader(locale_fetcher)
