"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import make_bundle_data, make_locale_bundle
from tests.factories.site import (
    CONTENT_FRAGMENT,
    SHELL_TEMPLATE,
    make_config,
    make_site_fetcher,
)

__all__ = [
    "make_bundle_data",
    "make_locale_bundle",
    "CONTENT_FRAGMENT",
    "SHELL_TEMPLATE",
    "make_config",
    "make_site_fetcher",
]
