"""Test data factories for the site shell: markup, config and a populated fetcher."""

from typing import Any, Iterable

from infrastructure.i18n import SupportedLanguages
from modules.site_shell.context import SiteConfig
from tests.factories.i18n import make_bundle_data
from tests.fixtures.fetchers import FakeFetcher

LANGUAGES = ("en", "cs", "pt", "it", "ru")

SHELL_TEMPLATE = """<!DOCTYPE html>
<html>
<head><title>Shell</title></head>
<body>
<template id="site-shell">
  <header>
    <nav>
      <ol id="breadcrumbs"></ol>
      <div id="lang-switch"></div>
    </nav>
    <h1 id="hero-title">Default title</h1>
    <p id="hero-tagline">Default tagline</p>
    <p id="hero-lede">Default lede</p>
  </header>
  <main id="content-slot"></main>
  <footer><p id="footer-note">Default note</p></footer>
</template>
</body>
</html>
"""

CONTENT_FRAGMENT = (
    '<section class="links"><h2 id="links-title">Links</h2>'
    '<div id="cards"><p>placeholder</p></div></section>'
)


def make_config(**overrides: Any) -> SiteConfig:
    """Create a SiteConfig with the five default languages."""
    languages = overrides.pop("languages", SupportedLanguages.of(LANGUAGES, "en"))
    return SiteConfig(languages=languages, **overrides)


def make_site_fetcher(
    languages: Iterable[str] = LANGUAGES,
    template: str = SHELL_TEMPLATE,
    page_id: str = "home",
) -> FakeFetcher:
    """Create a fetcher serving the shell, a bundle and a fragment per language."""
    fetcher = FakeFetcher()
    fetcher.add_text("/template.html", template)
    for language in languages:
        fetcher.add_json(f"/locales/{language}.json", make_bundle_data(language))
        fetcher.add_text(
            f"/content/{page_id}-{language}.html",
            CONTENT_FRAGMENT.replace("placeholder", f"placeholder {language}"),
        )
    return fetcher
