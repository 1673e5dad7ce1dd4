"""Tests for modules.site_shell.ui_state."""

import pytest

from infrastructure.i18n import LocaleBundle
from modules.site_shell.ui_state import (
    LINK_REL,
    LINK_TARGET,
    build_ui_state,
    page_path,
)
from tests.factories import make_config, make_locale_bundle


@pytest.mark.unit
class TestPagePath:
    def test_language_and_slug(self):
        assert page_path("it", "start") == "/it/start/"

    @pytest.mark.parametrize("slug", ["/start/", "start//", "//start"])
    def test_duplicate_separators_collapsed(self, slug):
        assert page_path("it", slug) == "/it/start/"


@pytest.mark.unit
class TestBuildUiState:
    def test_full_bundle(self):
        state = build_ui_state(make_locale_bundle("it"), "it", make_config())

        assert state.language == "it"
        assert state.dir == "ltr"
        assert state.title == "Title it"
        assert state.hero_title == "Title it"
        assert state.hero_tagline == "Tagline it"
        assert state.hero_lede == "Lede it"
        assert state.footer_note == "Note it"
        assert state.slug == "start-it"
        assert state.url_path == "/it/start-it/"
        assert state.breadcrumb.label == "Home it"
        assert state.breadcrumb.href == "/it/start-it/"
        assert state.links_title == "Links it"

    def test_slug_mapping_round_trip(self):
        """Bundle {slugs: {home: "start"}} in Italian gives /it/start/."""
        bundle = LocaleBundle.model_validate({"slugs": {"home": "start"}})
        assert build_ui_state(bundle, "it", make_config()).url_path == "/it/start/"

    def test_missing_dir_defaults_to_ltr(self):
        bundle = LocaleBundle.model_validate({"meta": {"lang": "ru"}})
        assert build_ui_state(bundle, "ru", make_config()).dir == "ltr"

    def test_rtl_dir_kept(self):
        bundle = LocaleBundle.model_validate({"meta": {"dir": "rtl"}})
        assert build_ui_state(bundle, "en", make_config()).dir == "rtl"

    def test_empty_bundle_falls_back(self):
        config = make_config(product_title="Product")
        state = build_ui_state(LocaleBundle(), "cs", config)

        assert state.language == "cs"
        assert state.title == "Product"
        assert state.hero_title is None
        assert state.hero_tagline is None
        assert state.footer_note is None
        assert state.links_title is None
        assert state.slug == "home"
        assert state.url_path == "/cs/home/"
        assert state.breadcrumb.label == "Home"
        assert state.cards == ()

    def test_empty_strings_mean_keep(self):
        bundle = LocaleBundle.model_validate(
            {"hero": {"title": "", "tagline": ""}, "footer": {"note": ""}}
        )
        state = build_ui_state(bundle, "en", make_config())
        assert state.hero_title is None
        assert state.hero_tagline is None
        assert state.footer_note is None

    def test_breadcrumb_uses_page_label_first(self):
        bundle = LocaleBundle.model_validate(
            {"breadcrumbs": {"about": "Chi siamo", "home": "Inizio"}}
        )
        state = build_ui_state(bundle, "it", make_config(page_id="about"))
        assert state.breadcrumb.label == "Chi siamo"
        assert state.breadcrumb.href == "/it/about/"

    def test_breadcrumb_href_has_base_path(self):
        config = make_config(base_path="/site")
        state = build_ui_state(make_locale_bundle("pt"), "pt", config)
        assert state.breadcrumb.href == "/site/pt/start-pt/"
        assert state.url_path == "/pt/start-pt/"

    def test_card_links_open_isolated(self):
        state = build_ui_state(make_locale_bundle("en"), "en", make_config())

        card = state.cards[0]
        assert card.title == "Music en"
        assert [link.label for link in card.links] == ["Bandcamp", "Spotify"]
        for link in card.links:
            assert link.target == LINK_TARGET == "_blank"
            assert link.rel == LINK_REL == "noopener noreferrer"
