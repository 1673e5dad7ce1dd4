"""Declarative description of the UI for a language.

``build_ui_state`` decides everything the renderer writes, without
touching the document: metadata, hero and footer text, breadcrumb, URL
path and link cards.
"""

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from infrastructure.i18n.models import LocaleBundle
from modules.site_shell.context import SiteConfig

DEFAULT_DIR = "ltr"
LINK_TARGET = "_blank"
LINK_REL = "noopener noreferrer"


@dataclass(frozen=True)
class LinkView:
    label: str
    href: str
    target: str = LINK_TARGET
    rel: str = LINK_REL


@dataclass(frozen=True)
class CardView:
    title: str
    links: Tuple[LinkView, ...] = ()


@dataclass(frozen=True)
class BreadcrumbView:
    label: str
    href: str


@dataclass(frozen=True)
class UiState:
    """Desired UI for one language.

    Text fields set to ``None`` leave the existing text in place.
    """

    language: str
    dir: str
    title: str
    slug: str
    url_path: str
    breadcrumb: BreadcrumbView
    hero_title: Optional[str] = None
    hero_tagline: Optional[str] = None
    hero_lede: Optional[str] = None
    footer_note: Optional[str] = None
    links_title: Optional[str] = None
    cards: Tuple[CardView, ...] = ()


def page_path(language: str, slug: str) -> str:
    """Path of a page in a language, with duplicate separators collapsed."""
    return re.sub(r"/{2,}", "/", f"/{language}/{slug}/")


def _present(value: Optional[str]) -> Optional[str]:
    return value if value else None


def build_cards(bundle: LocaleBundle) -> Tuple[CardView, ...]:
    return tuple(
        CardView(
            title=card.title or "",
            links=tuple(
                LinkView(label=link.label or "", href=link.href or "")
                for link in card.links
            ),
        )
        for card in bundle.sections.cards
    )


def build_ui_state(bundle: LocaleBundle, language: str, config: SiteConfig) -> UiState:
    slug = bundle.slug_for(config.page_id)
    path = page_path(language, slug)
    label = bundle.breadcrumb_label(
        config.page_id, config.default_page_id, config.breadcrumb_fallback
    )
    return UiState(
        language=bundle.meta.lang or language,
        dir=bundle.meta.dir or DEFAULT_DIR,
        title=bundle.hero.title or config.product_title,
        slug=slug,
        url_path=path,
        breadcrumb=BreadcrumbView(label=label, href=f"{config.base_path}{path}"),
        hero_title=_present(bundle.hero.title),
        hero_tagline=_present(bundle.hero.tagline),
        hero_lede=_present(bundle.hero.lede),
        footer_note=_present(bundle.footer.note),
        links_title=_present(bundle.sections.links_title),
        cards=build_cards(bundle),
    )
