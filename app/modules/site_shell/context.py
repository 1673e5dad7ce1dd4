"""Shell configuration and per-instance state."""

from dataclasses import dataclass, field
from typing import Dict, Optional

from infrastructure.configuration.features import SiteShellSettings
from infrastructure.i18n.models import SupportedLanguages
from modules.site_shell.dom import Document, Element
from modules.site_shell.exceptions import ShellAlreadyMountedError, ShellLoadError

HERO_TITLE_ID = "hero-title"
HERO_TAGLINE_ID = "hero-tagline"
HERO_LEDE_ID = "hero-lede"
FOOTER_NOTE_ID = "footer-note"
LANG_SWITCH_ID = "lang-switch"
BREADCRUMBS_ID = "breadcrumbs"
CONTENT_SLOT_ID = "content-slot"
LINKS_TITLE_ID = "links-title"
CARDS_ID = "cards"


@dataclass(frozen=True)
class SiteConfig:
    """Deployment constants of one shell."""

    languages: SupportedLanguages
    page_id: str = "home"
    default_page_id: str = "home"
    breadcrumb_fallback: str = "Home"
    product_title: str = "Rove Monteux"
    base_path: str = ""
    template_path: str = "/template.html"
    template_id: str = "site-shell"
    mount_point_id: str = "app"
    locales_path: str = "/locales"
    content_path: str = "/content"
    preference_key: str = "preferredLang"
    link_separator: str = " · "
    indicator_inset: float = 6
    switch_labels: Dict[str, str] = field(default_factory=dict)
    discard_stale_loads: bool = True

    @classmethod
    def from_settings(cls, site: SiteShellSettings) -> "SiteConfig":
        return cls(
            languages=SupportedLanguages.of(
                site.supported_languages, default=site.default_language
            ),
            page_id=site.content_page,
            default_page_id=site.default_page_id,
            breadcrumb_fallback=site.breadcrumb_fallback,
            product_title=site.product_title,
            base_path=site.base_path,
            template_path=site.template_path,
            template_id=site.template_id,
            mount_point_id=site.mount_point_id,
            locales_path=site.locales_path,
            content_path=site.content_path,
            preference_key=site.preference_key,
            link_separator=site.link_separator,
            indicator_inset=site.indicator_inset,
            switch_labels=dict(site.switch_labels),
            discard_stale_loads=site.discard_stale_loads,
        )

    @property
    def template_url(self) -> str:
        return f"{self.base_path}{self.template_path}"

    def content_url(self, language: str) -> str:
        return f"{self.base_path}{self.content_path}/{self.page_id}-{language}.html"


@dataclass
class ShellElements:
    """Slots of the mounted shell the rest of the system writes to.

    Hero and footer slots are optional; the switch container, breadcrumb
    list and content slot are required.
    """

    lang_switch: Element
    breadcrumbs: Element
    content_slot: Element
    hero_title: Optional[Element] = None
    hero_tagline: Optional[Element] = None
    hero_lede: Optional[Element] = None
    footer_note: Optional[Element] = None

    @classmethod
    def from_document(cls, document: Document) -> "ShellElements":
        """Capture slot references from a document.

        Raises:
            ShellLoadError: If a required slot is missing.
        """
        required = {}
        for name, element_id in (
            ("lang_switch", LANG_SWITCH_ID),
            ("breadcrumbs", BREADCRUMBS_ID),
            ("content_slot", CONTENT_SLOT_ID),
        ):
            element = document.get_element_by_id(element_id)
            if element is None:
                raise ShellLoadError(element_id, "required element missing from shell")
            required[name] = element

        return cls(
            hero_title=document.get_element_by_id(HERO_TITLE_ID),
            hero_tagline=document.get_element_by_id(HERO_TAGLINE_ID),
            hero_lede=document.get_element_by_id(HERO_LEDE_ID),
            footer_note=document.get_element_by_id(FOOTER_NOTE_ID),
            **required,
        )


@dataclass
class ShellContext:
    """Mutable state of one shell instance.

    Attributes:
        config: Deployment constants.
        document: Document the shell is mounted into.
        active_language: Language currently applied. Changes only after a
            locale bundle loaded and was applied.
        mounted: Whether the skeleton is mounted. Goes from False to True once.
        pending_language: Language requested before mounting, if any.
        elements: Slot references, set while mounting.
        generation: Token of the most recently started activation.
        applied_generation: Token of the most recent activation that applied
            its locale. Only an applied activation supersedes older ones.
    """

    config: SiteConfig
    document: Document
    active_language: str
    mounted: bool = False
    pending_language: Optional[str] = None
    elements: Optional[ShellElements] = None
    generation: int = 0
    applied_generation: int = 0

    def next_generation(self) -> int:
        self.generation += 1
        return self.generation

    def mark_applied(self, token: int) -> None:
        self.applied_generation = max(self.applied_generation, token)

    def is_superseded(self, token: int) -> bool:
        return token < self.applied_generation

    def mark_mounted(self, elements: ShellElements) -> None:
        if self.mounted:
            raise ShellAlreadyMountedError("Shell is already mounted")
        self.elements = elements
        self.mounted = True

    def take_pending(self) -> Optional[str]:
        language, self.pending_language = self.pending_language, None
        return language
