"""Site shell feature settings."""

from typing import Dict, List

from pydantic import Field, model_validator

from infrastructure.configuration.base import FeatureSettings

DEFAULT_LANGUAGES = ["en", "cs", "pt", "it", "ru"]


class SiteShellSettings(FeatureSettings):
    """Deployment constants for the multilingual site shell.

    Environment Variables:
        SITE_SUPPORTED_LANGUAGES: JSON list of language codes, in switch order
        SITE_DEFAULT_LANGUAGE: Language used when nothing else resolves (default: en)
        SITE_CONTENT_PAGE: Page id rendered by this shell (default: home)
        SITE_DEFAULT_PAGE_ID: Page id whose breadcrumb label is the fallback
        SITE_BREADCRUMB_FALLBACK: Literal breadcrumb label (default: Home)
        SITE_PRODUCT_TITLE: Document title when the bundle has no hero title
        SITE_BASE_PATH: Prefix for every fetched resource (default: "")
        SITE_TEMPLATE_PATH: Shell markup resource (default: /template.html)
        SITE_TEMPLATE_ID: Id of the <template> holding the shell (default: site-shell)
        SITE_MOUNT_POINT_ID: Id of the element receiving the shell (default: app)
        SITE_LOCALES_PATH: Directory of locale bundles (default: /locales)
        SITE_CONTENT_PATH: Directory of content fragments (default: /content)
        SITE_PREFERENCE_KEY: Storage key of the preferred language
        SITE_LINK_SEPARATOR: Text placed between links of a card
        SITE_INDICATOR_INSET: Horizontal inset of the switch indicator in px
        SITE_SWITCH_LABELS: JSON object of language code -> button label
        SITE_DISCARD_STALE_LOADS: Drop results of superseded activations

    Example:
        ```python
        from infrastructure.configuration import settings

        languages = settings.site.supported_languages
        ```
    """

    supported_languages: List[str] = Field(
        default_factory=lambda: list(DEFAULT_LANGUAGES),
        alias="SITE_SUPPORTED_LANGUAGES",
    )
    default_language: str = Field(default="en", alias="SITE_DEFAULT_LANGUAGE")
    content_page: str = Field(default="home", alias="SITE_CONTENT_PAGE")
    default_page_id: str = Field(default="home", alias="SITE_DEFAULT_PAGE_ID")
    breadcrumb_fallback: str = Field(default="Home", alias="SITE_BREADCRUMB_FALLBACK")
    product_title: str = Field(default="Rove Monteux", alias="SITE_PRODUCT_TITLE")
    base_path: str = Field(default="", alias="SITE_BASE_PATH")
    template_path: str = Field(default="/template.html", alias="SITE_TEMPLATE_PATH")
    template_id: str = Field(default="site-shell", alias="SITE_TEMPLATE_ID")
    mount_point_id: str = Field(default="app", alias="SITE_MOUNT_POINT_ID")
    locales_path: str = Field(default="/locales", alias="SITE_LOCALES_PATH")
    content_path: str = Field(default="/content", alias="SITE_CONTENT_PATH")
    preference_key: str = Field(default="preferredLang", alias="SITE_PREFERENCE_KEY")
    link_separator: str = Field(default=" · ", alias="SITE_LINK_SEPARATOR")
    indicator_inset: float = Field(default=6, alias="SITE_INDICATOR_INSET")
    switch_labels: Dict[str, str] = Field(
        default_factory=dict,
        alias="SITE_SWITCH_LABELS",
        description="Button labels per language; upper-cased code when absent",
    )
    discard_stale_loads: bool = Field(
        default=True,
        alias="SITE_DISCARD_STALE_LOADS",
        description="Discard results of activations superseded by a newer one",
    )

    @model_validator(mode="after")
    def _check_languages(self) -> "SiteShellSettings":
        if not self.supported_languages:
            raise ValueError("SITE_SUPPORTED_LANGUAGES must not be empty")
        if len(set(self.supported_languages)) != len(self.supported_languages):
            raise ValueError("SITE_SUPPORTED_LANGUAGES contains duplicates")
        if self.default_language not in self.supported_languages:
            raise ValueError(
                f"SITE_DEFAULT_LANGUAGE {self.default_language!r} "
                "is not a supported language"
            )
        return self
