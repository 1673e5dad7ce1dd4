"""Language and locale bundle models.

Defines the supported language set and the structure of a locale bundle
as served from ``/locales/{lang}.json``.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


@dataclass(frozen=True)
class SupportedLanguages:
    """Ordered, fixed set of language codes plus the default language.

    Membership checks accept any value; non-strings are never members.

    Attributes:
        codes: Language codes in display order.
        default: Language used when nothing else resolves.
    """

    codes: tuple
    default: str

    def __post_init__(self):
        if not self.codes:
            raise ValueError("At least one supported language is required")
        if len(set(self.codes)) != len(self.codes):
            raise ValueError(f"Duplicate language codes: {self.codes}")
        if self.default not in self.codes:
            raise ValueError(f"Default language {self.default!r} is not supported")

    @classmethod
    def of(cls, codes: Sequence[str], default: Optional[str] = None) -> "SupportedLanguages":
        """Build a set from a sequence; default is the first code unless given."""
        codes = tuple(codes)
        return cls(codes=codes, default=default or (codes[0] if codes else ""))

    def __contains__(self, value: Any) -> bool:
        return isinstance(value, str) and value in self.codes

    def __iter__(self) -> Iterator[str]:
        return iter(self.codes)

    def __len__(self) -> int:
        return len(self.codes)


class BundleModel(BaseModel):
    """Base for locale bundle sections: unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


def _none_as_empty(value: Any) -> Any:
    """A null list is an empty list; null entries inside it are skipped."""
    if value is None:
        return []
    if isinstance(value, list):
        return [item for item in value if item is not None]
    return value


class LocaleMeta(BundleModel):
    lang: Optional[str] = None
    dir: Optional[str] = None


class HeroText(BundleModel):
    title: Optional[str] = None
    tagline: Optional[str] = None
    lede: Optional[str] = None


class FooterText(BundleModel):
    note: Optional[str] = None


class CardLink(BundleModel):
    label: Optional[str] = ""
    href: Optional[str] = ""


class LinkCard(BundleModel):
    title: Optional[str] = ""
    links: List[CardLink] = Field(default_factory=list)

    @field_validator("links", mode="before")
    @classmethod
    def _null_links(cls, value: Any) -> Any:
        return _none_as_empty(value)


class Sections(BundleModel):
    links_title: Optional[str] = Field(default=None, alias="linksTitle")
    cards: List[LinkCard] = Field(default_factory=list)

    @field_validator("cards", mode="before")
    @classmethod
    def _null_cards(cls, value: Any) -> Any:
        return _none_as_empty(value)


class LocaleBundle(BundleModel):
    """Parsed locale bundle. Every section is optional.

    Example payload:
        {
            "meta": {"lang": "it", "dir": "ltr"},
            "hero": {"title": "...", "tagline": "...", "lede": "..."},
            "footer": {"note": "..."},
            "breadcrumbs": {"home": "Inizio"},
            "slugs": {"home": "inizio"},
            "sections": {"linksTitle": "...", "cards": [{"title": "...", "links": [...]}]}
        }
    """

    meta: LocaleMeta = Field(default_factory=LocaleMeta)
    hero: HeroText = Field(default_factory=HeroText)
    footer: FooterText = Field(default_factory=FooterText)
    breadcrumbs: Dict[str, Optional[str]] = Field(default_factory=dict)
    slugs: Dict[str, Optional[str]] = Field(default_factory=dict)
    sections: Sections = Field(default_factory=Sections)

    @model_validator(mode="before")
    @classmethod
    def _drop_null_sections(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    def slug_for(self, page_id: str) -> str:
        """Slug of a page in this language, or the page id itself."""
        return self.slugs.get(page_id) or page_id

    def breadcrumb_label(self, page_id: str, default_page_id: str, fallback: str) -> str:
        """Breadcrumb label: page label, then default page label, then fallback."""
        return (
            self.breadcrumbs.get(page_id)
            or self.breadcrumbs.get(default_page_id)
            or fallback
        )
