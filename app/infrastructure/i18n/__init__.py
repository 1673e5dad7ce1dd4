"""i18n system - language resolution and locale bundles.

Main components:
- models: SupportedLanguages, LocaleBundle and its sections
- resolvers: resolve_initial_language and LanguageResolver
- loader: LocaleLoader and FetchLocaleLoader
- exceptions: I18nError, LocaleLoadError
"""

from infrastructure.i18n.exceptions import I18nError, LocaleLoadError
from infrastructure.i18n.loader import FetchLocaleLoader, LocaleLoader
from infrastructure.i18n.models import (
    CardLink,
    LinkCard,
    LocaleBundle,
    SupportedLanguages,
)
from infrastructure.i18n.resolvers import LanguageResolver, resolve_initial_language

__all__ = [
    "SupportedLanguages",
    "LocaleBundle",
    "LinkCard",
    "CardLink",
    "LocaleLoader",
    "FetchLocaleLoader",
    "LanguageResolver",
    "resolve_initial_language",
    "I18nError",
    "LocaleLoadError",
]
