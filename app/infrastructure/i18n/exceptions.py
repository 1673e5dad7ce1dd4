"""Exceptions raised by the i18n layer."""

from typing import Optional


class I18nError(Exception):
    """Base exception for i18n errors."""

    pass


class LocaleLoadError(I18nError):
    """Raised when a language's locale bundle cannot be fetched or parsed.

    Recoverable: the previously applied language stays in place.

    Attributes:
        language: Language whose bundle failed to load.
        cause: Underlying fetch or validation error.
    """

    def __init__(self, language: str, cause: Optional[BaseException] = None):
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Failed to load locale {language!r}{detail}")
        self.language = language
        self.cause = cause
