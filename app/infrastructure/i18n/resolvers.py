"""Initial language resolution.

Determines the language the shell starts in from the signals available at
page load: the URL path, the stored preference and the browser locale.
"""

from typing import Optional

from infrastructure.i18n.models import SupportedLanguages
from infrastructure.logging import get_module_logger

logger = get_module_logger()

SOURCE_PATH = "path"
SOURCE_STORED = "stored_preference"
SOURCE_BROWSER = "browser_locale"
SOURCE_DEFAULT = "default"


def first_path_segment(url_path: Optional[str]) -> Optional[str]:
    """Return the first non-empty segment of a URL path, if any."""
    if not url_path:
        return None
    for segment in url_path.split("/"):
        if segment:
            return segment
    return None


def browser_language(browser_locale: Optional[str]) -> Optional[str]:
    """Return the 2-letter language prefix of a browser locale ("pt-BR" -> "pt")."""
    if not browser_locale:
        return None
    return browser_locale[:2].lower()


def resolve_with_source(
    url_path: Optional[str],
    stored_preference: Optional[str],
    browser_locale: Optional[str],
    supported: SupportedLanguages,
) -> tuple:
    """Resolve the initial language and report which signal decided it.

    Returns:
        Tuple of (language, source).
    """
    candidate = first_path_segment(url_path)
    if candidate in supported:
        return candidate, SOURCE_PATH
    if stored_preference in supported:
        return stored_preference, SOURCE_STORED
    candidate = browser_language(browser_locale)
    if candidate in supported:
        return candidate, SOURCE_BROWSER
    return supported.default, SOURCE_DEFAULT


def resolve_initial_language(
    url_path: Optional[str],
    stored_preference: Optional[str],
    browser_locale: Optional[str],
    supported: SupportedLanguages,
) -> str:
    """Resolve the language the shell starts in.

    Precedence, first supported match wins:
    1. First segment of the URL path
    2. Stored preference
    3. 2-letter prefix of the browser locale
    4. Default language of the supported set

    Always returns a member of ``supported``.
    """
    language, _ = resolve_with_source(
        url_path, stored_preference, browser_locale, supported
    )
    return language


class LanguageResolver:
    """Resolves the initial language for a set of supported languages."""

    def __init__(self, supported: SupportedLanguages):
        self.supported = supported
        self.log = logger.bind(default_language=supported.default)

    def resolve_initial(
        self,
        url_path: Optional[str],
        stored_preference: Optional[str] = None,
        browser_locale: Optional[str] = None,
    ) -> str:
        """Resolve the initial language and log the deciding signal."""
        language, source = resolve_with_source(
            url_path, stored_preference, browser_locale, self.supported
        )
        self.log.info("initial_language_resolved", language=language, source=source)
        return language
