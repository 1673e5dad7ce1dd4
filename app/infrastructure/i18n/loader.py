"""Locale bundle loading interface and implementations.

Defines the contract for loading a language's bundle and provides the
loader that fetches ``{locales_path}/{lang}.json`` through a Fetcher.
"""

from abc import ABC, abstractmethod
from typing import Dict

from pydantic import ValidationError

from infrastructure.clients.http import FetchError, Fetcher
from infrastructure.i18n.exceptions import LocaleLoadError
from infrastructure.i18n.models import LocaleBundle
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class LocaleLoader(ABC):
    """Abstract base for locale bundle loaders."""

    @abstractmethod
    async def load(self, language: str) -> LocaleBundle:
        """Load the bundle for a language.

        Args:
            language: Language code.

        Returns:
            Fully parsed LocaleBundle.

        Raises:
            LocaleLoadError: On any fetch, status or parse failure.
        """
        pass


class FetchLocaleLoader(LocaleLoader):
    """Loads locale bundles as JSON resources.

    All-or-nothing: a bundle that fails validation is rejected as a whole.

    Attributes:
        fetcher: Fetcher used for the JSON resource.
        locales_path: Resource directory of the bundles.
        use_cache: Whether parsed bundles are kept in memory.
        cache: Loaded bundles (language -> bundle).
    """

    def __init__(
        self,
        fetcher: Fetcher,
        locales_path: str = "/locales",
        base_path: str = "",
        use_cache: bool = False,
    ):
        self.fetcher = fetcher
        self.locales_path = locales_path
        self.base_path = base_path
        self.use_cache = use_cache
        self.cache: Dict[str, LocaleBundle] = {}

    def url_for(self, language: str) -> str:
        return f"{self.base_path}{self.locales_path}/{language}.json"

    async def load(self, language: str) -> LocaleBundle:
        if self.use_cache and language in self.cache:
            logger.info("locale_loaded_from_cache", language=language)
            return self.cache[language]

        url = self.url_for(language)
        try:
            data = await self.fetcher.fetch_json(url)
        except FetchError as e:
            logger.warning("locale_fetch_failed", language=language, url=url, error=str(e))
            raise LocaleLoadError(language, e) from e

        if not isinstance(data, dict):
            error = TypeError(f"expected a JSON object, got {type(data).__name__}")
            logger.warning("locale_parse_failed", language=language, error=str(error))
            raise LocaleLoadError(language, error)

        try:
            bundle = LocaleBundle.model_validate(data)
        except ValidationError as e:
            logger.warning(
                "locale_parse_failed",
                language=language,
                error_count=e.error_count(),
            )
            raise LocaleLoadError(language, e) from e

        logger.info("locale_loaded", language=language, url=url)

        if self.use_cache:
            self.cache[language] = bundle

        return bundle

    def clear_cache(self) -> None:
        """Clear all cached bundles."""
        self.cache.clear()
        logger.info("cleared_locale_cache")
