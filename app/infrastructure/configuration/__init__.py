"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the site
shell using Pydantic BaseSettings with domain-based organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    SiteShellSettings: Site shell feature settings class
    HttpClientSettings: Resource client settings class

Example:
    ```python
    from infrastructure.configuration import settings

    languages = settings.site.supported_languages
    origin = settings.http.origin
    ```
"""

from infrastructure.configuration.settings import Settings, settings
from infrastructure.configuration.features import SiteShellSettings
from infrastructure.configuration.infrastructure import HttpClientSettings

__all__ = ["Settings", "settings", "SiteShellSettings", "HttpClientSettings"]
