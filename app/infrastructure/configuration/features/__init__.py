"""Feature settings __init__ - exports all feature settings."""

from infrastructure.configuration.features.site_shell import SiteShellSettings

__all__ = ["SiteShellSettings"]
