"""Wiring of the site shell components.

Usage:
    shell = SiteShell(
        document=Document.blank(),
        fetcher=RequestsFetcher(origin="https://example.org"),
        store=InMemoryPreferenceStore(),
        history=InMemoryHistory("https://example.org/it/"),
        scheduler=LoopFrameScheduler(),
        config=SiteConfig.from_settings(settings.site),
        browser_locale="it-IT",
    )
    await shell.start()
    await shell.activate_language("ru")
"""

from typing import Optional

from infrastructure.clients.http import Fetcher
from infrastructure.i18n.loader import FetchLocaleLoader, LocaleLoader
from infrastructure.i18n.resolvers import LanguageResolver
from infrastructure.operations import OperationResult
from modules.site_shell.bootstrap import ShellBootstrap
from modules.site_shell.browser import FrameScheduler, History, PreferenceStore
from modules.site_shell.context import ShellContext, SiteConfig
from modules.site_shell.dom import Document
from modules.site_shell.switch import SwitchController
from modules.site_shell.synchronizer import ContentSynchronizer, ErrorReporter
from modules.site_shell.url import UrlSynchronizer


class SiteShell:
    """One shell instance: context plus the components operating on it.

    Implements LanguageActivator; switch buttons and the bootstrap's
    pending dispatch come back through ``activate_language``.
    """

    def __init__(
        self,
        document: Document,
        fetcher: Fetcher,
        store: PreferenceStore,
        history: History,
        scheduler: FrameScheduler,
        config: SiteConfig,
        browser_locale: Optional[str] = None,
        loader: Optional[LocaleLoader] = None,
        error_reporter: Optional[ErrorReporter] = None,
    ):
        resolver = LanguageResolver(config.languages)
        initial = resolver.resolve_initial(
            history.location.pathname,
            store.get(config.preference_key),
            browser_locale,
        )
        self.context = ShellContext(
            config=config, document=document, active_language=initial
        )
        self.switch = SwitchController(self.context, self, scheduler)
        self.url_sync = UrlSynchronizer(history)
        self.synchronizer = ContentSynchronizer(
            context=self.context,
            loader=loader
            or FetchLocaleLoader(
                fetcher, locales_path=config.locales_path, base_path=config.base_path
            ),
            fetcher=fetcher,
            store=store,
            url_sync=self.url_sync,
            switch=self.switch,
            error_reporter=error_reporter,
        )
        self.bootstrap = ShellBootstrap(self.context, fetcher, self.switch, self)

    @property
    def active_language(self) -> str:
        return self.context.active_language

    async def activate_language(self, language: str) -> OperationResult:
        return await self.synchronizer.activate_language(language)

    async def start(self) -> None:
        """Request the initial language, then mount the shell.

        The request is deferred because the shell is not mounted yet; the
        mount dispatches it once the skeleton is in place.

        Raises:
            ShellLoadError: If the shell cannot be mounted.
        """
        await self.activate_language(self.context.active_language)
        await self.bootstrap.mount_shell()
