"""Language activation: load a locale, apply it, then load the page content.

Ordering per activation:

1. Unsupported language -> REJECTED, nothing fetched.
2. Shell not mounted -> recorded as pending (last request wins), DEFERRED.
3. Locale bundle fetched. On failure nothing changes -> FAILED.
4. Chrome applied, preference stored, active language set, URL rewritten,
   switch updated.
5. Content fragment fetched and injected. On failure the content slot is
   cleared and the chrome stays -> PARTIAL.

With ``discard_stale_loads`` each activation takes a generation token and
drops its results after any fetch once a newer activation has applied its
locale. A newer activation whose locale fails supersedes nothing.
"""

from typing import Callable, Optional

from infrastructure.clients.http import FetchError, Fetcher
from infrastructure.i18n.exceptions import LocaleLoadError
from infrastructure.i18n.loader import LocaleLoader
from infrastructure.logging import bind_activation_context, get_module_logger
from infrastructure.operations import OperationResult, OperationStatus
from modules.site_shell.browser import PreferenceStore
from modules.site_shell.context import ShellContext
from modules.site_shell.exceptions import ContentFragmentError
from modules.site_shell.renderer import ShellRenderer
from modules.site_shell.switch import SwitchController
from modules.site_shell.ui_state import UiState, build_ui_state
from modules.site_shell.url import UrlSynchronizer

logger = get_module_logger()

ErrorReporter = Callable[[Exception], None]


class ContentSynchronizer:
    def __init__(
        self,
        context: ShellContext,
        loader: LocaleLoader,
        fetcher: Fetcher,
        store: PreferenceStore,
        url_sync: UrlSynchronizer,
        switch: SwitchController,
        error_reporter: Optional[ErrorReporter] = None,
    ):
        self.context = context
        self.loader = loader
        self.fetcher = fetcher
        self.store = store
        self.url_sync = url_sync
        self.switch = switch
        self.renderer = ShellRenderer(context)
        self.error_reporter = error_reporter

    def _report(self, error: Exception) -> None:
        if self.error_reporter is not None:
            self.error_reporter(error)

    def _is_stale(self, token: int) -> bool:
        return self.context.config.discard_stale_loads and self.context.is_superseded(
            token
        )

    async def activate_language(self, language: str) -> OperationResult:
        """Switch the shell to ``language``.

        Returns:
            OperationResult describing what happened; errors are never raised.
        """
        if language not in self.context.config.languages:
            logger.warning("activation_rejected", language=language)
            return OperationResult.error(
                OperationStatus.REJECTED,
                f"Unsupported language: {language!r}",
                error_code="unsupported_language",
            )

        if not self.context.mounted:
            self.context.pending_language = language
            logger.info("activation_deferred", language=language)
            return OperationResult.error(
                OperationStatus.DEFERRED, "Shell not mounted yet", data=language
            )

        token = self.context.next_generation()
        with bind_activation_context(language=language, generation=token):
            return await self._activate(language, token)

    async def _activate(self, language: str, token: int) -> OperationResult:
        try:
            bundle = await self.loader.load(language)
        except LocaleLoadError as e:
            logger.error("locale_load_failed", error=str(e))
            self._report(e)
            return OperationResult.error(
                OperationStatus.FAILED, str(e), error_code="locale_load_failed"
            )

        if self._is_stale(token):
            logger.info("activation_superseded", stage="locale")
            return self._superseded()

        self.context.mark_applied(token)
        state = build_ui_state(bundle, language, self.context.config)
        self.renderer.apply_chrome(state)
        self.store.set(self.context.config.preference_key, language)
        self.context.active_language = language
        self.url_sync.sync_url(language, state.slug)
        self.switch.set_active(language)
        logger.info("locale_applied", slug=state.slug)

        return await self._load_content(language, state, token)

    async def _load_content(
        self, language: str, state: UiState, token: int
    ) -> OperationResult:
        config = self.context.config
        try:
            markup = await self.fetcher.fetch_text(config.content_url(language))
        except FetchError as e:
            error = ContentFragmentError(config.page_id, language, e)
            if self._is_stale(token):
                logger.info("activation_superseded", stage="content")
                return self._superseded()
            logger.error("content_fragment_failed", error=str(error))
            self._report(error)
            self.renderer.clear_content()
            return OperationResult.error(
                OperationStatus.PARTIAL,
                str(error),
                error_code="content_fragment_failed",
                data=language,
            )

        if self._is_stale(token):
            logger.info("activation_superseded", stage="content")
            return self._superseded()

        self.renderer.inject_content(markup, state)
        logger.info("content_applied", card_count=len(state.cards))
        return OperationResult.success(data=language, message="language activated")

    def _superseded(self) -> OperationResult:
        return OperationResult.error(
            OperationStatus.SUPERSEDED, "A newer activation started"
        )
