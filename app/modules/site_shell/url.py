"""Keeps the address bar in step with the applied language."""

from infrastructure.logging import get_module_logger
from modules.site_shell.browser import History
from modules.site_shell.exceptions import UrlSyncError
from modules.site_shell.ui_state import page_path

logger = get_module_logger()


class UrlSynchronizer:
    """Rewrites the current history entry to ``/{lang}/{slug}/``."""

    def __init__(self, history: History):
        self.history = history

    def sync_url(self, language: str, slug: str) -> bool:
        """Replace the current entry, keeping query string and fragment.

        Never raises; a failure is logged and reported as ``False``.
        """
        url = page_path(language, slug)
        try:
            location = self.history.location
            url = f"{location.origin}{url}{location.search}{location.hash}"
            self.history.replace_state({"lang": language}, url)
        except Exception as e:
            error = UrlSyncError(url, e)
            logger.warning("url_sync_failed", language=language, url=url, error=str(error))
            return False
        logger.debug("url_synced", language=language, url=url)
        return True
