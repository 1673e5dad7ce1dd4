"""Custom exceptions for the site shell.

Severity by type:
    ShellLoadError: fatal, the skeleton could not be mounted
    ContentFragmentError: recoverable, only the content slot is cleared
    UrlSyncError: ignorable, logged and never propagated
"""

from typing import Optional


class SiteShellError(Exception):
    """Base exception for all site shell errors.

    Example:
        try:
            await shell.start()
        except SiteShellError as e:
            logger.error("shell_error", error=str(e))
    """

    pass


class ShellLoadError(SiteShellError):
    """Raised when the shell skeleton cannot be fetched, parsed or mounted.

    Propagates out of startup: no page is usable without the shell.

    Attributes:
        resource: Resource path or element id that failed.
        cause: Underlying exception, if any.
    """

    def __init__(
        self, resource: str, message: str, cause: Optional[BaseException] = None
    ):
        super().__init__(f"Shell load failed ({resource}): {message}")
        self.resource = resource
        self.cause = cause


class ShellAlreadyMountedError(SiteShellError):
    """Raised when the shell is mounted a second time."""

    pass


class ContentFragmentError(SiteShellError):
    """Raised when a page content fragment cannot be fetched.

    Attributes:
        page_id: Page whose fragment failed.
        language: Language of the fragment.
        cause: Underlying exception.
    """

    def __init__(
        self, page_id: str, language: str, cause: Optional[BaseException] = None
    ):
        super().__init__(f"Content fragment {page_id}-{language} failed: {cause}")
        self.page_id = page_id
        self.language = language
        self.cause = cause


class UrlSyncError(SiteShellError):
    """Raised when the history entry cannot be rewritten.

    Attributes:
        url: URL that was being written.
        cause: Underlying exception.
    """

    def __init__(self, url: str, cause: Optional[BaseException] = None):
        super().__init__(f"Failed to replace history entry with {url}: {cause}")
        self.url = url
        self.cause = cause
