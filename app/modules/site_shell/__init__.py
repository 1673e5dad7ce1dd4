"""Site shell - headless loader for the multilingual site skeleton.

Mounts the shared shell, resolves the active language and keeps document
metadata, hero, footer, breadcrumbs, language switch and address in step
with it.
"""

from modules.site_shell.browser import (
    InMemoryHistory,
    InMemoryPreferenceStore,
    LoopFrameScheduler,
    QueuedFrameScheduler,
)
from modules.site_shell.context import ShellContext, SiteConfig
from modules.site_shell.dom import Document, Element, parse_html_fragment
from modules.site_shell.exceptions import (
    ContentFragmentError,
    ShellAlreadyMountedError,
    ShellLoadError,
    SiteShellError,
    UrlSyncError,
)
from modules.site_shell.shell import SiteShell

__all__ = [
    "SiteShell",
    "SiteConfig",
    "ShellContext",
    "Document",
    "Element",
    "parse_html_fragment",
    "InMemoryHistory",
    "InMemoryPreferenceStore",
    "LoopFrameScheduler",
    "QueuedFrameScheduler",
    "SiteShellError",
    "ShellLoadError",
    "ShellAlreadyMountedError",
    "ContentFragmentError",
    "UrlSyncError",
]
