"""Headless run of the site shell.

Boots the shell against a site origin (or a local site directory), applies
the resolved language, optionally switches to another one, and prints the
resulting address and document.

Example:
    python main.py --site-dir ./public --path /it/ --switch-to ru
"""

import argparse
import asyncio
import sys
from pathlib import Path

from dotenv import load_dotenv

from infrastructure.clients.http import DirectoryFetcher, RequestsFetcher
from infrastructure.configuration import settings
from infrastructure.logging import get_module_logger
from modules.site_shell import (
    Document,
    InMemoryHistory,
    InMemoryPreferenceStore,
    LoopFrameScheduler,
    ShellLoadError,
    SiteConfig,
    SiteShell,
)

load_dotenv()

logger = get_module_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render the site shell headlessly")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--site-dir", type=Path, help="Serve resources from a directory")
    source.add_argument("--origin", help="Fetch resources from this origin")
    parser.add_argument("--path", default="/", help="Address path at page load")
    parser.add_argument("--browser-locale", default=None, help="Browser locale, e.g. it-IT")
    parser.add_argument("--stored-lang", default=None, help="Previously stored preference")
    parser.add_argument("--switch-to", default=None, help="Language to switch to after start")
    return parser


async def run(args: argparse.Namespace) -> int:
    config = SiteConfig.from_settings(settings.site)
    origin = args.origin or settings.http.origin
    if args.site_dir:
        fetcher = DirectoryFetcher(args.site_dir)
    else:
        fetcher = RequestsFetcher(
            origin=origin,
            timeout=settings.http.timeout_seconds,
            user_agent=settings.http.user_agent,
        )

    store = InMemoryPreferenceStore()
    if args.stored_lang:
        store.set(config.preference_key, args.stored_lang)

    history = InMemoryHistory(origin.rstrip("/") + args.path)
    shell = SiteShell(
        document=Document.blank(config.mount_point_id),
        fetcher=fetcher,
        store=store,
        history=history,
        scheduler=LoopFrameScheduler(),
        config=config,
        browser_locale=args.browser_locale,
    )

    try:
        await shell.start()
    except ShellLoadError as e:
        logger.error("shell_startup_failed", error=str(e))
        return 1

    if args.switch_to:
        result = await shell.activate_language(args.switch_to)
        logger.info("switch_completed", status=result.status.value)

    print(history.location.href)
    print(shell.context.document.to_html())
    return 0


def main() -> int:
    args = build_parser().parse_args()
    logger.info("application_startup", git_sha=settings.GIT_SHA)
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
