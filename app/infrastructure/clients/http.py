"""Resource fetchers for the site shell.

The shell needs two capabilities from the network: fetch a resource as
text and fetch a resource as JSON. Both are asynchronous; every fetch is
a suspension point of the event loop.

Implementations:
    RequestsFetcher: HTTP GETs against a site origin with a pooled
        requests session, run off the event loop.
    DirectoryFetcher: serves resource paths from a static site directory.

Usage:
    from infrastructure.clients.http import RequestsFetcher

    fetcher = RequestsFetcher(origin="https://example.org")
    markup = await fetcher.fetch_text("/template.html")
    bundle = await fetcher.fetch_json("/locales/it.json")
"""

import asyncio
import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional
from urllib.parse import urljoin

import requests
import structlog

logger = structlog.get_logger(__name__)


class FetchError(Exception):
    """Raised when a resource cannot be fetched or decoded.

    Attributes:
        url: Resource path or URL that was requested.
        status_code: HTTP status when the server answered with a non-success code.
        cause: Underlying exception, if any.
    """

    def __init__(
        self,
        url: str,
        message: str,
        status_code: Optional[int] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(f"{url}: {message}")
        self.url = url
        self.status_code = status_code
        self.cause = cause


class Fetcher(ABC):
    """Asynchronous resource fetching capability."""

    @abstractmethod
    async def fetch_text(self, url: str) -> str:
        """Fetch a resource body as text.

        Raises:
            FetchError: On transport failure or non-success status.
        """

    async def fetch_json(self, url: str) -> Any:
        """Fetch a resource body and decode it as JSON.

        Raises:
            FetchError: On transport failure, non-success status or invalid JSON.
        """
        body = await self.fetch_text(url)
        try:
            return json.loads(body)
        except ValueError as e:
            raise FetchError(url, f"invalid JSON: {e}", cause=e) from e


class RequestsFetcher(Fetcher):
    """Fetches resources over HTTP from a site origin.

    Attributes:
        origin: Base URL resource paths are resolved against.
        timeout: Per-request timeout in seconds.
    """

    def __init__(
        self,
        origin: str = "http://localhost:8000",
        timeout: float = 10,
        user_agent: str = "Site-Shell-Loader/1.0",
        session: Optional[requests.Session] = None,
    ) -> None:
        self.origin = origin
        self.timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update({"User-Agent": user_agent})
        self._logger = logger.bind(component="requests_fetcher", origin=origin)

    async def fetch_text(self, url: str) -> str:
        return await asyncio.to_thread(self._get_text, url)

    def _get_text(self, url: str) -> str:
        full_url = urljoin(self.origin, url)
        try:
            response = self._session.get(full_url, timeout=self.timeout)
        except requests.RequestException as e:
            self._logger.warning("fetch_transport_error", url=full_url, error=str(e))
            raise FetchError(url, f"request failed: {e}", cause=e) from e

        if not response.ok:
            self._logger.warning(
                "fetch_unsuccessful_status",
                url=full_url,
                status_code=response.status_code,
            )
            raise FetchError(
                url,
                f"HTTP {response.status_code}",
                status_code=response.status_code,
            )

        self._logger.debug("fetch_completed", url=full_url, size=len(response.text))
        return response.text

    def close(self) -> None:
        """Close the underlying session."""
        self._session.close()


class DirectoryFetcher(Fetcher):
    """Serves resource paths from a static site directory.

    A path such as ``/locales/it.json`` maps to ``<root>/locales/it.json``.
    Missing files behave like a 404 response.
    """

    def __init__(self, root: Path) -> None:
        self.root = Path(root).resolve()
        if not self.root.is_dir():
            raise ValueError(f"Site directory not found: {self.root}")

    async def fetch_text(self, url: str) -> str:
        return await asyncio.to_thread(self._read, url)

    def _read(self, url: str) -> str:
        path = (self.root / url.split("?", 1)[0].lstrip("/")).resolve()
        if self.root not in path.parents or not path.is_file():
            raise FetchError(url, "not found", status_code=404)
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise FetchError(url, f"unreadable: {e}", cause=e) from e
