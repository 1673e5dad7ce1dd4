"""Clients used by the site shell to reach its resources."""

from infrastructure.clients.http import (
    DirectoryFetcher,
    FetchError,
    Fetcher,
    RequestsFetcher,
)

__all__ = ["Fetcher", "FetchError", "RequestsFetcher", "DirectoryFetcher"]
