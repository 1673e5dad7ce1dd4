"""Browser capabilities used by the shell, with in-memory implementations.

- PreferenceStore: persisted key-value preferences (local storage)
- History: current location and history entry replacement
- FrameScheduler: "next render opportunity" callbacks
"""

import asyncio
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple
from urllib.parse import urlsplit


class PreferenceStore(ABC):
    """Persisted key-value preferences."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        pass


class InMemoryPreferenceStore(PreferenceStore):
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value


@dataclass(frozen=True)
class Location:
    """Parts of the current address.

    ``search`` keeps its leading "?" and ``hash`` its leading "#".
    """

    origin: str = ""
    pathname: str = "/"
    search: str = ""
    hash: str = ""

    @classmethod
    def from_url(cls, url: str) -> "Location":
        parts = urlsplit(url)
        origin = f"{parts.scheme}://{parts.netloc}" if parts.netloc else ""
        return cls(
            origin=origin,
            pathname=parts.path or "/",
            search=f"?{parts.query}" if parts.query else "",
            hash=f"#{parts.fragment}" if parts.fragment else "",
        )

    @property
    def href(self) -> str:
        return f"{self.origin}{self.pathname}{self.search}{self.hash}"


class History(ABC):
    """Session history of the page."""

    @property
    @abstractmethod
    def location(self) -> Location:
        pass

    @abstractmethod
    def replace_state(self, state: Any, url: str) -> None:
        """Replace the current entry; no navigation, no new entry."""
        pass


class InMemoryHistory(History):
    """History with a single current entry, rewritten in place."""

    def __init__(self, url: str = "http://localhost/"):
        self._location = Location.from_url(url)
        self.state: Any = None
        self.replacements: List[Tuple[Any, str]] = []

    @property
    def location(self) -> Location:
        return self._location

    def replace_state(self, state: Any, url: str) -> None:
        self._location = Location.from_url(url)
        self.state = state
        self.replacements.append((state, url))


class FrameScheduler(ABC):
    """Runs callbacks at the next render opportunity."""

    @abstractmethod
    def request_frame(self, callback: Callable[[], Any]) -> None:
        pass


class QueuedFrameScheduler(FrameScheduler):
    """Queues callbacks until ``flush()`` is called."""

    def __init__(self):
        self.queue: List[Callable[[], Any]] = []

    def request_frame(self, callback: Callable[[], Any]) -> None:
        self.queue.append(callback)

    def flush(self) -> int:
        """Run every queued callback, including ones queued while flushing."""
        ran = 0
        while self.queue:
            callback = self.queue.pop(0)
            callback()
            ran += 1
        return ran


class LoopFrameScheduler(FrameScheduler):
    """Schedules callbacks on the running event loop."""

    def request_frame(self, callback: Callable[[], Any]) -> None:
        asyncio.get_running_loop().call_soon(callback)
