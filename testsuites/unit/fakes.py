"""
In-memory stand-ins for a browser session and its element handles.

They record every call so tests can assert on what the page object did
without launching a browser.
"""

from typing import Any, Callable, Dict, List, Optional

from pagedrops.framework.errors import WaitTimeoutError


class FakeElement:
    def __init__(self, kind: Any = "text_field", present: bool = True):
        self._kind = kind
        self.present = present
        self.calls: List[tuple] = []

    def kind(self):
        return self._kind

    def set(self, value=None):
        self.calls.append(("set", value))

    def clear(self):
        self.calls.append(("clear",))

    def select(self, value):
        self.calls.append(("select", value))

    def click(self):
        self.calls.append(("click",))

    def is_present(self):
        return self.present


class FakeSession:
    """
    Session whose ``wait_until`` polls a fixed number of times instead of
    sleeping, then raises WaitTimeoutError.
    """

    capabilities = frozenset({
        "navigate",
        "current_url",
        "current_title",
        "wait_until",
        "element",
        "elements",
        "refresh",
    })

    def __init__(
        self,
        url: str = "about:blank",
        title: str = "",
        elements: Optional[Dict[str, FakeElement]] = None,
        redirects: Optional[Dict[str, str]] = None,
        max_polls: int = 3,
    ):
        self.url = url
        self.title = title
        self._elements = elements or {}
        self.redirects = redirects or {}
        self.max_polls = max_polls
        self.visited: List[str] = []
        self.waits: List[Optional[str]] = []
        self.refreshed = 0

    def navigate(self, url: str) -> None:
        self.visited.append(url)
        self.url = self.redirects.get(url, url)

    def current_url(self) -> str:
        return self.url

    def current_title(self) -> str:
        return self.title

    def wait_until(
        self,
        predicate: Callable[[], Any],
        timeout: Optional[float] = None,
        interval: Optional[float] = None,
        message: Optional[str] = None,
    ) -> bool:
        self.waits.append(message)
        for _ in range(self.max_polls):
            if predicate():
                return True
        raise WaitTimeoutError(f"Timed out waiting for: {message}")

    def element(self, selector: str) -> FakeElement:
        return self._elements.setdefault(selector, FakeElement())

    def elements(self, selector: str) -> List[FakeElement]:
        return [
            handle for key, handle in self._elements.items()
            if key.startswith(selector)
        ]

    def refresh(self) -> None:
        self.refreshed += 1

    def debug_dump(self) -> str:
        """Public but not an advertised capability."""
        return "dump"
