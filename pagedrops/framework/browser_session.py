"""
================================================================================
Browser Session
================================================================================

The capability interface page objects talk to, plus a Playwright adapter.

Provides:
    - BrowserSession / ElementHandle protocols (what a driver must offer)
    - ElementKind: runtime kind reported by an element handle
    - PlaywrightSession: navigation, lookup and fixed-interval polling waits
      on top of a Playwright sync ``Page``
    - PlaywrightElement: ElementHandle over a Playwright ``Locator``

The session is owned by the caller. Nothing here launches or closes a browser.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import time
from enum import Enum
from typing import Any, Callable, FrozenSet, List, Optional, Protocol, runtime_checkable

import allure
from loguru import logger
from playwright.sync_api import Locator, Page

from pagedrops.common.config_loader import get_config
from .errors import WaitTimeoutError


class ElementKind(str, Enum):
    """Kind of an element as reported by the driver at call time."""

    RADIO = "radio"
    CHECKBOX = "checkbox"
    SELECT = "select"
    BUTTON = "button"
    TEXT_FIELD = "text_field"
    TEXT_AREA = "text_area"
    GENERIC = "generic"


@runtime_checkable
class ElementHandle(Protocol):
    """A freshly resolved element."""

    def kind(self) -> ElementKind: ...

    def set(self, value: Any = None) -> None: ...

    def clear(self) -> None: ...

    def select(self, value: Any) -> None: ...

    def click(self) -> None: ...

    def is_present(self) -> bool: ...


@runtime_checkable
class BrowserSession(Protocol):
    """
    Everything a page object needs from the driver.

    ``capabilities`` enumerates the attribute names a page object may forward
    to the session on behalf of its callers.
    """

    capabilities: FrozenSet[str]

    def navigate(self, url: str) -> None: ...

    def current_url(self) -> str: ...

    def current_title(self) -> str: ...

    def wait_until(
        self,
        predicate: Callable[[], Any],
        timeout: Optional[float] = None,
        interval: Optional[float] = None,
        message: Optional[str] = None,
    ) -> bool: ...

    def element(self, selector: str) -> ElementHandle: ...

    def elements(self, selector: str) -> List[ElementHandle]: ...


# input[type] values that are not typed into
_NON_TEXT_INPUT_TYPES = frozenset({
    "button", "checkbox", "color", "file", "hidden",
    "image", "radio", "range", "reset", "submit",
})

_BUTTON_INPUT_TYPES = frozenset({"button", "image", "reset", "submit"})

_DESCRIBE_ELEMENT_JS = """
el => [el.tagName.toLowerCase(), (el.getAttribute('type') || '').toLowerCase()]
"""


def classify_element(tag: str, input_type: str = "") -> ElementKind:
    """
    Map a tag name and ``type`` attribute to an ElementKind.

    Args:
        tag: Lower-case tag name (e.g. "input")
        input_type: Lower-case ``type`` attribute, empty if absent

    Returns:
        The matching ElementKind (GENERIC when nothing more specific fits)
    """
    if tag == "select":
        return ElementKind.SELECT
    if tag == "textarea":
        return ElementKind.TEXT_AREA
    if tag == "button":
        return ElementKind.BUTTON
    if tag == "input":
        if input_type == "radio":
            return ElementKind.RADIO
        if input_type == "checkbox":
            return ElementKind.CHECKBOX
        if input_type in _BUTTON_INPUT_TYPES:
            return ElementKind.BUTTON
        if input_type not in _NON_TEXT_INPUT_TYPES:
            return ElementKind.TEXT_FIELD
    return ElementKind.GENERIC


class PlaywrightElement:
    """
    ElementHandle backed by a Playwright Locator.

    Usage:
        >>> handle = session.element("#username")
        >>> handle.kind()
        <ElementKind.TEXT_FIELD: 'text_field'>
        >>> handle.set("demo_user")
    """

    def __init__(self, locator: Locator, description: str = ""):
        self.locator = locator
        self.description = description or str(locator)

    def kind(self) -> ElementKind:
        tag, input_type = self.locator.evaluate(_DESCRIBE_ELEMENT_JS)
        return classify_element(tag, input_type)

    def set(self, value: Any = None) -> None:
        """Check a radio/checkbox, otherwise fill with ``value``."""
        if self.kind() in (ElementKind.RADIO, ElementKind.CHECKBOX):
            logger.debug(f"Checking: {self.description}")
            self.locator.check()
        else:
            logger.debug(f"Filling: {self.description}")
            self.locator.fill("" if value is None else str(value))

    def clear(self) -> None:
        """Uncheck a checkbox, otherwise empty the field."""
        if self.kind() == ElementKind.CHECKBOX:
            logger.debug(f"Unchecking: {self.description}")
            self.locator.uncheck()
        else:
            logger.debug(f"Clearing: {self.description}")
            self.locator.clear()

    def select(self, value: Any) -> None:
        """Select an option by value or label."""
        logger.debug(f"Selecting {value!r} in: {self.description}")
        self.locator.select_option(str(value))

    def click(self) -> None:
        logger.debug(f"Clicking: {self.description}")
        self.locator.click()

    def is_present(self) -> bool:
        """True if the element exists and is visible."""
        return self.locator.count() > 0 and self.locator.first.is_visible()

    def text(self) -> str:
        return self.locator.inner_text()

    def attribute(self, name: str) -> Optional[str]:
        return self.locator.get_attribute(name)

    def __repr__(self) -> str:
        return f"<PlaywrightElement {self.description}>"


class PlaywrightSession:
    """
    BrowserSession over a Playwright sync Page.

    Timeout and poll interval default to ``browser.timeout`` and
    ``browser.poll_interval`` from configuration (seconds).

    Usage:
        with sync_playwright() as p:
            page = p.chromium.launch().new_page()
            session = PlaywrightSession(page)
            LoginPage.visit(session=session)
    """

    capabilities: FrozenSet[str] = frozenset({
        "navigate",
        "current_url",
        "current_title",
        "wait_until",
        "element",
        "elements",
        "refresh",
        "back",
        "forward",
        "execute_script",
        "screenshot",
        "page",
    })

    def __init__(
        self,
        page: Page,
        timeout: Optional[float] = None,
        poll_interval: Optional[float] = None,
    ):
        """
        Initialize session.

        Args:
            page: Playwright Page object (owned by the caller)
            timeout: Default wait timeout in seconds
            poll_interval: Fixed delay between predicate evaluations in seconds
        """
        self.page = page
        self.timeout = float(timeout if timeout is not None else get_config("browser.timeout"))
        self.poll_interval = float(
            poll_interval if poll_interval is not None else get_config("browser.poll_interval")
        )

    # =========================================================================
    # Navigation
    # =========================================================================

    def navigate(self, url: str) -> None:
        with allure.step(f"Navigate to {url}"):
            self.page.goto(url)
            logger.info(f"Navigated to: {url}")

    def current_url(self) -> str:
        return self.page.url

    def current_title(self) -> str:
        return self.page.title()

    def refresh(self) -> None:
        self.page.reload()

    def back(self) -> None:
        self.page.go_back()

    def forward(self) -> None:
        self.page.go_forward()

    # =========================================================================
    # Lookup
    # =========================================================================

    def element(self, selector: str) -> PlaywrightElement:
        return PlaywrightElement(self.page.locator(selector).first, description=selector)

    def elements(self, selector: str) -> List[PlaywrightElement]:
        return [
            PlaywrightElement(locator, description=f"{selector}[{index}]")
            for index, locator in enumerate(self.page.locator(selector).all())
        ]

    def execute_script(self, script: str, arg: Any = None) -> Any:
        return self.page.evaluate(script, arg)

    # =========================================================================
    # Waiting
    # =========================================================================

    def wait_until(
        self,
        predicate: Callable[[], Any],
        timeout: Optional[float] = None,
        interval: Optional[float] = None,
        message: Optional[str] = None,
    ) -> bool:
        """
        Poll ``predicate`` at a fixed interval until it returns truthy.

        Args:
            predicate: Zero-argument callable
            timeout: Seconds before giving up (session default if None)
            interval: Seconds between attempts (session default if None)
            message: Description used in logs and the timeout error

        Returns:
            True once the predicate holds

        Raises:
            WaitTimeoutError: If the predicate never held within timeout.
                Errors raised by the predicate itself propagate unchanged.
        """
        timeout = self.timeout if timeout is None else timeout
        interval = self.poll_interval if interval is None else interval
        description = message or getattr(predicate, "__name__", "condition")

        deadline = time.monotonic() + timeout
        attempt = 0
        while True:
            attempt += 1
            if predicate():
                logger.debug(f"Wait satisfied after {attempt} attempts: {description}")
                return True
            if time.monotonic() >= deadline:
                error_msg = f"Timed out after {timeout}s waiting for: {description}"
                logger.debug(error_msg)
                raise WaitTimeoutError(error_msg)
            time.sleep(interval)

    # =========================================================================
    # Debug Utilities
    # =========================================================================

    def screenshot(self, name: str, full_page: bool = False) -> bytes:
        """Take a screenshot and attach it to the Allure report."""
        png = self.page.screenshot(full_page=full_page)
        allure.attach(png, name=name, attachment_type=allure.attachment_type.PNG)
        return png

    def __repr__(self) -> str:
        return f"<PlaywrightSession url={self.page.url!r}>"


__all__ = [
    "BrowserSession",
    "ElementHandle",
    "ElementKind",
    "PlaywrightElement",
    "PlaywrightSession",
    "classify_element",
]
