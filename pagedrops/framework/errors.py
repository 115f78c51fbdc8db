"""
================================================================================
Driver Errors
================================================================================

Exception hierarchy raised by the page-object layer.

Every error shares the ``DriverError`` base so test code can catch framework
failures with a single ``except`` clause.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Optional


class DriverError(Exception):
    """Base class for all page-object failures."""
    pass


class NoSessionError(DriverError):
    """Raised when a page is built without a session and no default is installed."""
    pass


class NotVerifiable(DriverError):
    """Raised when ``on_page()`` is called on a page with no verification criteria."""

    def __init__(self, message: str = "Can not verify page without any requirements set"):
        super().__init__(message)


class WaitTimeoutError(DriverError):
    """Raised by ``BrowserSession.wait_until`` when the condition is never met."""
    pass


class NavigationVerificationFailed(DriverError):
    """
    Raised by ``visit()`` when navigation succeeded but the page did not verify.

    Attributes:
        page_class: The page object class that was expected
    """

    def __init__(self, page_class: type, message: Optional[str] = None):
        self.page_class = page_class
        super().__init__(
            message or f"Expected to be on {page_class.__name__}, but conditions not met"
        )


class UnknownCapability(DriverError, AttributeError):
    """Raised when a delegated call is not supported by the browser session."""

    def __init__(self, owner: str, name: str):
        super().__init__(f"'{owner}' object has no attribute or session capability '{name}'")
        self.owner = owner
        self.name = name


__all__ = [
    "DriverError",
    "NoSessionError",
    "NotVerifiable",
    "WaitTimeoutError",
    "NavigationVerificationFailed",
    "UnknownCapability",
]
