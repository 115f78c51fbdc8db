"""
================================================================================
pagedrops
================================================================================

Declarative page objects for browser-driven UI test automation.

Example:
    from pagedrops import PageObject, PlaywrightSession, element, page_url

    class SearchPage(PageObject):
        @page_url(required=True)
        def page_url(self):
            return "https://example.com/search"

        query = element(lambda page: page.element("input[name=q]"), required=True)
        go = element(lambda page: page.element("button[type=submit]"))

    page = SearchPage.visit(session=PlaywrightSession(playwright_page))
    page.fill_form({"query": "page objects", "go": True})

================================================================================
"""

from .framework import (
    BrowserSession,
    DriverError,
    ElementDescriptor,
    ElementHandle,
    ElementKind,
    NavigationVerificationFailed,
    NoSessionError,
    NotVerifiable,
    PageDefinition,
    PageObject,
    PlaywrightElement,
    PlaywrightSession,
    UnknownCapability,
    WaitTimeoutError,
    element,
    elements,
    page_title,
    page_url,
)

__version__ = "1.0.0"

__all__ = [
    "BrowserSession",
    "DriverError",
    "ElementDescriptor",
    "ElementHandle",
    "ElementKind",
    "NavigationVerificationFailed",
    "NoSessionError",
    "NotVerifiable",
    "PageDefinition",
    "PageObject",
    "PlaywrightElement",
    "PlaywrightSession",
    "UnknownCapability",
    "WaitTimeoutError",
    "element",
    "elements",
    "page_title",
    "page_url",
]
