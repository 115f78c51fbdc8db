"""
================================================================================
Page Object Framework
================================================================================

Declarative page objects over a pluggable browser session.

Components:
    - page_object: PageObject base class (DSL, verification, forms, visit)
    - definition: per-class element registry and verification criteria
    - element: element accessors and kind-directed setters
    - browser_session: session/element protocols and the Playwright adapter
    - errors: DriverError hierarchy

Author: Automation Team
License: MIT
================================================================================
"""

from .browser_session import (
    BrowserSession,
    ElementHandle,
    ElementKind,
    PlaywrightElement,
    PlaywrightSession,
)
from .definition import PageDefinition, page_title, page_url
from .element import ElementDescriptor, element, elements
from .errors import (
    DriverError,
    NavigationVerificationFailed,
    NoSessionError,
    NotVerifiable,
    UnknownCapability,
    WaitTimeoutError,
)
from .page_object import PageObject

__all__ = [
    "BrowserSession",
    "ElementHandle",
    "ElementKind",
    "PlaywrightElement",
    "PlaywrightSession",
    "PageDefinition",
    "ElementDescriptor",
    "PageObject",
    "element",
    "elements",
    "page_title",
    "page_url",
    "DriverError",
    "NavigationVerificationFailed",
    "NoSessionError",
    "NotVerifiable",
    "UnknownCapability",
    "WaitTimeoutError",
]
