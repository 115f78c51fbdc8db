"""
================================================================================
Page Object
================================================================================

Declarative base class for Page Object Model implementations.

Provides:
    - Declaration DSL (page url, page title, elements, element collections)
    - Typed element accessors with kind-directed setters
    - Page verification with bounded polling (``on_page``)
    - Form filling from mappings, records and plain objects
    - Forwarding of unknown calls to the browser session
    - ``visit``: construct, navigate and verify in one call

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from types import SimpleNamespace
from typing import Any, Callable, ClassVar, Dict, List, Optional
from urllib.parse import urlsplit

import allure
from loguru import logger

from .browser_session import BrowserSession
from .definition import Builder, PageDefinition, PageTitleDeclaration, PageUrlDeclaration
from .element import ElementBlock, ElementDescriptor
from .errors import (
    NavigationVerificationFailed,
    NoSessionError,
    NotVerifiable,
    UnknownCapability,
    WaitTimeoutError,
)


def strip_scheme(url: str) -> str:
    """Drop a leading ``scheme://`` from ``url``."""
    scheme = urlsplit(url).scheme
    prefix = f"{scheme}://"
    if scheme and url.startswith(prefix):
        return url[len(prefix):]
    return url


def _session_supports(session: Any, name: str) -> bool:
    capabilities = getattr(session, "capabilities", None)
    if capabilities is not None and name not in capabilities:
        return False
    return hasattr(session, name)


def _available_fields(model: Any) -> Dict[str, Any]:
    """
    Field name -> value for every field of ``model`` that may be filled.

    Mappings and namespaces expose every key. Other objects only expose
    fields whose value is not None.
    """
    if isinstance(model, Mapping):
        return dict(model)
    if isinstance(model, SimpleNamespace):
        return dict(vars(model))

    if dataclasses.is_dataclass(model) and not isinstance(model, type):
        values = {f.name: getattr(model, f.name) for f in dataclasses.fields(model)}
    elif callable(getattr(model, "keys", None)):
        values = {
            key: model[key] if hasattr(model, "__getitem__") else getattr(model, key)
            for key in model.keys()
        }
    else:
        values = {
            key: value for key, value in vars(model).items()
            if not key.startswith("_")
        }
    return {key: value for key, value in values.items() if value is not None}


def _page_url_method(builder: Builder) -> Callable[..., str]:
    def page_url(self, *args: Any, **kwargs: Any) -> str:
        return builder(self, *args, **kwargs)
    return page_url


def _page_title_method(builder: Builder) -> Callable[..., str]:
    def page_title(self, *args: Any, **kwargs: Any) -> str:
        return builder(self, *args, **kwargs)
    return page_title


def _goto(self, *args: Any, **kwargs: Any) -> None:
    url = self.page_url(*args, **kwargs)
    with allure.step(f"Go to {type(self).__name__}"):
        logger.info(f"Opening {type(self).__name__}: {url}")
        self.session.navigate(url)


class PageObject:
    """
    Base class for all page objects.

    Declare elements and verification criteria in the class body, then drive
    the page through the synthesized accessors.

    Usage:
        class LoginPage(PageObject):
            @page_url(required=True)
            def page_url(self):
                return "http://localhost:3000/login"

            @page_title
            def page_title(self):
                return "Login"

            username = element(lambda page: page.element("#username"), required=True)
            password = element(lambda page: page.element("#password"))
            submit = element(lambda page: page.element("button[type=submit]"))

        page = LoginPage.visit(session=session)
        page.fill_form({"username": "demo_user", "password": "secret", "submit": True})
    """

    definition: ClassVar[PageDefinition] = PageDefinition()
    _default_session: ClassVar[Optional[BrowserSession]] = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        definition = PageDefinition()
        for base in reversed(cls.__mro__[1:]):
            inherited = base.__dict__.get("definition")
            if isinstance(inherited, PageDefinition):
                definition.merge(inherited)
        cls.definition = definition

        for name, value in list(cls.__dict__.items()):
            if isinstance(value, ElementDescriptor):
                cls.definition.add_element(value)
            elif isinstance(value, PageUrlDeclaration):
                setattr(cls, name, value.builder)
                cls.declare_page_url(value.builder, required=value.required)
            elif isinstance(value, PageTitleDeclaration):
                setattr(cls, name, value.builder)
                cls.declare_page_title(value.builder)

    # =========================================================================
    # Declaration DSL
    # =========================================================================

    @classmethod
    def declare_page_url(cls, builder: Builder, required: bool = False) -> None:
        """
        Declare how the page url is built.

        Adds ``page_url(*args)`` and ``goto(*args)`` to the class.

        Args:
            builder: Called as ``builder(page, *args, **kwargs)``
            required: Verify the current url against ``page_url()``
        """
        cls.definition.require_url = required
        cls.definition.page_url_builder = builder
        cls.page_url = _page_url_method(builder)
        cls.goto = _goto

    @classmethod
    def declare_page_title(cls, builder: Builder) -> None:
        """Declare the expected page title; adds ``page_title(*args)``."""
        cls.definition.page_title_builder = builder
        cls.page_title = _page_title_method(builder)

    @classmethod
    def declare_element(
        cls,
        name: str,
        block: ElementBlock,
        required: bool = False,
    ) -> ElementDescriptor:
        """
        Declare an interactive element with a getter and a setter.

        Args:
            name: Accessor name
            block: Called as ``block(page, *args)``, returns an element handle
            required: Element must be present for ``on_page()``
        """
        descriptor = ElementDescriptor(block, required=required, name=name)
        setattr(cls, name, descriptor)
        cls.definition.add_element(descriptor)
        return descriptor

    @classmethod
    def declare_elements(cls, name: str, block: ElementBlock) -> ElementDescriptor:
        """Declare a read-only accessor for repeated elements."""
        descriptor = ElementDescriptor(block, collection=True, name=name)
        setattr(cls, name, descriptor)
        cls.definition.add_element(descriptor)
        return descriptor

    # =========================================================================
    # Session
    # =========================================================================

    @classmethod
    def use_session(cls, session: Optional[BrowserSession]) -> None:
        """Install (or with None, remove) the process-wide default session."""
        PageObject._default_session = session

    @classmethod
    def default_session(cls) -> Optional[BrowserSession]:
        return PageObject._default_session

    def __init__(self, session: Optional[BrowserSession] = None):
        """
        Initialize page object.

        Args:
            session: Browser session; falls back to the installed default

        Raises:
            NoSessionError: If no session is given and no default is installed
        """
        if session is None:
            session = PageObject._default_session
        if session is None:
            raise NoSessionError(
                f"{type(self).__name__} needs a browser session; pass one or call "
                f"PageObject.use_session()"
            )
        self.session = session

    # =========================================================================
    # Navigation
    # =========================================================================

    @classmethod
    def visit(cls, *args: Any, session: Optional[BrowserSession] = None, **kwargs: Any):
        """
        Construct the page, navigate to it and verify arrival.

        Verification is skipped for pages without criteria.

        Raises:
            NavigationVerificationFailed: If the page did not verify
        """
        page = cls(session)
        with allure.step(f"Visit {cls.__name__}"):
            page.goto(*args, **kwargs)
            if page.page_verifiable() and not page.on_page():
                error = NavigationVerificationFailed(cls)
                logger.error(str(error))
                raise error
        return page

    # =========================================================================
    # Verification
    # =========================================================================

    def page_verifiable(self) -> bool:
        """True if the page declares at least one verification criterion."""
        return self.definition.verifiable

    def on_page(self) -> bool:
        """
        Check that the browser is currently showing this page.

        Waits, in order, for the url, the title and the required elements,
        skipping any criterion that is not declared.

        Returns:
            True if every declared criterion held within the session timeout,
            False if any wait timed out

        Raises:
            NotVerifiable: If the page declares no criteria at all
        """
        definition = self.definition
        page_name = type(self).__name__
        if not definition.verifiable:
            logger.error(f"{page_name} declares no url, title or required elements")
            raise NotVerifiable()

        with allure.step(f"Verify on {page_name}"):
            try:
                if definition.require_url:
                    self.session.wait_until(
                        self._url_matches, message=f"{page_name} url"
                    )
                if definition.page_title_builder is not None:
                    self.session.wait_until(
                        self._title_matches, message=f"{page_name} title"
                    )
                if definition.required_element_names:
                    self.session.wait_until(
                        self._required_elements_present,
                        message=f"{page_name} required elements",
                    )
            except WaitTimeoutError as e:
                logger.warning(f"Not on {page_name}: {e}")
                return False

        logger.debug(f"Verified on {page_name}")
        return True

    def _url_matches(self) -> bool:
        return strip_scheme(self.page_url()) == strip_scheme(self.session.current_url())

    def _title_matches(self) -> bool:
        return self.session.current_title() == self.page_title()

    def _required_elements_present(self) -> bool:
        descriptors = self.definition.descriptors
        return all(
            descriptors[name].resolve(self).is_present()
            for name in self.definition.required_element_names
        )

    def wait_until(
        self,
        predicate: Callable[["PageObject"], Any],
        timeout: Optional[float] = None,
        message: Optional[str] = None,
    ) -> bool:
        """Poll ``predicate(page)`` through the session until it is truthy."""
        return self.session.wait_until(lambda: predicate(self), timeout=timeout, message=message)

    # =========================================================================
    # Forms
    # =========================================================================

    def fill_form(self, model: Any) -> List[str]:
        """
        Assign model fields to the declared elements of the same name.

        Elements are filled in declaration order. Undeclared fields are
        ignored and declared elements missing from the model are left alone.

        Args:
            model: Mapping, SimpleNamespace, dataclass, or object with ``keys()``

        Returns:
            Names of the elements that were assigned
        """
        fields = _available_fields(model)
        filled: List[str] = []
        with allure.step(f"Fill form on {type(self).__name__}"):
            for name in self.definition.element_names:
                if name not in fields:
                    continue
                if self.definition.descriptors[name].collection:
                    logger.debug(f"Skipping element collection: {name}")
                    continue
                setattr(self, name, fields[name])
                filled.append(name)
        logger.debug(f"Filled {filled} on {type(self).__name__}")
        return filled

    # =========================================================================
    # Delegation
    # =========================================================================

    def __getattr__(self, name: str) -> Any:
        session = self.__dict__.get("session")
        if session is not None and not name.startswith("_") and _session_supports(session, name):
            return getattr(session, name)
        raise UnknownCapability(type(self).__name__, name)

    def __dir__(self) -> List[str]:
        names = set(super().__dir__())
        session = self.__dict__.get("session")
        if session is not None:
            names.update(
                name for name in getattr(session, "capabilities", ())
                if hasattr(session, name)
            )
        return sorted(names)

    # =========================================================================
    # Diagnostics
    # =========================================================================

    def __repr__(self) -> str:
        return "<%s url=%r title=%r>" % (
            type(self).__name__,
            self.session.current_url(),
            self.session.current_title(),
        )

    selector_string = __repr__


__all__ = [
    "PageObject",
    "strip_scheme",
]
