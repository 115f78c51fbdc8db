# ================================================================================
# Element Accessors
# ================================================================================
#
# Data descriptors synthesized from element declarations.
#
# Each declared element becomes a descriptor on the page class:
#   - reading it evaluates the declaration block against the page
#   - assigning to it resolves a fresh handle and dispatches on the kind the
#     handle reports at that moment
#
# Setter policy:
#   radio       truthy -> set            falsy -> no-op
#   checkbox    truthy -> set            falsy -> clear
#   select      select(value)            select(value)
#   button      click                    click
#   text        set(value)               no-op (never clears)
#   other       click                    no-op
#
# ================================================================================

from __future__ import annotations

import functools
import inspect
from typing import Any, Callable, Dict, Optional

from loguru import logger

from .browser_session import ElementHandle, ElementKind
from .errors import DriverError


ElementBlock = Callable[..., Any]


def _set_radio(handle: ElementHandle, value: Any) -> None:
    if value:
        handle.set()


def _set_checkbox(handle: ElementHandle, value: Any) -> None:
    if value:
        handle.set()
    else:
        handle.clear()


def _set_select(handle: ElementHandle, value: Any) -> None:
    handle.select(value)


def _set_button(handle: ElementHandle, value: Any) -> None:
    handle.click()


def _set_text(handle: ElementHandle, value: Any) -> None:
    if value:
        handle.set(value)


def _set_generic(handle: ElementHandle, value: Any) -> None:
    if value:
        handle.click()


SETTERS: Dict[ElementKind, Callable[[ElementHandle, Any], None]] = {
    ElementKind.RADIO: _set_radio,
    ElementKind.CHECKBOX: _set_checkbox,
    ElementKind.SELECT: _set_select,
    ElementKind.BUTTON: _set_button,
    ElementKind.TEXT_FIELD: _set_text,
    ElementKind.TEXT_AREA: _set_text,
    ElementKind.GENERIC: _set_generic,
}


def element_kind(handle: ElementHandle) -> ElementKind:
    """Kind reported by ``handle``; unknown kinds count as generic."""
    try:
        return ElementKind(handle.kind())
    except ValueError:
        return ElementKind.GENERIC


def assign(handle: ElementHandle, value: Any) -> ElementKind:
    """
    Apply ``value`` to ``handle`` according to the handle's runtime kind.

    Returns:
        The kind that was dispatched on
    """
    kind = element_kind(handle)
    logger.debug(f"Assigning {value!r} to {kind.value} element")
    SETTERS[kind](handle, value)
    return kind


def _takes_arguments(block: ElementBlock) -> bool:
    """True if ``block`` accepts anything beyond the page itself."""
    try:
        params = list(inspect.signature(block).parameters.values())
    except (TypeError, ValueError):
        return False
    if any(p.kind == p.VAR_POSITIONAL for p in params):
        return True
    positional = [
        p for p in params
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)
    ]
    return len(positional) > 1


class ElementDescriptor:
    """
    Accessor for one declared element.

    The block receives the page (and any call arguments) and returns an
    ElementHandle. Blocks taking only the page read like attributes; blocks
    with extra parameters are exposed as methods.

    Attributes:
        name: Attribute name on the page class
        block: Callable resolving the handle
        required: Whether the element must be present for verification
        collection: Read-only accessor for repeated elements
    """

    def __init__(
        self,
        block: ElementBlock,
        required: bool = False,
        collection: bool = False,
        name: Optional[str] = None,
    ):
        self.block = block
        self.required = required and not collection
        self.collection = collection
        self.name = name
        self.takes_arguments = _takes_arguments(block)

    def __set_name__(self, owner: type, name: str) -> None:
        if self.name is None:
            self.name = name

    def resolve(self, page: Any, *args: Any, **kwargs: Any) -> Any:
        """
        Evaluate the declaration block against ``page``.

        An AttributeError raised inside the block is re-raised as DriverError,
        otherwise attribute lookup on the page would fall back to session
        delegation and report the element name instead of the real cause.
        """
        try:
            return self.block(page, *args, **kwargs)
        except AttributeError as e:
            raise DriverError(f"Could not resolve element '{self.name}': {e}") from e

    def __get__(self, page: Any, owner: Optional[type] = None) -> Any:
        if page is None:
            return self
        if self.takes_arguments:
            return functools.partial(self.resolve, page)
        return self.resolve(page)

    def __set__(self, page: Any, value: Any) -> None:
        if self.collection:
            raise AttributeError(f"'{self.name}' is a read-only element collection")
        assign(self.resolve(page), value)

    def __repr__(self) -> str:
        flags = []
        if self.required:
            flags.append("required")
        if self.collection:
            flags.append("collection")
        suffix = f" ({', '.join(flags)})" if flags else ""
        return f"<ElementDescriptor {self.name}{suffix}>"


def element(block: ElementBlock, required: bool = False) -> ElementDescriptor:
    """
    Declare an element inside a page class body.

    Usage:
        class LoginPage(PageObject):
            username = element(lambda page: page.element("#username"), required=True)
    """
    return ElementDescriptor(block, required=required)


def elements(block: ElementBlock) -> ElementDescriptor:
    """Declare a read-only collection of repeated elements."""
    return ElementDescriptor(block, collection=True)


__all__ = [
    "ElementDescriptor",
    "SETTERS",
    "assign",
    "element",
    "element_kind",
    "elements",
]
