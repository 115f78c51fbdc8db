"""
================================================================================
Page Definition
================================================================================

Per-class prototype describing a page: its ordered element registry, the
required subset, and the optional url/title builders used for verification.

A subclass builds a fresh definition when it is created by merging the
definitions of every base class, lowest precedence first, so multiple
inheritance combines elements and later declarations on either class never
leak into the other.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional

if TYPE_CHECKING:
    from .element import ElementDescriptor


Builder = Callable[..., str]


@dataclass
class PageDefinition:
    """
    Declared elements and verification criteria of one page class.

    Attributes:
        element_names: Declared element names, in declaration order
        required_element_names: Names that must be present for verification
        require_url: Whether the current url must match ``page_url()``
        page_url_builder: Builds the page url from the page and call arguments
        page_title_builder: Builds the expected title; its presence is a criterion
        descriptors: Element name -> descriptor
    """
    element_names: List[str] = field(default_factory=list)
    required_element_names: List[str] = field(default_factory=list)
    require_url: bool = False
    page_url_builder: Optional[Builder] = None
    page_title_builder: Optional[Builder] = None
    descriptors: Dict[str, "ElementDescriptor"] = field(default_factory=dict)

    def merge(self, other: "PageDefinition") -> None:
        """
        Fold the declarations of a base class into this definition.

        Elements are added in the base's order. Builders are only taken over
        when the base declares them.
        """
        for name in other.element_names:
            self.add_element(other.descriptors[name])
        if other.page_url_builder is not None:
            self.page_url_builder = other.page_url_builder
            self.require_url = other.require_url
        if other.page_title_builder is not None:
            self.page_title_builder = other.page_title_builder

    def add_element(self, descriptor: "ElementDescriptor") -> None:
        """
        Register a descriptor.

        Re-declaring a name keeps its original position; the required flag
        follows the latest declaration.
        """
        name = descriptor.name
        if name not in self.element_names:
            self.element_names.append(name)
        if descriptor.required:
            if name not in self.required_element_names:
                self.required_element_names.append(name)
        elif name in self.required_element_names:
            self.required_element_names.remove(name)
        self.descriptors[name] = descriptor

    @property
    def verifiable(self) -> bool:
        """True if at least one verification criterion is configured."""
        return (
            self.require_url
            or self.page_title_builder is not None
            or bool(self.required_element_names)
        )


class PageUrlDeclaration:
    """Class-body marker produced by ``@page_url``."""

    def __init__(self, builder: Builder, required: bool = False):
        self.builder = builder
        self.required = required


class PageTitleDeclaration:
    """Class-body marker produced by ``@page_title``."""

    def __init__(self, builder: Builder):
        self.builder = builder


def page_url(builder: Optional[Builder] = None, *, required: bool = False) -> Any:
    """
    Declare the url of a page inside a class body.

    Usage:
        class LoginPage(PageObject):
            @page_url(required=True)
            def page_url(self, base="http://localhost:3000"):
                return f"{base}/login"
    """
    if builder is None:
        return lambda fn: PageUrlDeclaration(fn, required=required)
    return PageUrlDeclaration(builder, required=required)


def page_title(builder: Builder) -> PageTitleDeclaration:
    """Declare the expected title of a page inside a class body."""
    return PageTitleDeclaration(builder)


__all__ = [
    "PageDefinition",
    "PageUrlDeclaration",
    "PageTitleDeclaration",
    "page_url",
    "page_title",
]
