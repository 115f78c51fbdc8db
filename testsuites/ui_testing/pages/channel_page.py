"""
================================================================================
Channel Form Page Object
================================================================================

Channel creation form. Covers every element kind the setter dispatches on:
text field, text area, select, radio, checkbox and button.

================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pagedrops import PageObject, element, page_title, page_url
from pagedrops.common import get_config


@dataclass
class ChannelForm:
    """Form model; None fields are left untouched by ``fill_form``."""
    name: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    private: Optional[bool] = None
    notifications: Optional[bool] = None


class ChannelFormPage(PageObject):
    """New channel form page object."""

    @page_url(required=True)
    def page_url(self):
        return f"{get_config('browser.base_url')}/channels/new"

    @page_title
    def page_title(self):
        return "New Channel"

    name = element(lambda page: page.element("#channel-name"), required=True)
    description = element(lambda page: page.element("#channel-description"))
    category = element(lambda page: page.element("#channel-category"))
    private = element(lambda page: page.element("#visibility-private"))
    notifications = element(lambda page: page.element("#channel-notifications"))
    visibility = element(
        lambda page, value="public": page.element(f"input[name='visibility'][value='{value}']")
    )
    save = element(lambda page: page.element("#save"))
    result = element(lambda page: page.element("#result"))

    def submit(self, form: ChannelForm) -> str:
        """Fill and save the form; returns the serialized submission."""
        self.fill_form(form)
        self.save = True
        return self.result.text()
