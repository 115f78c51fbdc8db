"""
================================================================================
Dashboard Page Object
================================================================================

Landing page after login. Verifies on url, title and the welcome heading.

================================================================================
"""

from __future__ import annotations

from typing import List

import allure

from pagedrops import PageObject, element, elements, page_title, page_url
from pagedrops.common import get_config


class DashboardPage(PageObject):
    """Dashboard page object."""

    @page_url(required=True)
    def page_url(self):
        return f"{get_config('browser.base_url')}/dashboard"

    @page_title
    def page_title(self):
        return "Dashboard"

    welcome = element(lambda page: page.element("[data-testid='dashboard-title']"), required=True)
    new_channel = element(lambda page: page.element("[data-testid='btn-new-channel']"))
    channel_rows = elements(lambda page: page.elements("[data-testid='channel-row']"))

    def channel_names(self) -> List[str]:
        return [row.text() for row in self.channel_rows]

    @allure.step("Open new channel form")
    def open_new_channel(self) -> None:
        self.new_channel = True
