"""
================================================================================
Login Page Object
================================================================================

Declarative Login Page Object.

The page verifies on url, title and the two credential inputs, so
``LoginPage.visit()`` fails fast if the login form is not what loaded.

NOTE:
  Selectors use `data-testid` attributes served by the demo site in
  `testsuites/ui_testing/tests/demo_site.py`.

================================================================================
"""

from __future__ import annotations

import os
from typing import Optional

import allure

from pagedrops import PageObject, element, page_title, page_url
from pagedrops.common import get_config


class LoginPage(PageObject):
    """Login page object."""

    @page_url(required=True)
    def page_url(self):
        return f"{get_config('browser.base_url')}/login"

    @page_title
    def page_title(self):
        return "Login"

    username = element(lambda page: page.element("[data-testid='input-username']"), required=True)
    password = element(lambda page: page.element("[data-testid='input-password']"), required=True)
    remember_me = element(lambda page: page.element("[data-testid='chk-remember']"))
    login_button = element(lambda page: page.element("[data-testid='btn-login']"))
    error_message = element(lambda page: page.element("[data-testid='error-message']"))

    @allure.step("Login (username={username})")
    def login(
        self,
        username: Optional[str] = None,
        password: Optional[str] = None,
        remember: bool = False,
    ) -> None:
        """
        Perform login.

        Args:
            username: Defaults to `UI_USERNAME` env var (demo-safe).
            password: Defaults to `UI_PASSWORD` env var (demo-safe).
            remember: Tick the "remember me" checkbox.
        """
        self.fill_form({
            "username": username if username is not None else os.getenv("UI_USERNAME", "demo_user"),
            "password": password if password is not None else os.getenv("UI_PASSWORD", "demo_password"),
            "remember_me": remember,
            "login_button": True,
        })

    def error_displayed(self) -> bool:
        return self.error_message.is_present()
