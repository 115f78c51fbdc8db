"""
================================================================================
Channel Form UI Tests
================================================================================

Checks the kind-directed setters against real form controls.

================================================================================
"""

import json

import allure
import pytest

from testsuites.ui_testing.pages.channel_page import ChannelForm, ChannelFormPage
from testsuites.ui_testing.pages.dashboard_page import DashboardPage
from testsuites.ui_testing.pages.login_page import LoginPage


@allure.epic("UI Testing")
@allure.feature("Channels")
class TestChannelForm:

    @allure.title("Every element kind is filled from a dataclass model")
    @pytest.mark.P0
    @pytest.mark.regression
    def test_fill_all_kinds(self, session):
        page = ChannelFormPage.visit()
        result = json.loads(page.submit(ChannelForm(
            name="Retro Games",
            description="Weekly streams",
            category="gaming",
            private=True,
            notifications=False,
        )))

        assert result == {
            "name": "Retro Games",
            "description": "Weekly streams",
            "category": "gaming",
            "visibility": "private",
            "notifications": False,
        }

    @allure.title("Absent and falsy fields leave controls untouched")
    @pytest.mark.P1
    @pytest.mark.regression
    def test_untouched_fields(self, session):
        page = ChannelFormPage.visit()
        page.fill_form({"name": "Music", "description": "", "private": False})
        page.save = True
        result = json.loads(page.result.text())

        assert result["name"] == "Music"
        assert result["description"] == "keep me"
        assert result["category"] == "general"
        assert result["visibility"] == "public"
        assert result["notifications"] is True

    @allure.title("Parametrized element accessor")
    @pytest.mark.P2
    def test_parametrized_radio(self, session):
        page = ChannelFormPage.visit()
        page.visibility("private").set()
        page.save = True
        assert json.loads(page.result.text())["visibility"] == "private"

    @allure.title("Dashboard link leads to the channel form")
    @pytest.mark.P1
    @pytest.mark.e2e
    def test_dashboard_to_channel_form(self, session):
        LoginPage.visit().login()
        dashboard = DashboardPage()
        assert dashboard.on_page()

        dashboard.open_new_channel()
        assert ChannelFormPage().on_page()
