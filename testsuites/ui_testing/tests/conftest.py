"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures for Playwright-backed page object tests.

Key Features:
- Session-scoped Chromium (tests are skipped when it cannot launch)
- Function-scoped context/page with the demo site routed in-process
- PlaywrightSession fixture shared by the page objects
- Screenshot capture on failure

================================================================================
"""

import os
from typing import Generator
from urllib.parse import urlsplit

import allure
import pytest
from loguru import logger
from playwright.sync_api import Browser, BrowserContext, Error as PlaywrightError, Page, Route, sync_playwright

from pagedrops import PageObject, PlaywrightSession
from pagedrops.common import ConfigLoader

from testsuites.ui_testing.tests.demo_site import BASE_URL, SITE


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def browser() -> Generator[Browser, None, None]:
    """
    Session-scoped headless Chromium.

    Skips the UI tests when Playwright browsers are not installed.
    """
    with sync_playwright() as playwright:
        try:
            browser = playwright.chromium.launch(headless=True)
        except PlaywrightError as e:
            pytest.skip(f"Chromium unavailable: {e}")
        yield browser
        browser.close()


@pytest.fixture(scope="function")
def context(browser: Browser) -> Generator[BrowserContext, None, None]:
    """Isolated browser context serving the demo site."""
    context = browser.new_context(viewport={"width": 1280, "height": 800})

    def serve(route: Route) -> None:
        body = SITE.get(urlsplit(route.request.url).path)
        if body is None:
            route.fulfill(status=404, body="not found")
        else:
            route.fulfill(status=200, content_type="text/html", body=body)

    context.route(f"{BASE_URL}/**", serve)
    yield context
    context.close()


@pytest.fixture(scope="function")
def page(context: BrowserContext) -> Generator[Page, None, None]:
    page = context.new_page()
    yield page
    page.close()


@pytest.fixture(scope="function")
def session(page: Page, monkeypatch) -> Generator[PlaywrightSession, None, None]:
    """
    PlaywrightSession pointed at the demo site and installed as the default.
    """
    monkeypatch.setenv("BROWSER_BASE_URL", BASE_URL)
    ConfigLoader.reset()
    session = PlaywrightSession(page, timeout=float(os.getenv("UI_WAIT_TIMEOUT", "5")))
    PageObject.use_session(session)
    yield session
    PageObject.use_session(None)
    ConfigLoader.reset()


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Attach a screenshot to the Allure report when a UI test fails."""
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        session = getattr(item, "funcargs", {}).get("session")
        if isinstance(session, PlaywrightSession):
            try:
                session.screenshot("failure_screenshot", full_page=True)
            except PlaywrightError as e:
                logger.warning(f"Failed to capture screenshot on failure: {e}")


@pytest.fixture
def test_data():
    """Common test data for UI tests."""
    return {
        "valid_user": {
            "username": "demo_user",
            "password": "demo_password",
        },
        "invalid_user": {
            "username": "invalid_user",
            "password": "wrong_password",
        },
    }
