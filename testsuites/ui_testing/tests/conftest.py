"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures for running the page framework against a real browser.

Key Features:
- Browser and page lifecycle through BrowserManager
- Inline HTML fixtures (no application server needed)
- Screenshot capture on failure, attached to Allure

Tests are skipped when the configured browser cannot be launched
(e.g. `playwright install` has not been run).

================================================================================
"""

from typing import AsyncGenerator

import allure
import pytest
from loguru import logger
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from page_kit.framework.browser_manager import BrowserManager
from page_kit.framework.highlight import Highlighter
from page_kit.framework.page_base import BasePage


# Short timeouts keep negative-path tests fast
UI_TEST_TIMEOUT_MS = 1500
HIGHLIGHT_DURATION_MS = 50


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture
async def browser_manager() -> AsyncGenerator[BrowserManager, None]:
    """
    Browser manager launched from configuration (ui.browser, ui.headless).
    """
    manager = BrowserManager.from_config(default_timeout=UI_TEST_TIMEOUT_MS)
    try:
        await manager.start()
    except PlaywrightError as e:
        await manager.close()
        pytest.skip(f"Browser could not be launched: {e}")
    yield manager
    await manager.close()


@pytest.fixture
async def page(browser_manager: BrowserManager, request) -> AsyncGenerator[Page, None]:
    """
    Function-scoped page in its own context.

    A full-page screenshot is attached to Allure when the test body failed.
    """
    page = await browser_manager.new_page()
    yield page

    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed:
        try:
            allure.attach(
                await page.screenshot(full_page=True),
                name="failure_screenshot",
                attachment_type=allure.attachment_type.PNG,
            )
        except PlaywrightError as e:
            logger.warning(f"Failed to capture screenshot on failure: {e}")
    await page.close()


@pytest.fixture
def base_page(page: Page) -> BasePage:
    """BasePage with a short highlight so tests stay fast."""
    return BasePage(
        page,
        base_url="http://localhost",
        highlighter=Highlighter(page, duration_ms=HIGHLIGHT_DURATION_MS),
    )


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Keep each phase's report on the item so fixtures can see failures."""
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)
