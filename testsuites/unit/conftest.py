"""
================================================================================
Unit Test Fixtures
================================================================================

Fixtures wiring the Playwright fakes into page framework objects.

================================================================================
"""

import allure_commons
import pytest
from loguru import logger

from page_kit.framework.config_loader import ConfigLoader
from page_kit.framework.highlight import Highlighter
from page_kit.framework.page_base import BasePage
from testsuites.unit.fakes import FakeElement, FakePage, StepRecorder


@pytest.fixture
def fake_page() -> FakePage:
    return FakePage(
        elements={
            "#submit": [FakeElement(text="Submit", border="1px solid blue")],
            "#name": [FakeElement(value="old")],
            "#agree": [FakeElement()],
            "#country": [FakeElement()],
            "#avatar": [FakeElement(visible=False)],
            "#spinner": [FakeElement(visible=False)],
            "#title": [FakeElement(text="Dashboard", attributes={"data-id": "42"})],
            "#locked": [FakeElement(disabled=True, editable=False)],
            "li.item": [
                FakeElement(text="first"),
                FakeElement(text="second"),
                FakeElement(text="third"),
            ],
        },
        frames={
            "iframe#editor": {
                "#body": [FakeElement(border="")],
                "#save": [FakeElement()],
            },
        },
        url="http://app.test/dashboard",
    )


@pytest.fixture
def highlighter(fake_page: FakePage) -> Highlighter:
    return Highlighter(fake_page, border="2px dashed red", duration_ms=500)


@pytest.fixture
def base_page(fake_page: FakePage, highlighter: Highlighter) -> BasePage:
    return BasePage(fake_page, base_url="http://app.test/", highlighter=highlighter)


@pytest.fixture
def log_records():
    """Capture loguru records emitted during the test."""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)


@pytest.fixture
def reset_config():
    ConfigLoader.reset()
    yield
    ConfigLoader.reset()


@pytest.fixture
def allure_steps(fake_page: FakePage):
    recorder = StepRecorder(fake_page.calls)
    allure_commons.plugin_manager.register(recorder)
    yield recorder
    allure_commons.plugin_manager.unregister(recorder)
