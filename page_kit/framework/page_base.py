"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Highlighted element actions (click, fill, hover, check, select, upload)
    - Element state and text queries
    - Navigation helpers
    - Element wait strategies
    - Frame-scoped actions
    - Bounded-retry page load synchronization

Every operation delegates to the injected Playwright page. Driver errors are
not caught or translated, with one exception: wait_for_page_load() logs and
swallows anything raised while waiting.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import List, Optional

import allure
from loguru import logger
from playwright.async_api import Locator, Page

from .config_loader import ConfigLoader
from .frame_scope import FrameScope
from .highlight import Highlighter, with_highlight


# Default output directory for screenshots
SCREENSHOT_DIR = Path(__file__).parent.parent / "screenshots"


def page_target(page_object: "BasePage", locator: str, *_) -> Locator:
    """Highlight target for top-level actions."""
    return page_object.page.locator(locator)


def frame_target(page_object: "BasePage", frame_locator: str, locator: str, *_) -> Locator:
    """Highlight target for frame-scoped actions."""
    return page_object.in_frame(frame_locator).locator(locator)


class BasePage:
    """
    Base class for all page objects.

    Usage:
        class LoginPage(BasePage):
            URL_PATH = "/login"

            async def login(self, username: str, password: str):
                await self.fill_element("#username", username)
                await self.fill_element("#password", password)
                await self.click_to_element("button[type=submit]")
    """

    # Override in subclasses
    URL_PATH: str = "/"

    # Relative upload file names are resolved against this directory
    UPLOAD_ROOT: Path = Path(__file__).resolve().parent

    PAGE_LOAD_POLL_INTERVAL_MS: int = 500

    def __init__(
        self,
        page: Page,
        base_url: str = "",
        highlighter: Optional[Highlighter] = None,
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page object, owned by the caller
            base_url: Base URL for the application (defaults to ui.base_url)
            highlighter: Highlight side effect for actions (built from config if omitted)
        """
        self.page = page
        if not base_url:
            base_url = ConfigLoader().get("ui.base_url")
        self.base_url = base_url.rstrip("/")
        self.highlighter = highlighter or Highlighter.from_config(page)

    @property
    def url(self) -> str:
        """Full URL of this page object."""
        return f"{self.base_url}{self.URL_PATH}"

    def in_frame(self, frame_locator: str) -> FrameScope:
        """Scope for elements inside the frame matched by ``frame_locator``."""
        return FrameScope(self.page, frame_locator)

    # =========================================================================
    # Highlighted Actions
    # =========================================================================

    async def highlight_element(self, locator: str) -> None:
        """Briefly mark the element with a dashed border, then restore it."""
        await self.highlighter.highlight(self.page.locator(locator))

    @with_highlight(page_target, "Click: {locator}")
    async def click_to_element(self, locator: str) -> None:
        await self.page.click(locator)

    @with_highlight(page_target, "Double click: {locator}")
    async def double_click_to_element(self, locator: str) -> None:
        await self.page.dblclick(locator)

    @with_highlight(page_target, "Right click: {locator}")
    async def right_click_to_element(self, locator: str) -> None:
        await self.page.click(locator, button="right")

    @with_highlight(page_target, "Middle click: {locator}")
    async def middle_click_to_element(self, locator: str) -> None:
        await self.page.click(locator, button="middle")

    @with_highlight(page_target, "Hover: {locator}")
    async def hover_to_element(self, locator: str) -> None:
        await self.page.hover(locator)

    @with_highlight(page_target, "Fill: {locator}")
    async def fill_element(self, locator: str, input_value: str) -> None:
        """
        Fill an input.

        The value is left out of the step title so passwords never reach
        the report.
        """
        await self.page.fill(locator, input_value)

    @with_highlight(page_target, "Check: {locator}")
    async def check_to_element(self, locator: str) -> None:
        await self.page.check(locator)

    @with_highlight(page_target, "Uncheck: {locator}")
    async def uncheck_to_element(self, locator: str) -> None:
        await self.page.uncheck(locator)

    @with_highlight(page_target, "Select '{option}' in {locator}")
    async def select_to_dropdown(self, locator: str, option: str) -> None:
        """Select a dropdown option by its visible label."""
        await self.page.locator(locator).select_option(label=option)

    @with_highlight(page_target, "Blur: {locator}")
    async def blur_to_element(self, locator: str) -> None:
        await self.page.locator(locator).blur()

    @with_highlight(page_target, "Upload {file_name} to {locator}")
    async def upload_file(self, locator: str, file_name: str) -> None:
        """
        Set a single file on a file input.

        Args:
            locator: File input selector
            file_name: Path relative to UPLOAD_ROOT (absolute paths are kept)
        """
        await self.page.locator(locator).set_input_files(self.resolve_upload_path(file_name))

    @with_highlight(page_target, "Upload files to {locator}")
    async def upload_multi_files(self, locator: str, *file_names: str) -> None:
        file_paths = [self.resolve_upload_path(name) for name in file_names]
        await self.page.locator(locator).set_input_files(file_paths)

    def resolve_upload_path(self, file_name: str) -> str:
        """Absolute path for an upload file name."""
        return str((Path(self.UPLOAD_ROOT) / file_name).resolve())

    # =========================================================================
    # Frame-Scoped Actions
    # =========================================================================

    @with_highlight(frame_target, "Click in frame {frame_locator}: {locator}")
    async def click_to_element_in_frame(self, frame_locator: str, locator: str) -> None:
        await self.in_frame(frame_locator).locator(locator).click()

    @with_highlight(frame_target, "Fill in frame {frame_locator}: {locator}")
    async def fill_to_element_in_frame(
        self,
        frame_locator: str,
        locator: str,
        input_value: str,
    ) -> None:
        await self.in_frame(frame_locator).locator(locator).fill(input_value)

    # =========================================================================
    # Element Helpers
    # =========================================================================

    async def scroll_to_element(self, locator: str) -> None:
        await self.page.locator(locator).scroll_into_view_if_needed()

    async def scroll_to_page_top(self) -> None:
        await self.page.evaluate(
            "() => window.scrollTo({top: 0, left: 0, behavior: 'smooth'})"
        )

    async def hide_element(self, locator: str) -> None:
        """Hide an element (e.g. a cookie banner covering the page)."""
        await self.page.locator(locator).evaluate(
            "el => el.style.setProperty('display', 'none', 'important')"
        )

    # =========================================================================
    # Queries
    # =========================================================================

    async def get_page_url(self) -> str:
        return self.page.url

    async def get_page_source(self) -> str:
        return await self.page.content()

    async def get_element_text(self, locator: str) -> str:
        return await self.page.locator(locator).inner_text()

    async def get_attribute_value_of_element(
        self,
        locator: str,
        attribute_name: str,
    ) -> Optional[str]:
        """Attribute value, or None when the element has no such attribute."""
        return await self.page.locator(locator).get_attribute(attribute_name)

    async def get_input_value(self, locator: str) -> str:
        return await self.page.locator(locator).input_value()

    async def get_number_of_elements(self, locator: str) -> int:
        """Number of matching elements; 0 when nothing matches."""
        return await self.page.locator(locator).count()

    async def get_text_of_all_elements(self, locator: str) -> List[str]:
        """Inner text of every matching element, in document order."""
        elements = await self.page.locator(locator).all()
        return [await element.inner_text() for element in elements]

    async def is_element_checked(self, locator: str) -> bool:
        return await self.page.locator(locator).is_checked()

    async def is_element_visible(self, locator: str) -> bool:
        return await self.page.locator(locator).is_visible()

    async def is_element_hidden(self, locator: str) -> bool:
        return await self.page.locator(locator).is_hidden()

    async def is_element_disabled(self, locator: str) -> bool:
        return await self.page.locator(locator).is_disabled()

    async def is_element_editable(self, locator: str) -> bool:
        return await self.page.locator(locator).is_editable()

    # =========================================================================
    # Navigation
    # =========================================================================

    async def navigate(self) -> None:
        """Navigate to this page object's own URL."""
        with allure.step(f"Navigate to {self.URL_PATH}"):
            await self.page.goto(self.url)
            logger.debug(f"Navigated to: {self.url}")

    async def redirect_to_url(self, url: str) -> None:
        with allure.step(f"Go to {url}"):
            await self.page.goto(url)

    async def reload_page(self) -> None:
        await self.page.reload()

    async def redirect_back(self) -> None:
        await self.page.go_back()

    async def redirect_forward(self) -> None:
        await self.page.go_forward()

    # =========================================================================
    # Wait Utilities
    # =========================================================================

    async def wait_for_element(
        self,
        locator: str,
        state: str = "visible",
        timeout: Optional[float] = None,
    ) -> None:
        """
        Wait for element to reach specified state.

        Args:
            locator: Element selector
            state: Target state - 'visible', 'hidden', 'attached', 'detached'
            timeout: Timeout in milliseconds (None uses the page default)

        Raises:
            playwright.async_api.TimeoutError: state not reached in time
        """
        await self.page.locator(locator).wait_for(state=state, timeout=timeout)

    async def wait_for_element_visible(self, locator: str, timeout: Optional[float] = None) -> None:
        await self.wait_for_element(locator, state="visible", timeout=timeout)

    async def wait_for_element_hidden(self, locator: str, timeout: Optional[float] = None) -> None:
        await self.wait_for_element(locator, state="hidden", timeout=timeout)

    async def wait_for_element_present(self, locator: str, timeout: Optional[float] = None) -> None:
        await self.wait_for_element(locator, state="attached", timeout=timeout)

    async def wait_for_element_stale(self, locator: str, timeout: Optional[float] = None) -> None:
        await self.wait_for_element(locator, state="detached", timeout=timeout)

    async def wait_for_page_load(self, max_retries: int = 10) -> None:
        """
        Wait until the document reports ``readyState == "complete"``.

        Waits for the root element and DOMContentLoaded, then polls the ready
        state up to ``max_retries`` times, pausing between polls. Never raises:
        running out of retries logs a warning, any error is logged and dropped.

        Args:
            max_retries: Maximum number of ready-state polls
        """
        try:
            await self.page.wait_for_selector("html", state="attached")
            await self.page.wait_for_load_state("domcontentloaded")

            for attempt in range(1, max_retries + 1):
                ready_state = await self.page.evaluate("document.readyState")
                if ready_state == "complete":
                    logger.debug(f"Page load complete after {attempt} poll(s)")
                    return

                await self.page.wait_for_timeout(self.PAGE_LOAD_POLL_INTERVAL_MS)

            logger.warning(
                f'Page did not reach "complete" status within {max_retries} retries'
            )
        except Exception as e:
            logger.error(f"Error waiting for page load: {e}")

    # =========================================================================
    # Screenshot and Debug Utilities
    # =========================================================================

    async def screenshot(
        self,
        name: str,
        full_page: bool = False,
        attach_to_allure: bool = True,
    ) -> Path:
        """
        Take screenshot and optionally attach to Allure.

        Args:
            name: Screenshot name (without extension)
            full_page: Capture full scrollable page
            attach_to_allure: Whether to attach to Allure report

        Returns:
            Path to saved screenshot
        """
        SCREENSHOT_DIR.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = SCREENSHOT_DIR / f"{name}_{timestamp}.png"

        await self.page.screenshot(path=str(filepath), full_page=full_page)

        if attach_to_allure:
            allure.attach.file(
                str(filepath),
                name=name,
                attachment_type=allure.attachment_type.PNG,
            )

        logger.debug(f"Screenshot saved: {filepath}")
        return filepath


__all__ = [
    "BasePage",
    "PageBase",
    "page_target",
    "frame_target",
]

# Backward-compatible alias (many Page Objects prefer PageBase naming)
PageBase = BasePage
