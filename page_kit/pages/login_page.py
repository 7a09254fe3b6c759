"""
================================================================================
Login Page Object (Async / Playwright)
================================================================================

Example page object built on BasePage. Selectors are generic; real projects
should prefer stable `data-testid` attributes.

================================================================================
"""

from __future__ import annotations

import os
from typing import Optional

import allure

from page_kit.framework.page_base import BasePage


class LoginPage(BasePage):
    """Login page object (async)."""

    URL_PATH = "/login"

    USERNAME_INPUT = "input[name='username']"
    PASSWORD_INPUT = "input[name='password']"
    REMEMBER_ME = "input[name='remember']"
    SUBMIT_BUTTON = "button[type='submit']"
    ERROR_MESSAGE = "[data-testid='error-message']"

    async def open(self, max_retries: int = 10) -> "LoginPage":
        with allure.step("Open login page"):
            await self.navigate()
            await self.wait_for_page_load(max_retries)
        return self

    async def login(
        self,
        username: Optional[str] = None,
        password: Optional[str] = None,
        remember_me: bool = False,
    ) -> None:
        """
        Fill the form and submit it.

        Args:
            username: Defaults to `UI_USERNAME` env var (demo-safe).
            password: Defaults to `UI_PASSWORD` env var (demo-safe).
            remember_me: Tick the "remember me" checkbox before submitting.
        """
        if username is None:
            username = os.getenv("UI_USERNAME", "demo_user")
        if password is None:
            password = os.getenv("UI_PASSWORD", "demo_password")

        with allure.step(f"Login (username={username})"):
            await self.fill_element(self.USERNAME_INPUT, username)
            await self.fill_element(self.PASSWORD_INPUT, password)
            if remember_me:
                await self.check_to_element(self.REMEMBER_ME)
            await self.click_to_element(self.SUBMIT_BUTTON)

    async def is_error_displayed(self) -> bool:
        return await self.is_element_visible(self.ERROR_MESSAGE)

    async def get_error_message(self) -> str:
        return await self.get_element_text(self.ERROR_MESSAGE)
