"""
================================================================================
Browser Manager
================================================================================

Browser lifecycle management for test harnesses using page objects.

Page objects never open or close the page they are given; this class is the
owner side: it launches the browser, hands out isolated contexts and pages,
and closes everything at the end.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from loguru import logger
from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Error as PlaywrightError,
    Page,
    Playwright,
)

from .config_loader import ConfigLoader


SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")


class BrowserManager:
    """
    Manages browser instances and contexts for UI testing.

    Usage:
        async with BrowserManager() as manager:
            page = await manager.new_page()
            await page.goto("https://example.com")
    """

    # Default browser launch options
    DEFAULT_LAUNCH_OPTIONS: Dict[str, Any] = {
        "headless": True,
        "args": [
            "--ignore-certificate-errors",
        ],
    }

    # Default context options
    DEFAULT_CONTEXT_OPTIONS: Dict[str, Any] = {
        "viewport": {"width": 1920, "height": 1080},
        "ignore_https_errors": True,
    }

    def __init__(
        self,
        headless: bool = True,
        browser_type: str = "chromium",
        default_timeout: Optional[float] = None,
    ):
        """
        Initialize browser manager.

        Args:
            headless: Run browser in headless mode
            browser_type: Browser to use - 'chromium', 'firefox', 'webkit'
            default_timeout: Default action/wait timeout (ms) for new pages
        """
        if browser_type not in SUPPORTED_BROWSERS:
            raise ValueError(
                f"Unsupported browser '{browser_type}'. "
                f"Expected one of: {', '.join(SUPPORTED_BROWSERS)}"
            )
        self.headless = headless
        self.browser_type = browser_type
        self.default_timeout = default_timeout

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._contexts: List[BrowserContext] = []

    @classmethod
    def from_config(
        cls,
        config: Optional[ConfigLoader] = None,
        **overrides: Any,
    ) -> "BrowserManager":
        """
        Build a manager from the ``ui.*`` settings.

        Args:
            config: Loader to read from (the shared instance if omitted)
            **overrides: Constructor arguments that take precedence over config
        """
        config = config or ConfigLoader()
        settings = {
            "headless": config.get("ui.headless"),
            "browser_type": config.get("ui.browser"),
            "default_timeout": config.get("ui.default_timeout"),
        }
        settings.update(overrides)
        return cls(**settings)

    async def __aenter__(self) -> "BrowserManager":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def start(self) -> None:
        """Start Playwright and launch browser."""
        self._playwright = await async_playwright().start()
        browser_launcher = getattr(self._playwright, self.browser_type)

        launch_options = {
            **self.DEFAULT_LAUNCH_OPTIONS,
            "headless": self.headless,
        }

        self._browser = await browser_launcher.launch(**launch_options)
        logger.debug(
            f"Browser started: {self.browser_type} "
            f"(headless={self.headless})"
        )

    async def close(self) -> None:
        """Close all contexts and browser."""
        for context in self._contexts:
            try:
                await context.close()
            except PlaywrightError as e:
                logger.debug(f"Context already closed: {e}")
        self._contexts.clear()

        if self._browser:
            await self._browser.close()
            self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

        logger.debug("Browser closed")

    async def new_context(self, **options: Any) -> BrowserContext:
        """
        Create new isolated browser context.

        Args:
            **options: Additional context options

        Returns:
            New BrowserContext
        """
        if not self._browser:
            raise RuntimeError("Browser not started. Call start() first.")

        context_options = {**self.DEFAULT_CONTEXT_OPTIONS, **options}
        context = await self._browser.new_context(**context_options)
        if self.default_timeout is not None:
            context.set_default_timeout(self.default_timeout)
        self._contexts.append(context)

        return context

    async def new_page(
        self,
        context: Optional[BrowserContext] = None,
        **context_options: Any,
    ) -> Page:
        """
        Create new page in new or existing context.

        Args:
            context: Existing context to use (creates new if None)
            **context_options: Options for new context

        Returns:
            New Page
        """
        if context is None:
            context = await self.new_context(**context_options)

        return await context.new_page()

    @property
    def browser(self) -> Optional[Browser]:
        """Get browser instance."""
        return self._browser


__all__ = [
    "BrowserManager",
    "SUPPORTED_BROWSERS",
]
