"""
================================================================================
page_kit
================================================================================

Page object base class for Playwright UI test suites.

Modules:
    - framework: BasePage, highlighting, frame scope, browser lifecycle, config
    - pages: Example page objects built on BasePage
    - common: Logging setup

Example:
    from page_kit.framework import BasePage

    class SearchPage(BasePage):
        URL_PATH = "/search"

        async def search(self, term: str) -> None:
            await self.fill_element("#q", term)
            await self.click_to_element("button[type=submit]")
            await self.wait_for_page_load(5)

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "framework",
    "pages",
]
