"""
================================================================================
Frame Scope
================================================================================

Resolves elements living inside an embedded frame: the frame is found by its
own selector, then the element is found inside it.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from playwright.async_api import FrameLocator, Locator, Page


class FrameScope:
    """
    Selector-of-selector lookup for iframes.

    Usage:
        scope = FrameScope(page, "iframe#payment")
        await scope.locator("#card-number").fill("4242")
    """

    def __init__(self, page: Page, frame_selector: str):
        self.page = page
        self.frame_selector = frame_selector

    @property
    def frame(self) -> FrameLocator:
        return self.page.frame_locator(self.frame_selector)

    def locator(self, selector: str) -> Locator:
        """Locator for ``selector`` inside the frame."""
        return self.frame.locator(selector)

    def __repr__(self) -> str:
        return f"FrameScope({self.frame_selector!r})"


__all__ = [
    "FrameScope",
]
