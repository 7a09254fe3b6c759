# ================================================================================
# Element Highlight Module
# ================================================================================
#
# Transient visual marking of elements before they are acted upon, so a person
# watching a headed run can follow what the test is doing.
#
# Key Features:
#   - Record, replace and restore the element's inline border
#   - Configurable border, duration and on/off switch
#   - Decorator that runs exactly one highlight before any page-object action
#
# ================================================================================

from __future__ import annotations

import inspect
from functools import wraps
from typing import Any, Awaitable, Callable, Optional, TypeVar

import allure
from loguru import logger
from playwright.async_api import Locator, Page

from .config_loader import DEFAULTS, ConfigLoader


T = TypeVar("T")

DEFAULT_BORDER = DEFAULTS["ui"]["highlight"]["border"]
DEFAULT_DURATION_MS = DEFAULTS["ui"]["highlight"]["duration_ms"]

READ_BORDER_JS = "el => el.style.border"
APPLY_BORDER_JS = "(el, border) => { el.style.border = border; }"


class Highlighter:
    """
    Applies a temporary dashed border to an element.

    The element's inline ``style.border`` is read first and written back after
    the pause, so the page is left as it was found.

    Example:
        highlighter = Highlighter(page, duration_ms=200)
        await highlighter.highlight(page.locator("#submit"))
    """

    def __init__(
        self,
        page: Page,
        border: str = DEFAULT_BORDER,
        duration_ms: float = DEFAULT_DURATION_MS,
        enabled: bool = True,
    ):
        """
        Args:
            page: Playwright Page used for the pause between mark and restore
            border: CSS border value applied while highlighted
            duration_ms: How long the marker stays on, in milliseconds
            enabled: When False, highlight() does nothing
        """
        self.page = page
        self.border = border
        self.duration_ms = duration_ms
        self.enabled = enabled

    @classmethod
    def from_config(cls, page: Page, config: Optional[ConfigLoader] = None) -> "Highlighter":
        """Build a Highlighter from the ``ui.highlight.*`` settings."""
        config = config or ConfigLoader()
        return cls(
            page,
            border=config.get("ui.highlight.border"),
            duration_ms=config.get("ui.highlight.duration_ms"),
            enabled=config.get("ui.highlight.enabled"),
        )

    async def highlight(self, target: Locator) -> None:
        """
        Mark ``target``, pause, then restore its original border.

        Driver errors (no matching element, strict mode violation) propagate.
        """
        if not self.enabled:
            return

        original_border = await target.evaluate(READ_BORDER_JS)
        await target.evaluate(APPLY_BORDER_JS, self.border)
        try:
            await self.page.wait_for_timeout(self.duration_ms)
        finally:
            await target.evaluate(APPLY_BORDER_JS, original_border)

    async def perform(self, target: Locator, action: Callable[[], Awaitable[T]]) -> T:
        """Highlight ``target`` and then await ``action()``."""
        await self.highlight(target)
        return await action()


def with_highlight(resolve: Callable[..., Locator], title: str):
    """
    Decorator that runs an action inside an Allure step, highlighting the
    action's target first.

    The decorated coroutine must belong to an object exposing ``highlighter``.
    The step covers both the highlight and the action, so a failure in either
    is reported on the step.

    Args:
        resolve: Called as ``resolve(self, *args)`` with the action's arguments
            in positional order; returns the Locator to highlight.
        title: Step title, formatted with the action's arguments by name
            (e.g. "Click: {locator}").
    """

    def decorator(func: Callable[..., Awaitable[T]]):
        signature = inspect.signature(func)

        @wraps(func)
        async def wrapper(self, *args: Any, **kwargs: Any) -> T:
            bound = signature.bind(self, *args, **kwargs)
            bound.apply_defaults()
            step_title = title.format(**bound.arguments)

            with allure.step(step_title):
                # keyword-passed selectors are moved into positional order for resolve()
                target = resolve(*bound.args)
                logger.debug(f"{func.__name__} -> {target}")
                return await self.highlighter.perform(
                    target, lambda: func(self, *args, **kwargs)
                )

        return wrapper

    return decorator


__all__ = [
    "Highlighter",
    "with_highlight",
    "DEFAULT_BORDER",
    "DEFAULT_DURATION_MS",
    "READ_BORDER_JS",
    "APPLY_BORDER_JS",
]
