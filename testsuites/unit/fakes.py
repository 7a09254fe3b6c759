"""
================================================================================
Playwright Fakes
================================================================================

In-memory stand-ins for Playwright's async Page / Locator / FrameLocator so the
page framework can be exercised without a browser.

Every driver call is appended to `FakePage.calls` as a tuple, which lets tests
assert on the exact order of highlight and action steps.

================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import allure_commons
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from page_kit.framework.highlight import APPLY_BORDER_JS, READ_BORDER_JS


@dataclass
class FakeElement:
    text: str = ""
    attributes: Dict[str, str] = field(default_factory=dict)
    value: str = ""
    border: str = ""
    checked: bool = False
    visible: bool = True
    disabled: bool = False
    editable: bool = True
    files: List[str] = field(default_factory=list)
    selected_label: Optional[str] = None


class FakeLocator:
    def __init__(self, page: "FakePage", selector: str, elements: List[FakeElement]):
        self.page = page
        self.selector = selector
        self.elements = elements

    def __repr__(self) -> str:
        return f"<FakeLocator selector={self.selector!r}>"

    def _single(self) -> FakeElement:
        if not self.elements:
            raise PlaywrightTimeoutError(
                f"Timeout 30000ms exceeded.\nwaiting for locator(\"{self.selector}\")"
            )
        if len(self.elements) > 1:
            raise PlaywrightError(
                f"strict mode violation: locator(\"{self.selector}\") "
                f"resolved to {len(self.elements)} elements"
            )
        return self.elements[0]

    def _record(self, *call: Any) -> None:
        self.page.calls.append(call)

    async def evaluate(self, expression: str, arg: Any = None) -> Any:
        element = self._single()
        if expression == READ_BORDER_JS:
            return element.border
        if expression == APPLY_BORDER_JS:
            element.border = arg
            self._record("border", self.selector, arg)
            return None
        if "display" in expression:
            element.visible = False
            self._record("hide", self.selector)
            return None
        raise NotImplementedError(expression)

    async def click(self, button: str = "left") -> None:
        self._single()
        self._record("click", self.selector, button)

    async def fill(self, value: str) -> None:
        self._single().value = value
        self._record("fill", self.selector, value)

    async def select_option(self, label: Optional[str] = None) -> List[str]:
        self._single().selected_label = label
        self._record("select_option", self.selector, label)
        return [label]

    async def blur(self) -> None:
        self._single()
        self._record("blur", self.selector)

    async def set_input_files(self, files: Any) -> None:
        self._single().files = files if isinstance(files, list) else [files]
        self._record("set_input_files", self.selector, files)

    async def scroll_into_view_if_needed(self) -> None:
        self._single()
        self._record("scroll_into_view", self.selector)

    async def inner_text(self) -> str:
        return self._single().text

    async def get_attribute(self, name: str) -> Optional[str]:
        return self._single().attributes.get(name)

    async def input_value(self) -> str:
        return self._single().value

    async def is_checked(self) -> bool:
        return self._single().checked

    async def is_visible(self) -> bool:
        return bool(self.elements) and self.elements[0].visible

    async def is_hidden(self) -> bool:
        return not await self.is_visible()

    async def is_disabled(self) -> bool:
        return self._single().disabled

    async def is_editable(self) -> bool:
        return self._single().editable

    async def count(self) -> int:
        return len(self.elements)

    async def all(self) -> List["FakeLocator"]:
        return [
            FakeLocator(self.page, f"{self.selector} >> nth={i}", [element])
            for i, element in enumerate(self.elements)
        ]

    async def wait_for(self, state: str = "visible", timeout: Optional[float] = None) -> None:
        self._record("wait_for", self.selector, state, timeout)
        present = bool(self.elements)
        visible = present and self.elements[0].visible
        reached = {
            "visible": visible,
            "hidden": not visible,
            "attached": present,
            "detached": not present,
        }[state]
        if not reached:
            raise PlaywrightTimeoutError(
                f"Timeout {timeout}ms exceeded.\n"
                f"waiting for locator(\"{self.selector}\") to be {state}"
            )


class FakeFrameLocator:
    def __init__(self, page: "FakePage", frame_selector: str):
        self.page = page
        self.frame_selector = frame_selector

    def locator(self, selector: str) -> FakeLocator:
        frame = self.page.frames.get(self.frame_selector)
        elements = frame.get(selector, []) if frame is not None else []
        return FakeLocator(self.page, f"{self.frame_selector} >> {selector}", elements)


class FakePage:
    def __init__(
        self,
        elements: Optional[Dict[str, List[FakeElement]]] = None,
        frames: Optional[Dict[str, Dict[str, List[FakeElement]]]] = None,
        url: str = "about:blank",
    ):
        self.elements = elements or {}
        self.frames = frames or {}
        self.url = url
        self.calls: List[tuple] = []
        self.ready_states: List[str] = ["complete"]
        self.load_error: Optional[Exception] = None
        self.sleep_error: Optional[Exception] = None
        self.html = "<html><body></body></html>"

    def locator(self, selector: str) -> FakeLocator:
        return FakeLocator(self, selector, self.elements.get(selector, []))

    def frame_locator(self, selector: str) -> FakeFrameLocator:
        return FakeFrameLocator(self, selector)

    async def click(self, selector: str, button: str = "left") -> None:
        await self.locator(selector).click(button=button)

    async def dblclick(self, selector: str) -> None:
        self.locator(selector)._single()
        self.calls.append(("dblclick", selector))

    async def hover(self, selector: str) -> None:
        self.locator(selector)._single()
        self.calls.append(("hover", selector))

    async def fill(self, selector: str, value: str) -> None:
        await self.locator(selector).fill(value)

    async def check(self, selector: str) -> None:
        self.locator(selector)._single().checked = True
        self.calls.append(("check", selector))

    async def uncheck(self, selector: str) -> None:
        self.locator(selector)._single().checked = False
        self.calls.append(("uncheck", selector))

    async def goto(self, url: str) -> None:
        self.url = url
        self.calls.append(("goto", url))

    async def reload(self) -> None:
        self.calls.append(("reload",))

    async def go_back(self) -> None:
        self.calls.append(("go_back",))

    async def go_forward(self) -> None:
        self.calls.append(("go_forward",))

    async def content(self) -> str:
        return self.html

    async def evaluate(self, expression: str) -> Any:
        if expression == "document.readyState":
            state = self.ready_states.pop(0) if len(self.ready_states) > 1 else self.ready_states[0]
            self.calls.append(("ready_state", state))
            return state
        self.calls.append(("evaluate", expression))
        return None

    async def wait_for_timeout(self, timeout: float) -> None:
        self.calls.append(("sleep", timeout))
        if self.sleep_error is not None:
            raise self.sleep_error

    async def wait_for_selector(self, selector: str, state: str = "visible") -> None:
        self.calls.append(("wait_for_selector", selector, state))
        if self.load_error is not None:
            raise self.load_error

    async def wait_for_load_state(self, state: str = "load") -> None:
        self.calls.append(("wait_for_load_state", state))


def calls_named(page: FakePage, name: str) -> List[tuple]:
    return [call for call in page.calls if call[0] == name]




class StepRecorder:
    """Allure hook listener writing step boundaries into a fake page's call log."""

    def __init__(self, calls: List[tuple]):
        self.calls = calls

    @allure_commons.hookimpl
    def start_step(self, uuid, title, params):
        self.calls.append(("step_start", title))

    @allure_commons.hookimpl
    def stop_step(self, uuid, exc_type, exc_val, exc_tb):
        self.calls.append(("step_stop", exc_type))
