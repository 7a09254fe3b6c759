"""
================================================================================
BasePage Waits, Frames and Navigation UI Tests (Async / Playwright)
================================================================================
"""

import allure
import pytest
from playwright.async_api import TimeoutError as PlaywrightTimeoutError


DELAYED_HTML = """
<html>
  <body>
    <div id="banner" style="display: none">Saved</div>
    <div id="spinner">Loading</div>
    <script>
      setTimeout(() => { document.getElementById('banner').style.display = 'block'; }, 200);
      setTimeout(() => { document.getElementById('spinner').remove(); }, 200);
    </script>
  </body>
</html>
"""

FRAME_HTML = """
<html>
  <body>
    <iframe id="editor" srcdoc="
      <input id='title'>
      <button id='save' onclick='this.dataset.saved = 1'>Save</button>
    "></iframe>
  </body>
</html>
"""


@allure.epic("UI Testing")
@allure.feature("BasePage waits")
class TestWaits:

    @pytest.mark.P0
    @pytest.mark.asyncio
    async def test_waits_resolve_when_state_reached(self, page, base_page):
        await page.set_content(DELAYED_HTML)

        await base_page.wait_for_element_present("#banner", timeout=1000)
        await base_page.wait_for_element_visible("#banner", timeout=3000)
        await base_page.wait_for_element_stale("#spinner", timeout=3000)
        await base_page.wait_for_element_hidden("#spinner", timeout=1000)

        assert await base_page.is_element_visible("#banner") is True

    @pytest.mark.P0
    @pytest.mark.asyncio
    async def test_waits_time_out(self, page, base_page):
        await page.set_content("<div id='hidden' style='display:none'>x</div>")

        with pytest.raises(PlaywrightTimeoutError):
            await base_page.wait_for_element_visible("#hidden", timeout=300)

        with pytest.raises(PlaywrightTimeoutError):
            await base_page.wait_for_element_present("#never", timeout=300)

        with pytest.raises(PlaywrightTimeoutError):
            await base_page.wait_for_element_stale("#hidden", timeout=300)

    @pytest.mark.P1
    @pytest.mark.asyncio
    async def test_wait_for_page_load_returns_on_loaded_page(self, page, base_page):
        await page.set_content("<html><body>ready</body></html>")

        assert await base_page.wait_for_page_load(3) is None
        assert await page.evaluate("document.readyState") == "complete"


@allure.epic("UI Testing")
@allure.feature("BasePage frames")
class TestFrames:

    @pytest.mark.P0
    @pytest.mark.asyncio
    async def test_click_and_fill_in_frame(self, page, base_page):
        await page.set_content(FRAME_HTML)

        await base_page.fill_to_element_in_frame("#editor", "#title", "Release notes")
        await base_page.click_to_element_in_frame("#editor", "#save")

        frame = page.frame_locator("#editor")
        assert await frame.locator("#title").input_value() == "Release notes"
        assert await frame.locator("#save").get_attribute("data-saved") == "1"

    @pytest.mark.P1
    @pytest.mark.asyncio
    async def test_unknown_frame_raises(self, page, base_page):
        await page.set_content(FRAME_HTML)

        with pytest.raises(PlaywrightTimeoutError):
            await base_page.click_to_element_in_frame("#no-such-frame", "#save")

    @pytest.mark.P1
    @pytest.mark.asyncio
    async def test_unknown_inner_element_raises(self, page, base_page):
        await page.set_content(FRAME_HTML)

        with pytest.raises(PlaywrightTimeoutError):
            await base_page.fill_to_element_in_frame("#editor", "#no-such-input", "x")


@allure.epic("UI Testing")
@allure.feature("BasePage navigation")
class TestNavigation:

    @pytest.mark.P2
    @pytest.mark.asyncio
    async def test_back_and_forward(self, base_page):
        first = "data:text/html,<h1 id='title'>first</h1>"
        second = "data:text/html,<h1 id='title'>second</h1>"

        await base_page.redirect_to_url(first)
        await base_page.redirect_to_url(second)
        await base_page.redirect_back()
        assert await base_page.get_element_text("#title") == "first"

        await base_page.redirect_forward()
        assert await base_page.get_element_text("#title") == "second"

        await base_page.reload_page()
        assert (await base_page.get_page_url()).startswith("data:text/html")
