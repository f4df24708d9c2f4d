"""
================================================================================
AJAX Page Object (UI Testing Playground)
================================================================================

http://uitestingplayground.com/ajax - a button that loads a label after a
server-side delay of about 15 seconds. Used to exercise auto-waiting and
custom timeouts.

================================================================================
"""

from __future__ import annotations

import allure
from playwright.async_api import Locator

from uisuites.ui_testing.framework import locators
from uisuites.ui_testing.framework.config_loader import ConfigLoader
from uisuites.ui_testing.framework.helper_base import HelperBase


class AjaxPage(HelperBase):
    """AJAX demo page object."""

    URL_PATH = "/ajax"
    SUCCESS_TEXT = locators.AJAX_SUCCESS_TEXT

    def __init__(self, page, base_url: str = ""):
        if not base_url:
            base_url = ConfigLoader().playground_url
        super().__init__(page, base_url)

    @property
    def success_message(self) -> Locator:
        return self.page.locator(locators.AJAX_SUCCESS)

    @allure.step("Open AJAX page and trigger the request")
    async def open_and_trigger(self) -> None:
        await self.navigate()
        await self.trigger_ajax_request()

    async def trigger_ajax_request(self) -> None:
        await self.page.get_by_text(locators.AJAX_BUTTON_TEXT).click()
