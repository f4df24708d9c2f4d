"""
================================================================================
Modal & Overlays Page Object
================================================================================

Toastr configuration checkboxes and tooltips.

================================================================================
"""

from __future__ import annotations

from typing import List

import allure
from playwright.async_api import Locator

from uisuites.ui_testing.framework import locators
from uisuites.ui_testing.framework.helper_base import HelperBase


class OverlaysPage(HelperBase):
    """Toastr and Tooltip page object."""

    @property
    def tooltip(self) -> Locator:
        return self.page.locator(locators.TOOLTIP)

    @allure.step("Check every checkbox on the page")
    async def check_all_checkboxes(self) -> List[bool]:
        """
        Force-check each checkbox (nb-checkbox hides the native input).

        Returns:
            The checked state of every checkbox after the click
        """
        states = []
        for box in await self.page.get_by_role("checkbox").all():
            await box.check(force=True)
            states.append(await box.is_checked())
        return states

    @allure.step("Uncheck every checkbox on the page")
    async def uncheck_all_checkboxes(self) -> List[bool]:
        states = []
        for box in await self.page.get_by_role("checkbox").all():
            await box.uncheck(force=True)
            states.append(await box.is_checked())
        return states

    @allure.step("Hover button '{name}'")
    async def hover_tooltip_button(self, name: str) -> None:
        await self.page.get_by_role("button", name=name).hover(force=True)

    async def tooltip_text(self) -> str:
        return (await self.tooltip.text_content() or "").strip()
