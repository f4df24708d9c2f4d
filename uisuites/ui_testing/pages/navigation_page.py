"""
================================================================================
Navigation Page Object
================================================================================

Sidebar navigation of the ngx-admin dashboard.

Menu groups collapse and expand on click, so a group is only clicked when
its `aria-expanded` attribute reports it collapsed; clicking an expanded
group would hide the item we want.

================================================================================
"""

from __future__ import annotations

import allure
from loguru import logger

from uisuites.ui_testing.framework import locators
from uisuites.ui_testing.framework.helper_base import HelperBase


class NavigationPage(HelperBase):
    """Sidebar menu page object."""

    @allure.step("Open Forms > Form Layouts")
    async def form_layouts_page(self) -> None:
        await self.select_group_menu_item(locators.MENU_GROUPS["forms"])
        await self.page.get_by_text(locators.MENU_ITEMS["form_layouts"]).click()

    @allure.step("Open Forms > Datepicker")
    async def datepicker_page(self) -> None:
        await self.select_group_menu_item(locators.MENU_GROUPS["forms"])
        # Sub-menu slides in; the item is not clickable until it settles.
        await self.wait_for_time_in_seconds(1)
        await self.page.get_by_text(locators.MENU_ITEMS["datepicker"]).click()

    @allure.step("Open Tables & Data > Smart Table")
    async def smart_table_page(self) -> None:
        await self.select_group_menu_item(locators.MENU_GROUPS["tables_data"])
        await self.page.get_by_text(locators.MENU_ITEMS["smart_table"]).click()

    @allure.step("Open Tables & Data > Tree Grid")
    async def tree_grid_page(self) -> None:
        await self.select_group_menu_item(locators.MENU_GROUPS["tables_data"])
        await self.page.get_by_text(locators.MENU_ITEMS["tree_grid"]).click()

    @allure.step("Open Modal & Overlays > Toastr")
    async def toastr_page(self) -> None:
        await self.select_group_menu_item(locators.MENU_GROUPS["modal_overlays"])
        await self.page.get_by_text(locators.MENU_ITEMS["toastr"]).click()

    @allure.step("Open Modal & Overlays > Tooltip")
    async def tooltip_page(self) -> None:
        await self.select_group_menu_item(locators.MENU_GROUPS["modal_overlays"])
        await self.page.get_by_text(locators.MENU_ITEMS["tooltip"]).click()

    async def select_group_menu_item(self, group_item_title: str) -> bool:
        """
        Expand a sidebar group if it is collapsed.

        Returns:
            True if the group was clicked
        """
        group_menu_item = self.page.get_by_title(group_item_title)
        expanded_state = await group_menu_item.get_attribute("aria-expanded")
        if expanded_state == "false":
            await group_menu_item.click()
            logger.debug(f"Expanded menu group: {group_item_title}")
            return True
        return False
