"""
================================================================================
Header Page Object
================================================================================

Theme switcher in the layout header. Each theme paints the header with a
known background color.

================================================================================
"""

from __future__ import annotations

from typing import Dict, List

import allure
from loguru import logger
from playwright.async_api import Locator

from uisuites.ui_testing.framework import locators
from uisuites.ui_testing.framework.helper_base import HelperBase


THEME_HEADER_COLORS: Dict[str, str] = {
    "Light": "rgb(255, 255, 255)",
    "Dark": "rgb(34, 43, 69)",
    "Cosmic": "rgb(50, 50, 89)",
    "Corporate": "rgb(255, 255, 255)",
}


class HeaderPage(HelperBase):
    """Layout header page object."""

    @property
    def header(self) -> Locator:
        return self.page.locator(locators.HEADER)

    @property
    def theme_dropdown(self) -> Locator:
        return self.page.locator(locators.THEME_SELECT)

    @property
    def theme_options(self) -> Locator:
        return self.page.locator(locators.THEME_OPTIONS)

    async def open_theme_menu(self) -> None:
        await self.theme_dropdown.click()

    async def theme_names(self) -> List[str]:
        """Labels of the theme options (menu must be open)."""
        return [name.strip() for name in await self.theme_options.all_text_contents()]

    @allure.step("Select theme {name}")
    async def select_theme(self, name: str) -> str:
        """
        Open the menu if needed and pick a theme.

        Returns:
            The header background color expected for the theme
        """
        if name not in THEME_HEADER_COLORS:
            raise ValueError(f"Unknown theme: {name}")

        if not await self.theme_options.first.is_visible():
            await self.open_theme_menu()
        await self.theme_options.filter(has_text=name).click()
        logger.debug(f"Theme selected: {name}")
        return THEME_HEADER_COLORS[name]
