"""
================================================================================
Sidebar Navigation UI Tests (Async / Playwright)
================================================================================

Navigation through the Forms and Tables & Data menus, including a visual
check of the "Using the Grid" card after choosing a radio option.

================================================================================
"""

import re

import allure
import pytest
import pytest_asyncio
from loguru import logger
from playwright.async_api import Page, expect

from uisuites.ui_testing.framework import locators
from uisuites.ui_testing.framework.visual import assert_matches_baseline


pytestmark = pytest.mark.asyncio(loop_scope="session")


@allure.epic("UI Testing")
@allure.feature("Navigation")
@allure.story("Forms")
@pytest.mark.forms
class TestFormsNavigation:
    """Forms menu suite."""

    @pytest_asyncio.fixture(loop_scope="session", autouse=True)
    async def open_forms_menu(self, dashboard: Page):
        await dashboard.get_by_role("link", name="Forms").click()
        logger.debug("Forms menu opened")

    @allure.title("Form Layouts radio selection matches the stored snapshot")
    @allure.severity(allure.severity_level.CRITICAL)
    @pytest.mark.P1
    @pytest.mark.visual
    async def test_navigate_forms_and_click_radio_button(self, page: Page):
        await page.get_by_role("link", name="Form Layouts").click()
        using_the_grid_form = page.locator(locators.CARD, has_text=locators.FORM_CARDS["grid"])

        await using_the_grid_form.get_by_role("radio", name="Option 2").check(force=True)
        radio_status = await using_the_grid_form.get_by_role("radio", name="Option 1").is_checked()
        logger.info(f"Option 1 checked: {radio_status}")
        assert not radio_status

        await assert_matches_baseline(using_the_grid_form, "using_the_grid_option_2", max_diff_pixels=50)

    @allure.title("Datepicker page opens")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P2
    async def test_navigate_datepicker(self, page: Page):
        await page.get_by_role("link", name="Datepicker").click()
        await expect(page.get_by_placeholder(locators.FORM_PICKER_PLACEHOLDER)).to_be_visible()


@allure.epic("UI Testing")
@allure.feature("Navigation")
@allure.story("Tables & Data")
@pytest.mark.tables
class TestTablesNavigation:
    """Tables & Data menu suite."""

    @pytest_asyncio.fixture(loop_scope="session", autouse=True)
    async def open_tables_menu(self, dashboard: Page):
        await dashboard.get_by_role("link", name="Tables & Data").click()
        logger.debug("Tables & Data menu opened")

    @allure.title("Smart Table page opens")
    @pytest.mark.P2
    async def test_navigate_smart_table(self, page: Page):
        await page.get_by_role("link", name="Smart Table").click()
        await expect(page.get_by_role("table")).to_be_visible()

    @allure.title("Tree Grid page opens")
    @pytest.mark.P2
    async def test_navigate_tree_grid(self, page: Page):
        await page.get_by_role("link", name="Tree Grid").click()
        await expect(page).to_have_url(re.compile(r"tree-grid"))
