"""
================================================================================
Smart Table Page Object
================================================================================

Tables & Data > Smart Table (ng2-smart-table).

Highlights:
  - Row lookup by email or by the value of the ID column
  - Inline edit of a row's email
  - Delete with the browser confirm dialog accepted automatically
  - Age filter with polling until the rows re-render

================================================================================
"""

from __future__ import annotations

from typing import List, Optional

import allure
from loguru import logger
from playwright.async_api import Dialog, Locator

from uisuites.ui_testing.framework import locators
from uisuites.ui_testing.framework.helper_base import HelperBase
from uisuites.ui_testing.framework.waits import poll_until


class SmartTablePage(HelperBase):
    """Smart Table page object."""

    def __init__(self, page, base_url: str = ""):
        super().__init__(page, base_url)
        self.dialog_messages: List[str] = []

    @property
    def table(self) -> Locator:
        return self.page.get_by_role("table")

    @property
    def last_dialog_message(self) -> Optional[str]:
        return self.dialog_messages[-1] if self.dialog_messages else None

    def row_by_email(self, email: str) -> Locator:
        return self.table.locator("tr", has_text=email)

    def row_by_id(self, row_id: str) -> Locator:
        """
        Row whose ID column (second cell) equals `row_id`.

        `get_by_role("row", name=...)` alone also matches rows where the
        value appears in another column, e.g. an age of 11.
        """
        return self.page.get_by_role("row", name=row_id).filter(
            has=self.page.locator("td").nth(1).get_by_text(row_id)
        )

    async def _accept_dialog(self, dialog: Dialog) -> None:
        self.dialog_messages.append(dialog.message)
        logger.info(f"Accepting dialog: {dialog.message}")
        await dialog.accept()

    @allure.step("Delete row with email {email}")
    async def delete_row_by_email(self, email: str) -> Optional[str]:
        """
        Click the trash icon of a row and accept the confirm dialog.

        Returns:
            The message of the dialog this click raised, or None
        """
        handler = self._accept_dialog
        seen_before = len(self.dialog_messages)
        self.page.once("dialog", handler)
        await self.row_by_email(email).locator(locators.DELETE_ICON).click()

        if len(self.dialog_messages) == seen_before:
            # No dialog; the one-shot handler must not accept a later one
            self.page.remove_listener("dialog", handler)
            logger.warning(f"No confirm dialog after deleting row {email}")
            return None
        return self.last_dialog_message

    @allure.step("Go to table page {number}")
    async def go_to_table_page(self, number: int) -> None:
        await self.page.locator(locators.TABLE_PAGINATION).get_by_text(str(number)).click()

    @allure.step("Edit email of row {row_id} to {email}")
    async def edit_email_by_id(self, row_id: str, email: str) -> Locator:
        """Edit a row inline and confirm; returns the row locator."""
        target_row = self.row_by_id(row_id)
        await target_row.locator(locators.EDIT_ICON).click()

        email_editor = self.page.locator(locators.INPUT_EDITOR).get_by_placeholder("E-mail")
        await email_editor.clear()
        await email_editor.fill(email)
        await self.page.locator(locators.CONFIRM_ICON).click()
        return target_row

    @allure.step("Filter table by age {age}")
    async def filter_by_age(self, age: str) -> None:
        age_filter = self.page.locator(locators.INPUT_FILTER).get_by_placeholder("Age")
        await age_filter.clear()
        await age_filter.fill(age)

    async def visible_ages(self) -> List[str]:
        """Text of the last (Age) cell of every body row."""
        ages = []
        for row in await self.page.locator(locators.TABLE_ROWS).all():
            cell_value = await row.locator("td").last.text_content()
            ages.append((cell_value or "").strip())
        return ages

    async def shows_no_data(self) -> bool:
        return locators.NO_DATA_TEXT in (await self.table.text_content() or "")

    async def wait_for_age_filter(self, age: str) -> List[str]:
        """
        Wait until the table shows only rows of `age`, or no data at all.

        Returns:
            The ages shown once the filter settled (empty for "No data found")
        """

        async def rows_filtered():
            if await self.shows_no_data():
                return True, []
            ages = await self.visible_ages()
            return bool(ages) and all(value == age for value in ages), ages

        ages = await poll_until(
            rows_filtered,
            scenario="table_filter",
            description=f"Smart table filtered by age {age}",
        )
        logger.info(f"Age filter {age}: {len(ages)} row(s)")
        return ages
