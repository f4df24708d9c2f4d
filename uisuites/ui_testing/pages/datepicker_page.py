"""
================================================================================
Datepicker Page Object
================================================================================

Date selection on Forms > Datepicker.

The calendar opens on the current month. To pick a date N days ahead the
page object pages forward until the header shows the target month, then
clicks the day cell. Every selection method returns the text the picker
input is expected to show ("Dec 1, 2025" or "Dec 1, 2025 - Dec 5, 2025"),
so tests can assert it with `expect(...).to_have_value(...)`.

================================================================================
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Optional

import allure
from loguru import logger
from playwright.async_api import Locator

from uisuites.ui_testing.framework import locators
from uisuites.ui_testing.framework.errors import ElementNotFoundError
from uisuites.ui_testing.framework.helper_base import HelperBase


MAX_MONTHS_AHEAD = 24


def format_picker_date(value: date) -> str:
    """Date as the picker input renders it, e.g. 'Dec 1, 2025'."""
    return f"{value:%b} {value.day}, {value.year}"


def calendar_header(value: date) -> str:
    """Month/year as the calendar header renders it, e.g. 'Dec 2025'."""
    return f"{value:%b} {value.year}"


class DatepickerPage(HelperBase):
    """Datepicker page object."""

    @property
    def form_picker_input(self) -> Locator:
        return self.page.get_by_placeholder(locators.FORM_PICKER_PLACEHOLDER)

    @property
    def range_picker_input(self) -> Locator:
        return self.page.get_by_placeholder(locators.RANGE_PICKER_PLACEHOLDER)

    @allure.step("Select common datepicker date {number_of_days_from_today} day(s) from today")
    async def select_common_datepicker_date_from_today(
        self,
        number_of_days_from_today: int,
        today: Optional[date] = None,
    ) -> str:
        """
        Pick a date relative to today in the common picker.

        Returns:
            Expected input value, e.g. 'Dec 1, 2025'
        """
        if number_of_days_from_today < 0:
            raise ValueError("Only today or future dates can be selected")

        await self.form_picker_input.click()
        return await self._select_date_in_the_calendar(
            number_of_days_from_today, locators.DAY_CELL, today
        )

    @allure.step("Select datepicker range {start_day_from_today}..{end_day_from_today} day(s) from today")
    async def select_datepicker_with_range_from_today(
        self,
        start_day_from_today: int,
        end_day_from_today: int,
        today: Optional[date] = None,
    ) -> str:
        """
        Pick a date range relative to today in the range picker.

        Returns:
            Expected input value, e.g. 'Dec 1, 2025 - Dec 5, 2025'
        """
        if start_day_from_today < 0 or end_day_from_today < start_day_from_today:
            raise ValueError(
                f"Invalid range: {start_day_from_today}..{end_day_from_today}"
            )

        await self.range_picker_input.click()
        start = await self._select_date_in_the_calendar(
            start_day_from_today, locators.RANGE_DAY_CELL, today
        )
        end = await self._select_date_in_the_calendar(
            end_day_from_today, locators.RANGE_DAY_CELL, today
        )
        return f"{start} - {end}"

    @allure.step("Select day {day} of the current month")
    async def select_common_datepicker_day_of_current_month(
        self,
        day: int,
        today: Optional[date] = None,
    ) -> str:
        today = today or date.today()
        target = today.replace(day=day)

        await self.form_picker_input.click()
        await self.page.locator(locators.DAY_CELL).get_by_text(
            str(target.day), exact=True
        ).click()
        return format_picker_date(target)

    async def _select_date_in_the_calendar(
        self,
        number_of_days_from_today: int,
        day_cell_selector: str,
        today: Optional[date] = None,
    ) -> str:
        target = (today or date.today()) + timedelta(days=number_of_days_from_today)
        expected_month_and_year = calendar_header(target)

        header = self.page.locator(locators.CALENDAR_VIEW_MODE)
        calendar_month_and_year = await header.text_content() or ""
        pages_turned = 0
        while expected_month_and_year not in calendar_month_and_year:
            if pages_turned >= MAX_MONTHS_AHEAD:
                raise ElementNotFoundError(
                    f"Calendar never showed '{expected_month_and_year}' "
                    f"(last header: '{calendar_month_and_year.strip()}')"
                )
            await self.page.locator(locators.CALENDAR_NEXT_MONTH).click()
            pages_turned += 1
            calendar_month_and_year = await header.text_content() or ""

        await self.page.locator(day_cell_selector).get_by_text(
            str(target.day), exact=True
        ).click()

        logger.debug(f"Selected {target.isoformat()} after {pages_turned} month(s)")
        return format_picker_date(target)
