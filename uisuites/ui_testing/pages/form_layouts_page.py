"""
================================================================================
Form Layouts Page Object
================================================================================

Convenience submissions for the cards on Forms > Form Layouts.

================================================================================
"""

from __future__ import annotations

import allure
from loguru import logger
from playwright.async_api import Locator

from uisuites.ui_testing.framework import locators
from uisuites.ui_testing.framework.helper_base import HelperBase


class FormLayoutsPage(HelperBase):
    """Form Layouts page object."""

    def form_card(self, title: str) -> Locator:
        """The nb-card whose text contains `title`."""
        return self.page.locator(locators.CARD, has_text=title)

    @allure.step("Submit 'Using the Grid' form as {email} with option '{option_text}'")
    async def submit_using_the_grid_form_with_credentials_and_select_option(
        self,
        email: str,
        password: str,
        option_text: str,
    ) -> None:
        using_the_grid_form = self.form_card(locators.FORM_CARDS["grid"])

        await using_the_grid_form.get_by_role("textbox", name="Email").fill(email)
        await using_the_grid_form.get_by_role("textbox", name="Password").fill(password)
        await using_the_grid_form.get_by_role("radio", name=option_text).check(force=True)
        await using_the_grid_form.get_by_role("button").click()
        logger.info(f"Submitted grid form for {email} ({option_text})")

    @allure.step("Submit inline form for {name} <{email}> (remember me: {remember_me})")
    async def submit_inline_form_with_name_email_and_checkbox(
        self,
        name: str,
        email: str,
        remember_me: bool,
    ) -> None:
        """
        Fill and submit the inline form.

        Args:
            name: First and last name of the test user
            email: Valid email for the test user
            remember_me: Check "Remember me" so the session is saved
        """
        inline_form = self.form_card(locators.FORM_CARDS["inline"])

        await inline_form.get_by_role("textbox", name="Jane Doe").fill(name)
        await inline_form.get_by_role("textbox", name="Email").fill(email)

        if remember_me:
            await inline_form.get_by_role("checkbox").check(force=True)

        await inline_form.get_by_role("button").click()
        logger.info(f"Submitted inline form for {email}")
