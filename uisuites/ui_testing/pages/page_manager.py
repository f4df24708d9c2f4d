"""
================================================================================
Page Manager
================================================================================

Single entry point to the page objects of one test.

Constructor-level dependency injection: every page object is created once,
from the same Playwright page, when the manager is built. Tests then reach
them through the `navigate_to()` / `on_*()` accessors instead of
constructing page objects themselves.

Usage:
    pm = PageManager(page)
    await pm.navigate_to().form_layouts_page()
    await pm.on_form_layouts_page().submit_inline_form_with_name_email_and_checkbox(
        "John Smith", "john@test.com", True
    )

================================================================================
"""

from __future__ import annotations

from playwright.async_api import Page

from .ajax_page import AjaxPage
from .datepicker_page import DatepickerPage
from .form_layouts_page import FormLayoutsPage
from .header_page import HeaderPage
from .navigation_page import NavigationPage
from .overlays_page import OverlaysPage
from .smart_table_page import SmartTablePage


class PageManager:
    """Holds one instance of each page object, all sharing one page."""

    def __init__(self, page: Page, base_url: str = ""):
        self.page = page
        self._navigation_page = NavigationPage(page, base_url)
        self._form_layouts_page = FormLayoutsPage(page, base_url)
        self._datepicker_page = DatepickerPage(page, base_url)
        self._smart_table_page = SmartTablePage(page, base_url)
        self._overlays_page = OverlaysPage(page, base_url)
        self._header_page = HeaderPage(page, base_url)
        # Lives on another host; takes its base URL from ui.playground_url.
        self._ajax_page = AjaxPage(page)

    async def open_dashboard(self) -> None:
        """Go to the landing dashboard of the application."""
        await self._navigation_page.navigate()

    def navigate_to(self) -> NavigationPage:
        return self._navigation_page

    def on_form_layouts_page(self) -> FormLayoutsPage:
        return self._form_layouts_page

    def on_datepicker_page(self) -> DatepickerPage:
        return self._datepicker_page

    def on_smart_table_page(self) -> SmartTablePage:
        return self._smart_table_page

    def on_overlays_page(self) -> OverlaysPage:
        return self._overlays_page

    def on_header(self) -> HeaderPage:
        return self._header_page

    def on_ajax_page(self) -> AjaxPage:
        return self._ajax_page
