"""
================================================================================
Helper Base
================================================================================

Foundation class shared by every page object.

Provides:
    - The shared Playwright page and application base URL
    - Navigation to the page URL or a path under the base URL
    - Fixed delays in seconds (for menus with expand animations)
    - Screenshot and failure-capture utilities with Allure attachments

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Optional

import allure
from loguru import logger
from playwright.async_api import Page

from .config_loader import ConfigLoader


SCREENSHOT_DIR = Path(__file__).parent.parent / "screenshots"


class HelperBase:
    """
    Base class for all page objects.

    Usage:
        class FormLayoutsPage(HelperBase):
            async def submit(self, email: str):
                card = self.page.locator("nb-card", has_text="Basic form")
                await card.get_by_role("textbox", name="Email").fill(email)
    """

    # Override in subclasses that own a URL
    URL_PATH: str = ""

    def __init__(self, page: Page, base_url: str = ""):
        """
        Initialize page object.

        Args:
            page: Playwright Page shared by all page objects of a test
            base_url: Application base URL (config `ui.base_url` if empty)
        """
        self.page = page
        if not base_url:
            base_url = ConfigLoader().base_url
        self.base_url = base_url.rstrip("/")

    @property
    def url(self) -> str:
        """Full URL of this page."""
        path = self.URL_PATH or ConfigLoader().landing_path
        return f"{self.base_url}{path}"

    async def wait_for_time_in_seconds(self, seconds: float) -> None:
        """Pause the test for a fixed time (delegates to page.wait_for_timeout)."""
        await self.page.wait_for_timeout(seconds * 1000)

    async def navigate(
        self,
        path: Optional[str] = None,
        wait_for: str = "domcontentloaded",
    ) -> None:
        """
        Navigate to this page, or to `path` under the base URL.

        Args:
            path: URL path; defaults to the page's own URL
            wait_for: 'load', 'domcontentloaded', 'networkidle' or 'commit'
        """
        target = f"{self.base_url}{path}" if path else self.url
        with allure.step(f"Navigate to {target}"):
            await self.page.goto(target, wait_until=wait_for)
            logger.debug(f"Navigated to: {target}")

    async def screenshot(
        self,
        name: str,
        full_page: bool = False,
        attach_to_allure: bool = True,
    ) -> Path:
        """
        Take screenshot and optionally attach to Allure.

        Args:
            name: Screenshot name (without extension)
            full_page: Capture full scrollable page
            attach_to_allure: Whether to attach to Allure report

        Returns:
            Path to saved screenshot
        """
        SCREENSHOT_DIR.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = SCREENSHOT_DIR / f"{name}_{timestamp}.png"

        await self.page.screenshot(path=str(filepath), full_page=full_page)

        if attach_to_allure:
            allure.attach.file(
                str(filepath),
                name=name,
                attachment_type=allure.attachment_type.PNG,
            )

        logger.debug(f"Screenshot saved: {filepath}")
        return filepath

    async def capture_failure(self, test_name: str) -> None:
        """Attach a full-page screenshot and the current URL to the report."""
        with allure.step("Capture failure details"):
            await self.screenshot(f"failure_{test_name}", full_page=True)
            allure.attach(
                self.page.url,
                name="Current URL",
                attachment_type=allure.attachment_type.TEXT,
            )


__all__ = [
    "HelperBase",
    "SCREENSHOT_DIR",
]
