"""
================================================================================
Browser Manager
================================================================================

Browser lifecycle management for UI automation.

Features:
    - One browser per test session (per xdist worker)
    - Isolated context per test with the application base URL preset
    - Browser settings from configuration (type, headless, slow_mo, viewport)
    - Reachability probe so suites can skip when the app is not running

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx
from loguru import logger
from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Page,
    Playwright,
)

from .config_loader import SUPPORTED_BROWSERS, ConfigLoader, ConfigurationError


class BrowserManager:
    """
    Manages the browser instance and per-test contexts.

    Usage:
        async with BrowserManager() as manager:
            page = await manager.new_page()
            await page.goto("/pages/iot-dashboard")
    """

    DEFAULT_LAUNCH_OPTIONS: Dict[str, Any] = {
        "headless": True,
        "args": ["--ignore-certificate-errors"],
    }

    DEFAULT_CONTEXT_OPTIONS: Dict[str, Any] = {
        "viewport": {"width": 1920, "height": 1080},
        "ignore_https_errors": True,
    }

    def __init__(
        self,
        headless: Optional[bool] = None,
        browser_type: Optional[str] = None,
        base_url: Optional[str] = None,
        slow_mo: Optional[int] = None,
    ):
        """
        Initialize browser manager. Unset arguments come from config.

        Args:
            headless: Run browser in headless mode (ui.headless)
            browser_type: 'chromium', 'firefox' or 'webkit' (ui.browser)
            base_url: Base URL for relative navigation (ui.base_url)
            slow_mo: Delay in ms between Playwright operations (ui.slow_mo)
        """
        config = ConfigLoader()
        self.headless = headless if headless is not None else config.headless
        self.browser_type = browser_type or config.browser
        self.base_url = base_url or config.base_url
        self.slow_mo = slow_mo if slow_mo is not None else config.slow_mo
        self.viewport = config.viewport

        if self.browser_type not in SUPPORTED_BROWSERS:
            raise ConfigurationError(
                f"Unsupported browser '{self.browser_type}'. "
                f"Choose one of: {', '.join(SUPPORTED_BROWSERS)}"
            )

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._contexts: List[BrowserContext] = []

    async def __aenter__(self) -> "BrowserManager":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def start(self) -> Browser:
        """Start Playwright and launch the browser."""
        self._playwright = await async_playwright().start()
        browser_launcher = getattr(self._playwright, self.browser_type)

        launch_options = {
            **self.DEFAULT_LAUNCH_OPTIONS,
            "headless": self.headless,
            "slow_mo": self.slow_mo,
        }

        self._browser = await browser_launcher.launch(**launch_options)
        logger.debug(
            f"Browser started: {self.browser_type} "
            f"(headless={self.headless}, slow_mo={self.slow_mo})"
        )
        return self._browser

    async def close(self) -> None:
        """Close all contexts, the browser and Playwright."""
        for context in self._contexts:
            await context.close()
        self._contexts.clear()

        if self._browser:
            await self._browser.close()
            self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

        logger.debug("Browser closed")

    async def new_context(self, **options: Any) -> BrowserContext:
        """
        Create a new isolated browser context (own cookies and storage).

        `base_url` is preset so tests can call `page.goto("/pages/...")`.
        """
        if not self._browser:
            raise RuntimeError("Browser not started. Call start() first.")

        context_options = {
            **self.DEFAULT_CONTEXT_OPTIONS,
            "viewport": self.viewport,
            "base_url": self.base_url,
            **options,
        }

        context = await self._browser.new_context(**context_options)
        self._contexts.append(context)
        return context

    async def release_context(self, context: BrowserContext) -> None:
        """Close a context created by this manager."""
        if context in self._contexts:
            self._contexts.remove(context)
        await context.close()

    async def new_page(
        self,
        context: Optional[BrowserContext] = None,
        **context_options: Any,
    ) -> Page:
        """Create a page in a new or existing context."""
        if context is None:
            context = await self.new_context(**context_options)
        return await context.new_page()

    @property
    def browser(self) -> Optional[Browser]:
        return self._browser


async def is_url_reachable(url: str, timeout: float = 5.0) -> bool:
    """
    Check whether an application answers HTTP requests at `url`.

    Any HTTP status counts as reachable; connection problems do not.
    """
    try:
        async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as client:
            response = await client.get(url)
        logger.debug(f"Probe {url} -> {response.status_code}")
        return True
    except httpx.HTTPError as e:
        logger.warning(f"Application not reachable at {url}: {e}")
        return False


__all__ = [
    "BrowserManager",
    "SUPPORTED_BROWSERS",
    "is_url_reachable",
]
