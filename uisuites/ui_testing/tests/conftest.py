"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures for browser management, page objects and test setup/teardown.

Key Features:
- One browser per session (per xdist worker), one context + page per test
- Tests skip when the application under test is not reachable
- Timeout budgets from config, scaled by `slow` / `extend_timeout` markers
- Screenshot and URL attached to Allure when a test fails

All async fixtures run on the session event loop, so tests declare
`pytestmark = pytest.mark.asyncio(loop_scope="session")`.

================================================================================
"""

from typing import AsyncGenerator, Dict

import pytest
import pytest_asyncio
from loguru import logger
from playwright.async_api import BrowserContext, Error as PlaywrightError, Page

from uisuites.ui_testing.framework.browser_manager import BrowserManager, is_url_reachable
from uisuites.ui_testing.framework.config_loader import ConfigLoader
from uisuites.ui_testing.framework.helper_base import HelperBase
from uisuites.ui_testing.framework.soft_assert import SoftAssertions
from uisuites.ui_testing.framework.timeouts import apply_budget, budget_for_node
from uisuites.ui_testing.pages.page_manager import PageManager


# ================================================================================
# Reporting Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Keep each phase report on the item so fixtures can see the outcome."""
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def config() -> ConfigLoader:
    return ConfigLoader()


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def reachability(config: ConfigLoader) -> Dict[str, bool]:
    """Probe both applications once per session."""
    return {
        "app": await is_url_reachable(config.base_url),
        "playground": await is_url_reachable(config.playground_url),
    }


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def browser_manager() -> AsyncGenerator[BrowserManager, None]:
    """
    Session-scoped browser manager.

    Launch problems (typically browsers not installed with
    `playwright install`) skip the UI tests instead of erroring each one.
    """
    manager = BrowserManager()
    try:
        await manager.start()
    except PlaywrightError as e:
        pytest.skip(f"Browser '{manager.browser_type}' could not start: {e}")
    yield manager
    await manager.close()


@pytest_asyncio.fixture(loop_scope="session")
async def context(
    request: pytest.FixtureRequest,
    reachability: Dict[str, bool],
    browser_manager: BrowserManager,
) -> AsyncGenerator[BrowserContext, None]:
    """
    Function-scoped browser context.

    Tests marked `playground` need the UI Testing Playground, all others
    the ngx-admin application.
    """
    target = "playground" if request.node.get_closest_marker("playground") else "app"
    if not reachability[target]:
        pytest.skip(f"{target} is not reachable")

    context = await browser_manager.new_context()
    yield context
    await browser_manager.release_context(context)


@pytest_asyncio.fixture(loop_scope="session")
async def page(
    request: pytest.FixtureRequest,
    context: BrowserContext,
) -> AsyncGenerator[Page, None]:
    """
    Function-scoped page with the test's timeout budget applied.

    On failure a screenshot and the URL are attached to Allure.
    """
    page = await context.new_page()
    apply_budget(page, budget_for_node(request.node))
    yield page

    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed:
        try:
            await HelperBase(page).capture_failure(request.node.name)
        except PlaywrightError as e:
            logger.warning(f"Failed to capture failure details: {e}")


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def pm(page: Page) -> PageManager:
    """PageManager bound to the test's page."""
    return PageManager(page)


@pytest_asyncio.fixture(loop_scope="session")
async def dashboard(page: Page, pm: PageManager) -> Page:
    """Page opened on the landing dashboard."""
    await pm.open_dashboard()
    return page


@pytest.fixture
def soft() -> SoftAssertions:
    """Soft assertion collector; call `assert_all()` to enforce it."""
    return SoftAssertions()


# ================================================================================
# Test Data
# ================================================================================

@pytest.fixture
def test_data():
    """Common data for the ngx-admin forms and tables."""
    return {
        "grid_user": {
            "email": "test@test.com",
            "password": "Welcome1",
            "option": "Option 2",
        },
        "inline_user": {
            "name": "John Smith",
            "email": "john@test.com",
        },
        "themes": ["Light", "Dark", "Cosmic", "Corporate"],
        "table": {
            "delete_email": "mdo@gmail.com",
            "edit_id": "11",
            "edit_email": "test@test.com",
            "ages": ["20", "30", "40", "200"],
        },
    }
