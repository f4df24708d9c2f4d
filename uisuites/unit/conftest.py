"""
Fixtures for offline tests.

Page objects only chain locator calls and await actions, so a MagicMock
whose chaining methods return itself and whose actions are AsyncMocks is
enough to check what a page object does without a browser.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from uisuites.ui_testing.framework.config_loader import UI_DEFAULTS, ConfigLoader, env_key


BASE_URL = "http://ngx.test"

LOCATOR_ACTIONS = (
    "click",
    "fill",
    "check",
    "uncheck",
    "clear",
    "hover",
    "press_sequentially",
    "get_attribute",
    "text_content",
    "input_value",
    "is_checked",
    "is_visible",
    "all",
    "all_text_contents",
    "count",
    "wait_for",
    "screenshot",
)

LOCATOR_CHAINS = (
    "locator",
    "get_by_role",
    "get_by_text",
    "get_by_label",
    "get_by_placeholder",
    "get_by_title",
    "get_by_test_id",
    "filter",
    "nth",
)


def make_locator(name: str = "locator") -> MagicMock:
    locator = MagicMock(name=name)
    for action in LOCATOR_ACTIONS:
        setattr(locator, action, AsyncMock(name=f"{name}.{action}"))
    for chain in LOCATOR_CHAINS:
        getattr(locator, chain).return_value = locator
    locator.first = locator
    locator.last = locator
    return locator


def make_page(locator: MagicMock = None) -> MagicMock:
    page = MagicMock(name="page")
    page.loc = locator or make_locator()
    for chain in LOCATOR_CHAINS:
        getattr(page, chain).return_value = page.loc
    page.goto = AsyncMock(name="page.goto")
    page.wait_for_timeout = AsyncMock(name="page.wait_for_timeout")
    page.wait_for_load_state = AsyncMock(name="page.wait_for_load_state")
    page.screenshot = AsyncMock(name="page.screenshot", return_value=b"")
    page.url = f"{BASE_URL}/pages/iot-dashboard"
    return page


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Every test starts from the repository config with no UI env overrides."""
    for key in map(env_key, UI_DEFAULTS):
        monkeypatch.delenv(key, raising=False)
    ConfigLoader.reset()
    yield
    ConfigLoader.reset()


@pytest.fixture
def fake_page() -> MagicMock:
    return make_page()


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def locator_factory():
    """Build extra fake locators, e.g. the rows returned by `locator.all()`."""
    return make_locator
