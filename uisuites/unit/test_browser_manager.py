from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from uisuites.ui_testing.framework.browser_manager import BrowserManager, is_url_reachable


def test_settings_come_from_config():
    manager = BrowserManager()

    assert manager.browser_type == "chromium"
    assert manager.headless is True
    assert manager.base_url == "http://localhost:4200"
    assert manager.viewport == {"width": 1920, "height": 1080}


def test_environment_overrides_browser(monkeypatch):
    monkeypatch.setenv("UI_BROWSER", "firefox")
    monkeypatch.setenv("UI_HEADLESS", "false")

    manager = BrowserManager()

    assert manager.browser_type == "firefox"
    assert manager.headless is False


def test_unsupported_browser_is_rejected():
    with pytest.raises(ValueError, match="Unsupported browser 'opera'"):
        BrowserManager(browser_type="opera")


@pytest.mark.asyncio
async def test_new_context_requires_started_browser():
    with pytest.raises(RuntimeError):
        await BrowserManager().new_context()


@pytest.mark.asyncio
async def test_new_context_presets_base_url_and_is_released():
    manager = BrowserManager(base_url="http://ngx.test")
    context = MagicMock()
    context.close = AsyncMock()
    manager._browser = MagicMock()
    manager._browser.new_context = AsyncMock(return_value=context)

    created = await manager.new_context(locale="de-DE")

    options = manager._browser.new_context.await_args.kwargs
    assert options["base_url"] == "http://ngx.test"
    assert options["locale"] == "de-DE"
    assert options["viewport"] == {"width": 1920, "height": 1080}

    await manager.release_context(created)
    context.close.assert_awaited_once()
    assert manager._contexts == []


@pytest.mark.asyncio
async def test_reachable_on_any_http_status(monkeypatch):
    monkeypatch.setattr(
        httpx.AsyncClient, "get", AsyncMock(return_value=httpx.Response(503))
    )
    assert await is_url_reachable("http://ngx.test")


@pytest.mark.asyncio
async def test_unreachable_on_connection_error(monkeypatch):
    monkeypatch.setattr(
        httpx.AsyncClient, "get", AsyncMock(side_effect=httpx.ConnectError("refused"))
    )
    assert not await is_url_reachable("http://ngx.test")
