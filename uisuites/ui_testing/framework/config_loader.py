"""
================================================================================
UI Suite Settings
================================================================================

Settings for the browser suites, read from `uisuites/config/config.yaml`.

Every setting has a built-in default in UI_DEFAULTS, so call sites never
repeat fallback values. Lookup order for a dotted key:

    1. Environment variable named after the key (ui.base_url -> UI_BASE_URL),
       converted to the type of the built-in default
    2. config.yaml
    3. UI_DEFAULTS

Settings that decide how the run starts (browser, timeouts) are validated
both when the YAML is loaded and when an environment override is read, so
a typo fails the session up front instead of inside the first test.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger


DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "config.yaml"

SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")

UI_DEFAULTS: Dict[str, Any] = {
    "ui.base_url": "http://localhost:4200",
    "ui.landing_path": "/pages/iot-dashboard",
    "ui.playground_url": "http://uitestingplayground.com",
    "ui.browser": "chromium",
    "ui.headless": True,
    "ui.slow_mo": 0,
    "ui.viewport.width": 1920,
    "ui.viewport.height": 1080,
    "ui.timeouts.action": 10000,
    "ui.timeouts.navigation": 30000,
    "ui.timeouts.expect": 5000,
    "visual.max_diff_pixels": 50,
    "visual.threshold": 0.2,
    "visual.update_baselines": False,
}


class ConfigurationError(ValueError):
    """Raised when the suite settings are unreadable or invalid."""
    pass


def env_key(key: str) -> str:
    """Environment variable overriding a dotted key: ui.base_url -> UI_BASE_URL."""
    return key.upper().replace(".", "_")


def _convert(value: str, reference: Any, key: str) -> Any:
    if isinstance(reference, bool):
        return value.strip().lower() in ("true", "1", "yes", "on")
    try:
        if isinstance(reference, int):
            return int(value)
        if isinstance(reference, float):
            return float(value)
    except ValueError as e:
        raise ConfigurationError(
            f"{env_key(key)}={value!r} is not a valid {type(reference).__name__}"
        ) from e
    return value


def _check_browser(browser: str, source: str) -> str:
    if browser not in SUPPORTED_BROWSERS:
        raise ConfigurationError(
            f"Unsupported browser '{browser}' in {source}. "
            f"Choose one of: {', '.join(SUPPORTED_BROWSERS)}"
        )
    return browser


def _flatten(tree: Dict[str, Any], prefix: str = "") -> Dict[str, Any]:
    flat = {}
    for name, value in tree.items():
        key = f"{prefix}{name}"
        if isinstance(value, dict):
            flat.update(_flatten(value, f"{key}."))
        else:
            flat[key] = value
    return flat


class ConfigLoader:
    """
    Process-wide settings of the UI suites.

    Usage:
        >>> config = ConfigLoader()
        >>> config.base_url
        'http://localhost:4200'
        >>> config.timeouts
        {'action': 10000, 'navigation': 30000, 'expect': 5000}
    """

    _instance: Optional["ConfigLoader"] = None

    def __new__(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None) -> None:
        if getattr(self, "_initialized", False):
            return

        self._config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._values = self._load(self._config_path)
        self._initialized = True

    @staticmethod
    def _load(path: Path) -> Dict[str, Any]:
        if not path.exists():
            logger.warning(f"Configuration file not found: {path}. Using built-in defaults.")
            return {}

        try:
            with open(path, "r", encoding="utf-8") as f:
                values = _flatten(yaml.safe_load(f) or {})
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

        if "ui.browser" in values:
            _check_browser(values["ui.browser"], str(path))
        for name in ("action", "navigation", "expect"):
            timeout = values.get(f"ui.timeouts.{name}")
            if timeout is not None and (not isinstance(timeout, int) or timeout <= 0):
                raise ConfigurationError(
                    f"ui.timeouts.{name} must be a positive number of ms, got {timeout!r}"
                )

        logger.debug(f"Loaded configuration from: {path}")
        return values

    def get(self, key: str, default: Any = None) -> Any:
        """
        Value of a dotted key: environment, then YAML, then built-in default.

        `default` is only used for keys without a built-in default.
        """
        reference = UI_DEFAULTS.get(key, default)
        raw = os.environ.get(env_key(key))
        if raw is not None:
            return raw if reference is None else _convert(raw, reference, key)
        return self._values.get(key, reference)

    # ----------------------------------------------------------------------------
    # Typed accessors
    # ----------------------------------------------------------------------------

    @property
    def base_url(self) -> str:
        return self.get("ui.base_url").rstrip("/")

    @property
    def landing_path(self) -> str:
        return self.get("ui.landing_path")

    @property
    def playground_url(self) -> str:
        return self.get("ui.playground_url").rstrip("/")

    @property
    def browser(self) -> str:
        return _check_browser(self.get("ui.browser"), env_key("ui.browser") + " / config")

    @property
    def headless(self) -> bool:
        return self.get("ui.headless")

    @property
    def slow_mo(self) -> int:
        return self.get("ui.slow_mo")

    @property
    def viewport(self) -> Dict[str, int]:
        return {
            "width": self.get("ui.viewport.width"),
            "height": self.get("ui.viewport.height"),
        }

    @property
    def timeouts(self) -> Dict[str, int]:
        """Playwright default timeouts in ms, keyed action/navigation/expect."""
        return {
            name: self.get(f"ui.timeouts.{name}")
            for name in ("action", "navigation", "expect")
        }

    @property
    def max_diff_pixels(self) -> int:
        return self.get("visual.max_diff_pixels")

    @property
    def diff_threshold(self) -> float:
        return self.get("visual.threshold")

    @property
    def update_baselines(self) -> bool:
        return self.get("visual.update_baselines")

    @classmethod
    def reset(cls) -> None:
        """Forget the loaded settings (used by tests)."""
        cls._instance = None


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "DEFAULT_CONFIG_PATH",
    "SUPPORTED_BROWSERS",
    "UI_DEFAULTS",
    "env_key",
]
