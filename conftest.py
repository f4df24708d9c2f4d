"""
Repository-level pytest configuration.

Command line options for the UI suites are translated into the environment
variables read by `ConfigLoader`, so the same settings can come from the
command line, CI variables or `uisuites/config/config.yaml`.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    group = parser.getgroup("ui", "ngx-admin UI suites")
    group.addoption(
        "--ui-browser",
        action="store",
        default=None,
        choices=["chromium", "firefox", "webkit"],
        help="Browser for UI tests (overrides ui.browser)",
    )
    group.addoption(
        "--headed",
        action="store_true",
        default=False,
        help="Run the browser with a visible window",
    )
    group.addoption(
        "--update-snapshots",
        action="store_true",
        default=False,
        help="Overwrite visual baselines with the current screenshots",
    )


def pytest_configure(config):
    """Expose command line options through the environment."""
    if config.getoption("--ui-browser"):
        os.environ["UI_BROWSER"] = config.getoption("--ui-browser")
    if config.getoption("--headed"):
        os.environ["UI_HEADLESS"] = "false"
    if config.getoption("--update-snapshots"):
        os.environ["VISUAL_UPDATE_BASELINES"] = "true"


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent
