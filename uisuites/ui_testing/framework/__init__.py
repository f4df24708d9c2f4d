"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based helpers shared by the ngx-admin page objects and tests.

Components:
    - helper_base: Base class of every page object
    - browser_manager: Browser lifecycle and reachability probe
    - config_loader: YAML + environment configuration
    - timeouts: Per-test timeout budgets (slow / extend_timeout markers)
    - soft_assert: Soft assertions on top of Playwright `expect`
    - waits: Polling with backoff for re-rendering widgets
    - visual: Screenshot comparison against stored baselines
    - locators: Declarative selectors for the application under test

Author: Automation Team
License: MIT
================================================================================
"""

from .browser_manager import BrowserManager, is_url_reachable
from .config_loader import ConfigLoader, ConfigurationError
from .errors import (
    ElementNotFoundError,
    UIAutomationError,
    VisualMismatchError,
    WaitTimeoutError,
)
from .helper_base import HelperBase
from .soft_assert import SoftAssertions
from .timeouts import TimeoutBudget, apply_budget, budget_for_node
from .visual import assert_matches_baseline, compare_with_baseline
from .waits import WaitConfig, poll_until

__all__ = [
    "BrowserManager",
    "is_url_reachable",
    "ConfigLoader",
    "ConfigurationError",
    "ElementNotFoundError",
    "UIAutomationError",
    "VisualMismatchError",
    "WaitTimeoutError",
    "HelperBase",
    "SoftAssertions",
    "TimeoutBudget",
    "apply_budget",
    "budget_for_node",
    "assert_matches_baseline",
    "compare_with_baseline",
    "WaitConfig",
    "poll_until",
]
