"""
================================================================================
Timeout Budgets
================================================================================

Per-test timeout handling for UI tests.

Playwright keeps three independent defaults: the action timeout on the page,
the navigation timeout on the page, and the `expect` assertion timeout. A
TimeoutBudget groups the three so markers can scale them together:

    @pytest.mark.slow                  -> every timeout x3
    @pytest.mark.extend_timeout(20000) -> every timeout + 20s

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Optional

from loguru import logger
from playwright.async_api import Page, expect

from .config_loader import ConfigLoader


SLOW_MULTIPLIER = 3


@dataclass(frozen=True)
class TimeoutBudget:
    """
    Timeouts applied to a single test, in milliseconds.

    Attributes:
        action: Default timeout for clicks, fills, waits on the page
        navigation: Default timeout for goto/reload/wait_for_url
        expect: Default timeout for `expect(...)` assertions
    """
    action: int = 10000
    navigation: int = 30000
    expect: int = 5000

    @classmethod
    def from_config(cls, config: Optional[ConfigLoader] = None) -> "TimeoutBudget":
        return cls(**(config or ConfigLoader()).timeouts)

    def scaled(self, factor: int) -> "TimeoutBudget":
        return replace(
            self,
            action=self.action * factor,
            navigation=self.navigation * factor,
            expect=self.expect * factor,
        )

    def extended(self, extra_ms: int) -> "TimeoutBudget":
        return replace(
            self,
            action=self.action + extra_ms,
            navigation=self.navigation + extra_ms,
            expect=self.expect + extra_ms,
        )


def budget_for_node(node: Any, base: Optional[TimeoutBudget] = None) -> TimeoutBudget:
    """
    Resolve the budget for a pytest item from its markers.

    `extend_timeout` is applied before `slow`, so a slow test with an
    extension gets (base + extra) * 3.
    """
    budget = base or TimeoutBudget.from_config()

    extend = node.get_closest_marker("extend_timeout")
    if extend is not None:
        extra_ms = extend.args[0] if extend.args else extend.kwargs.get("ms", 0)
        budget = budget.extended(int(extra_ms))

    if node.get_closest_marker("slow") is not None:
        budget = budget.scaled(SLOW_MULTIPLIER)

    return budget


def apply_budget(page: Page, budget: TimeoutBudget) -> None:
    """Apply a budget to the page defaults and to `expect`."""
    page.set_default_timeout(budget.action)
    page.set_default_navigation_timeout(budget.navigation)
    expect.set_options(timeout=budget.expect)
    logger.debug(
        f"Timeouts applied: action={budget.action}ms "
        f"navigation={budget.navigation}ms expect={budget.expect}ms"
    )


__all__ = [
    "TimeoutBudget",
    "budget_for_node",
    "apply_budget",
    "SLOW_MULTIPLIER",
]
