# ================================================================================
# Wait Helpers Module
# ================================================================================
#
# Polling utilities for UI state that Playwright cannot wait on by itself,
# e.g. a table that re-renders its rows after a filter is typed.
#
# Key Features:
#   - Exponential backoff capped at a maximum interval
#   - Named scenarios with preset intervals
#   - Async (Playwright) and sync check functions
#   - Allure integration for step reporting
#
# Usage:
#   rows = await poll_until(check_rows, scenario="table_filter",
#                           description="Age filter applied")
#
# ================================================================================

import asyncio
import inspect
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Optional, Tuple, TypeVar, Union

import allure
from loguru import logger

from .errors import WaitTimeoutError


T = TypeVar("T")

CheckResult = Tuple[bool, Any]
CheckFn = Callable[[], Union[CheckResult, Awaitable[CheckResult]]]


@dataclass
class WaitConfig:
    """
    Configuration for polling waits.

    Attributes:
        initial_interval: Initial wait interval in seconds
        multiplier: Multiplier for exponential backoff
        max_interval: Maximum interval between attempts
        timeout: Total timeout in seconds
    """
    initial_interval: float = 0.25
    multiplier: float = 1.5
    max_interval: float = 2.0
    timeout: float = 15.0


WAIT_SCENARIOS: Dict[str, WaitConfig] = {
    "default": WaitConfig(),

    # Smart table re-renders rows after each keystroke in a filter input
    "table_filter": WaitConfig(
        initial_interval=0.25,
        multiplier=1.5,
        max_interval=1.0,
        timeout=10.0,
    ),
}


def get_wait_config(scenario: str) -> WaitConfig:
    """Return the preset for a scenario, or the default preset."""
    return WAIT_SCENARIOS.get(scenario, WAIT_SCENARIOS["default"])


def calculate_next_interval(current_interval: float, config: WaitConfig) -> float:
    """Next interval with exponential backoff, capped at max_interval."""
    return min(
        current_interval * config.multiplier,
        config.max_interval
    )


async def poll_until(
    check_fn: CheckFn,
    scenario: str = "default",
    description: str = "Waiting for condition",
    config: Optional[WaitConfig] = None,
) -> Any:
    """
    Poll a condition with exponential backoff.

    Args:
        check_fn: Sync or async function returning (success, result)
        scenario: Predefined scenario name for configuration
        description: Human-readable description for logging
        config: Optional custom WaitConfig (overrides scenario)

    Returns:
        The result from check_fn when it reports success

    Raises:
        WaitTimeoutError: If the timeout is reached without success

    Example:
        async def rows_filtered():
            ages = await table.visible_ages()
            return all(a == "20" for a in ages), ages

        ages = await poll_until(rows_filtered, scenario="table_filter")
    """
    if config is None:
        config = get_wait_config(scenario)

    start_time = time.monotonic()
    current_interval = config.initial_interval
    attempt = 0
    last_result = None
    last_error = None

    with allure.step(f"Poll: {description}"):
        while True:
            attempt += 1

            try:
                outcome = check_fn()
                if inspect.isawaitable(outcome):
                    outcome = await outcome
                success, result = outcome
                last_result = result

                if success:
                    logger.debug(
                        f"Condition met after {attempt} attempts "
                        f"({time.monotonic() - start_time:.1f}s): {description}"
                    )
                    return result

                logger.debug(
                    f"Attempt {attempt}: condition not met. Result: {result}"
                )

            except AssertionError as e:
                last_error = str(e)
                logger.debug(f"Attempt {attempt} failed: {e}")

            elapsed = time.monotonic() - start_time
            if elapsed + current_interval > config.timeout:
                error_msg = (
                    f"Timeout after {elapsed:.1f}s waiting for: {description}. "
                    f"Last result: {last_result}, Last error: {last_error}"
                )
                logger.error(error_msg)
                raise WaitTimeoutError(error_msg)

            await asyncio.sleep(current_interval)
            current_interval = calculate_next_interval(current_interval, config)


__all__ = [
    "WaitConfig",
    "WAIT_SCENARIOS",
    "get_wait_config",
    "calculate_next_interval",
    "poll_until",
]
