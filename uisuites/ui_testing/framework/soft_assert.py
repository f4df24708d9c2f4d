"""
================================================================================
Soft Assertions
================================================================================

Collects failed checks instead of stopping the test at the first one.

Playwright's Python `expect` has no `.soft` variant, so a soft check wraps
the awaitable produced by `expect(...)` and records the AssertionError it
raises. Failures are logged, attached to Allure, and raised together by
`assert_all()` (or on leaving the `with` block).

Usage:
    with SoftAssertions() as soft:
        await soft.check(expect(button).to_have_text("Submit"), "button text")
        soft.verify(value == 5, "value is five")
        await button.click()   # still runs if a check above failed

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, List

import allure
from loguru import logger


@dataclass
class SoftFailure:
    """A single recorded soft assertion failure."""
    description: str
    message: str


class SoftAssertions:
    """Accumulates assertion failures for one test."""

    def __init__(self) -> None:
        self.failures: List[SoftFailure] = []

    def __enter__(self) -> "SoftAssertions":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        # A hard failure inside the block wins; soft ones are already logged.
        if exc_type is None:
            self.assert_all()

    @property
    def passed(self) -> bool:
        return not self.failures

    def _record(self, description: str, error: AssertionError) -> None:
        message = str(error).strip() or "assertion failed"
        self.failures.append(SoftFailure(description=description, message=message))
        logger.warning(f"Soft assertion failed: {description} -> {message}")
        allure.attach(
            message,
            name=f"Soft assertion: {description}",
            attachment_type=allure.attachment_type.TEXT,
        )

    async def check(self, assertion: Awaitable[Any], description: str = "") -> bool:
        """
        Await a Playwright `expect(...)` assertion softly.

        Returns:
            True if the assertion passed
        """
        try:
            await assertion
            return True
        except AssertionError as e:
            self._record(description or "expect", e)
            return False

    def verify(self, condition: bool, description: str) -> bool:
        """Soft version of a plain `assert condition, description`."""
        if condition:
            return True
        self._record(description, AssertionError(description))
        return False

    def verify_equal(self, actual: Any, expected: Any, description: str = "") -> bool:
        if actual == expected:
            return True
        self._record(
            description or "values equal",
            AssertionError(f"expected {expected!r}, got {actual!r}"),
        )
        return False

    def assert_all(self) -> None:
        """Raise one AssertionError listing every recorded failure."""
        if not self.failures:
            return
        lines = [f"{len(self.failures)} soft assertion(s) failed:"]
        lines.extend(
            f"  {i}. {f.description}: {f.message}"
            for i, f in enumerate(self.failures, start=1)
        )
        raise AssertionError("\n".join(lines))


__all__ = [
    "SoftAssertions",
    "SoftFailure",
]
