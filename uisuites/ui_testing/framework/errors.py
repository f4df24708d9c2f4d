"""
================================================================================
Framework Errors
================================================================================

Exception types raised by the UI framework itself. Playwright's own
TimeoutError and AssertionError from `expect` are not wrapped.

Author: Automation Team
License: MIT
================================================================================
"""


class UIAutomationError(Exception):
    """Base class for framework errors."""
    pass


class ElementNotFoundError(UIAutomationError):
    """Raised when a page object cannot reach the element it needs."""
    pass


class WaitTimeoutError(UIAutomationError):
    """Raised when a polling wait runs out of time."""
    pass


class VisualMismatchError(AssertionError, UIAutomationError):
    """Raised when a screenshot differs from its baseline beyond tolerance."""
    pass


__all__ = [
    "UIAutomationError",
    "ElementNotFoundError",
    "WaitTimeoutError",
    "VisualMismatchError",
]
