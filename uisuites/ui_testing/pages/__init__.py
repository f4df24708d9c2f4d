"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for the ngx-admin demo application.

Each page class encapsulates:
    - Element locators (see framework/locators.py)
    - Page-specific actions
    - Values tests assert on

Author: Automation Team
License: MIT
================================================================================
"""

from .ajax_page import AjaxPage
from .datepicker_page import DatepickerPage
from .form_layouts_page import FormLayoutsPage
from .header_page import HeaderPage, THEME_HEADER_COLORS
from .navigation_page import NavigationPage
from .overlays_page import OverlaysPage
from .page_manager import PageManager
from .smart_table_page import SmartTablePage

__all__ = [
    "AjaxPage",
    "DatepickerPage",
    "FormLayoutsPage",
    "HeaderPage",
    "THEME_HEADER_COLORS",
    "NavigationPage",
    "OverlaysPage",
    "PageManager",
    "SmartTablePage",
]
