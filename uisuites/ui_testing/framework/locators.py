"""
================================================================================
ngx-admin Selectors
================================================================================

Declarative selectors for the ngx-admin demo application and the UI Testing
Playground. Page objects and tests import these instead of repeating
strings; Playwright resolves them lazily at action time.

Author: Automation Team
License: MIT
================================================================================
"""

from typing import Dict


# Generic containers
CARD = "nb-card"
RADIO = "nb-radio"
CHECKBOX = "nb-checkbox"

# Form Layouts page cards (matched by text inside the nb-card)
FORM_CARDS: Dict[str, str] = {
    "inline": "Inline form",
    "grid": "Using the Grid",
    "basic": "Basic form",
    "no_labels": "Form without labels",
    "horizontal": "Horizontal form",
    "block": "Block form",
}

# Sidebar menu groups and items
MENU_GROUPS: Dict[str, str] = {
    "forms": "Forms",
    "modal_overlays": "Modal & Overlays",
    "tables_data": "Tables & Data",
}

MENU_ITEMS: Dict[str, str] = {
    "form_layouts": "Form Layouts",
    "datepicker": "Datepicker",
    "smart_table": "Smart Table",
    "tree_grid": "Tree Grid",
    "toastr": "Toastr",
    "tooltip": "Tooltip",
}

# Header
HEADER = "nb-layout-header"
THEME_SELECT = "ngx-header nb-select"
THEME_OPTIONS = "nb-option-list nb-option"

# Datepicker
FORM_PICKER_PLACEHOLDER = "Form Picker"
RANGE_PICKER_PLACEHOLDER = "Range Picker"
CALENDAR_VIEW_MODE = "nb-calendar-view-mode"
CALENDAR_NEXT_MONTH = 'nb-calendar-pageable-navigation [data-name="chevron-right"]'
# Any in-month day, including today and already selected days
DAY_CELL = ".day-cell:not(.bounding-month)"
RANGE_DAY_CELL = ".range-cell.day-cell:not(.bounding-month)"

# Smart table
TABLE_ROWS = "tbody tr"
TABLE_PAGINATION = ".ng2-smart-pagination-nav"
EDIT_ICON = ".nb-edit"
DELETE_ICON = ".nb-trash"
CONFIRM_ICON = ".nb-checkmark"
INPUT_EDITOR = "input-editor"
INPUT_FILTER = "input-filter"
NO_DATA_TEXT = "No data found"

# Modal & Overlays
TOOLTIP = "nb-tooltip"

# UI Testing Playground (AJAX page)
AJAX_BUTTON_TEXT = "Button Triggering AJAX Request"
AJAX_SUCCESS = ".bg-success"
AJAX_SUCCESS_TEXT = "Data loaded with AJAX get request."
