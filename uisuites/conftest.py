"""
================================================================================
Suite Pytest Configuration
================================================================================

Registers the markers used across the suites and tags collected tests
with their domain marker (ui / unit) based on their directory.

================================================================================
"""

import pytest

from practice_tools.common import init_logger


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    init_logger()

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )
    config.addinivalue_line(
        "markers", "P3: Low priority tests - exploratory checks"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "visual: Screenshot comparison against baselines"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: Browser tests against a running application"
    )
    config.addinivalue_line(
        "markers", "unit: Offline tests of the framework and page objects"
    )
    config.addinivalue_line(
        "markers", "playground: Tests against the UI Testing Playground site"
    )

    # Feature markers
    config.addinivalue_line(
        "markers", "forms: Forms menu (layouts, datepicker)"
    )
    config.addinivalue_line(
        "markers", "tables: Tables & Data menu"
    )
    config.addinivalue_line(
        "markers", "overlays: Modal & Overlays menu"
    )

    # Timeout markers
    config.addinivalue_line(
        "markers", "slow: Triple every Playwright timeout for this test"
    )
    config.addinivalue_line(
        "markers", "extend_timeout(ms): Add milliseconds to every Playwright timeout"
    )


def pytest_collection_modifyitems(config, items):
    """Tag tests with their domain marker by location."""
    for item in items:
        path = str(item.fspath)
        if "ui_testing" in path:
            item.add_marker(pytest.mark.ui)
        elif "unit" in path:
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "ngx-admin UI Automation Suites",
        "=" * 60,
        "",
    ]
