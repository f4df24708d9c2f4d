"""
UI suites package.

Kept importable so that IDE navigation, `run_tests.py` and CI jobs can
reach the page objects and framework helpers directly.
"""
