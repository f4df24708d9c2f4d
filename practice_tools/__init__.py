"""
================================================================================
Practice Tools
================================================================================

Utilities that live beside the UI suites.

Modules:
    - common: Loguru logging setup shared by scripts and the runner
    - isolation: Process/memory isolation demonstrations (why test workers
      never share state)

Example:
    python -m practice_tools.isolation workers --ticks 3

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "isolation",
]
