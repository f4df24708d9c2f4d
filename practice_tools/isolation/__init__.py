"""
Process isolation demonstrations.

Run the same demo in two terminals (or use the `workers` command) to see
that processes have separate PIDs, separate memory and separate failures.
"""

from .demos import (
    DEMOS,
    DemoCrash,
    WorkerReport,
    counter_demo,
    crash_demo,
    reader_demo,
    reset_shared_value,
    run_isolated_workers,
    shared_value_demo,
)

__all__ = [
    "DEMOS",
    "DemoCrash",
    "WorkerReport",
    "counter_demo",
    "crash_demo",
    "reader_demo",
    "reset_shared_value",
    "run_isolated_workers",
    "shared_value_demo",
]
