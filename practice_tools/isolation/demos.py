# ================================================================================
# Process Isolation Demos
# ================================================================================
#
# Small programs showing that separate OS processes never share memory.
# This is the model parallel test workers follow: each pytest-xdist worker
# is its own process with its own browser, its own module globals and its
# own crash domain.
#
# Demos:
#   counter  - a counter that ticks up; two copies count independently
#   memory   - a module-level value that flips from 0 to 100 after a few
#              ticks; other processes keep seeing 0
#   reader   - watches the same module-level value and never changes it
#   crash    - ticks, then raises; sibling processes keep running
#
# Observations when running the same demo in two terminals:
#   Different PID                       -> different OS process
#   Counter starts at 1 in both         -> memory is NOT shared
#   Stopping one doesn't stop the other -> fully isolated processes
#
# ================================================================================

import itertools
import multiprocessing
import os
import queue as queue_module
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from loguru import logger


SHARED_VALUE_INITIAL = 0
SHARED_VALUE_UPDATED = 100

# Module state, private to each process.
shared_value = SHARED_VALUE_INITIAL


class DemoCrash(RuntimeError):
    """Raised by the crash demo on purpose."""
    pass


@dataclass
class WorkerReport:
    """What one isolated worker process did."""
    name: str
    demo: str
    pid: Optional[int] = None
    exit_code: Optional[int] = None
    values: List[int] = field(default_factory=list)

    @property
    def crashed(self) -> bool:
        return self.exit_code not in (0, None)


def _ticks(ticks: Optional[int]) -> Iterable[int]:
    """1, 2, 3 ... forever, or up to `ticks`."""
    if ticks is None:
        return itertools.count(1)
    return range(1, ticks + 1)


def reset_shared_value() -> None:
    global shared_value
    shared_value = SHARED_VALUE_INITIAL


def counter_demo(ticks: Optional[int] = None, interval: float = 1.0) -> List[int]:
    """
    Increment a local counter once per tick.

    Returns:
        Counter value after every tick
    """
    counter = 0
    seen = []
    for _ in _ticks(ticks):
        time.sleep(interval)
        counter += 1
        seen.append(counter)
        logger.info(f"PID: {os.getpid()}, Counter: {counter}")
    return seen


def shared_value_demo(
    ticks: Optional[int] = None,
    interval: float = 1.0,
    update_after_ticks: Optional[int] = 3,
) -> List[int]:
    """
    Report the module-level `shared_value` every tick, setting it to 100
    at tick `update_after_ticks` (never, when None).

    Returns:
        Value observed at every tick
    """
    global shared_value
    seen = []
    for tick in _ticks(ticks):
        time.sleep(interval)
        if update_after_ticks is not None and tick == update_after_ticks:
            shared_value = SHARED_VALUE_UPDATED
            logger.info(f"PID: {os.getpid()}, Updated Value: {shared_value}")
        seen.append(shared_value)
        logger.info(f"PID: {os.getpid()}, current Value: {shared_value}")
    return seen


def reader_demo(ticks: Optional[int] = None, interval: float = 1.0) -> List[int]:
    """Watch `shared_value` without ever writing it."""
    return shared_value_demo(ticks=ticks, interval=interval, update_after_ticks=None)


def crash_demo(
    crash_after_ticks: int = 3,
    interval: float = 1.0,
) -> List[int]:
    """
    Tick, then crash the process with DemoCrash.

    Raises:
        DemoCrash: Always, after `crash_after_ticks` ticks
    """
    logger.info(f"Started PID: {os.getpid()}")
    for tick in _ticks(None):
        time.sleep(interval)
        if tick >= crash_after_ticks:
            raise DemoCrash("Boom 💥")
        logger.info(f"PID: {os.getpid()} still running")
    return []


DEMOS: Dict[str, Callable[[int, float], List[int]]] = {
    "counter": lambda ticks, interval: counter_demo(ticks=ticks, interval=interval),
    "memory": lambda ticks, interval: shared_value_demo(
        ticks=ticks, interval=interval, update_after_ticks=min(3, ticks)
    ),
    "reader": lambda ticks, interval: reader_demo(ticks=ticks, interval=interval),
    "crash": lambda ticks, interval: crash_demo(crash_after_ticks=ticks, interval=interval),
}


def _worker_entry(
    name: str,
    demo: str,
    ticks: int,
    interval: float,
    results: "multiprocessing.Queue",
) -> None:
    values = DEMOS[demo](ticks, interval)
    results.put((name, os.getpid(), values))


def run_isolated_workers(
    demos: Sequence[str],
    ticks: int = 3,
    interval: float = 0.1,
    join_timeout: float = 60.0,
) -> List[WorkerReport]:
    """
    Run each demo in its own OS process and report what each one saw.

    A crashing worker ends with a non-zero exit code and no values; the
    others finish normally.

    Args:
        demos: Demo names from DEMOS, one process per entry
        ticks: Ticks per demo (also the crash point of the crash demo)
        interval: Seconds per tick
        join_timeout: Seconds to wait for all workers together

    Returns:
        One WorkerReport per demo, in input order
    """
    unknown = [d for d in demos if d not in DEMOS]
    if unknown:
        raise ValueError(f"Unknown demo(s): {', '.join(unknown)}")

    ctx = multiprocessing.get_context("spawn")
    results = ctx.Queue()
    reports: List[WorkerReport] = []
    processes = []

    for index, demo in enumerate(demos):
        name = f"worker-{index}-{demo}"
        process = ctx.Process(
            target=_worker_entry,
            args=(name, demo, ticks, interval, results),
            name=name,
        )
        process.start()
        logger.info(f"Started {name} (PID {process.pid})")
        processes.append(process)
        reports.append(WorkerReport(name=name, demo=demo, pid=process.pid))

    # A child cannot exit while its result is still in the pipe, so the queue
    # is drained before any join.
    by_name = {report.name: report for report in reports}
    pending = set(by_name)
    deadline = time.monotonic() + join_timeout
    while pending and time.monotonic() < deadline:
        # Checked before reading: once every child has exited, all their
        # results are already in the pipe.
        all_exited = not any(process.is_alive() for process in processes)
        try:
            name, pid, values = results.get(timeout=0.1)
        except queue_module.Empty:
            if all_exited:
                break
            continue
        by_name[name].pid = pid
        by_name[name].values = values
        pending.discard(name)

    for process, report in zip(processes, reports):
        process.join(max(0.0, deadline - time.monotonic()))
        if process.is_alive():
            logger.warning(f"{report.name} did not finish in {join_timeout}s, terminating")
            process.terminate()
            process.join()
        report.exit_code = process.exitcode
        if report.crashed:
            logger.warning(f"{report.name} exited with code {report.exit_code}")

    return reports


__all__ = [
    "DemoCrash",
    "WorkerReport",
    "DEMOS",
    "counter_demo",
    "shared_value_demo",
    "reader_demo",
    "crash_demo",
    "reset_shared_value",
    "run_isolated_workers",
]
