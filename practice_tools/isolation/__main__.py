#!/usr/bin/env python3
# ================================================================================
# Process Isolation Demo CLI
# ================================================================================
#
# Usage:
#   python -m practice_tools.isolation counter            # run in two terminals
#   python -m practice_tools.isolation memory
#   python -m practice_tools.isolation crash --crash-after 3
#   python -m practice_tools.isolation workers memory reader crash counter
#
# ================================================================================

import argparse
import sys

from loguru import logger

from practice_tools.common import init_logger
from practice_tools.isolation.demos import (
    DEMOS,
    DemoCrash,
    counter_demo,
    crash_demo,
    run_isolated_workers,
    shared_value_demo,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m practice_tools.isolation",
        description="Process/memory isolation demos",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Start the same counter in two terminals: PIDs differ, both start at 1
  python -m practice_tools.isolation counter

  # One process updates its value to 100, the other never sees it
  python -m practice_tools.isolation workers memory reader
        """
    )
    parser.add_argument(
        "--interval",
        type=float,
        default=1.0,
        help="Seconds per tick (default: 1.0)"
    )

    sub = parser.add_subparsers(dest="command", required=True)

    counter = sub.add_parser("counter", help="Increment a counter every tick")
    counter.add_argument("--ticks", type=int, default=None, help="Stop after N ticks")

    memory = sub.add_parser("memory", help="Flip a module value from 0 to 100")
    memory.add_argument("--ticks", type=int, default=None, help="Stop after N ticks")
    memory.add_argument("--update-after", type=int, default=3, help="Tick of the update")

    crash = sub.add_parser("crash", help="Tick, then crash")
    crash.add_argument("--crash-after", type=int, default=3, help="Tick of the crash")

    workers = sub.add_parser("workers", help="Run demos in separate processes")
    workers.add_argument(
        "demos",
        nargs="+",
        choices=sorted(DEMOS),
        help="Demo per worker process"
    )
    workers.add_argument("--ticks", type=int, default=3, help="Ticks per worker")

    return parser


def main(argv=None) -> int:
    """Main entry point."""
    init_logger()
    args = build_parser().parse_args(argv)

    try:
        if args.command == "counter":
            counter_demo(ticks=args.ticks, interval=args.interval)
        elif args.command == "memory":
            shared_value_demo(
                ticks=args.ticks,
                interval=args.interval,
                update_after_ticks=args.update_after,
            )
        elif args.command == "crash":
            crash_demo(crash_after_ticks=args.crash_after, interval=args.interval)
        else:
            reports = run_isolated_workers(
                args.demos, ticks=args.ticks, interval=args.interval
            )
            for report in reports:
                status = f"crashed (exit {report.exit_code})" if report.crashed else "ok"
                logger.info(f"{report.name}: PID {report.pid}, {status}, values={report.values}")
    except KeyboardInterrupt:
        logger.info("Stopped")
    except DemoCrash as e:
        logger.error(f"Process crashed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
