"""Command line entry point: schedule the CRUD tasks against a SQLite file."""

from __future__ import annotations

import argparse
import functools
import random
import sys
import time

from crudsched.db import UserDatabase
from crudsched.report import write_csv_report
from crudsched.scheduler import SchedulingMode, run_fifo, run_round_robin
from crudsched.task_manager import CRUD_JOBS, build_tasks


def _non_negative(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return value


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="crudsched",
        description="Schedule CRUD tasks with FIFO or round robin.",
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in SchedulingMode],
        default=SchedulingMode.ROUND_ROBIN.value,
        help="scheduling policy (default: rr)",
    )
    parser.add_argument("--db", default="dados.db", help="SQLite database file")
    parser.add_argument("--seed", type=int, help="seed for the random generator")
    parser.add_argument(
        "--time-scale",
        type=_non_negative,
        default=1.0,
        help="factor applied to every simulated sleep (0 disables waiting)",
    )
    parser.add_argument("--report", help="write a CSV report to this path")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    mode = SchedulingMode(args.mode)
    rng = random.Random(args.seed)
    scale = args.time_scale
    out = sys.stdout

    def sleep(seconds: float) -> None:
        time.sleep(seconds * scale)

    if mode is SchedulingMode.FIFO:
        print("--- Modo FIFO ---", file=out)
    else:
        print("--- Modo Round Robin ---", file=out)

    with UserDatabase(args.db) as db:
        tasks = build_tasks(rng, out=out)
        for task, job in zip(tasks, CRUD_JOBS):
            task.task_func = functools.partial(job, db, rng, sleep, out)
        if mode is SchedulingMode.FIFO:
            run_fifo(tasks, out=out)
        else:
            run_round_robin(tasks, sleep=sleep, out=out)

    if args.report:
        write_csv_report(tasks, args.report, out)
    return 0