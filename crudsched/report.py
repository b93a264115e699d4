"""CSV report of task execution against deadlines."""

from __future__ import annotations

import csv
import sys
from os import PathLike
from typing import Iterable, TextIO

from crudsched.task import Task, TaskType

REPORT_HEADER = ("ID", "Nome", "Tipo", "Execucao_s", "Deadline_s", "Status")


def report_rows(tasks: Iterable[Task]) -> list[tuple[int, str, str, float, int, str]]:
    """One row per task: id, name, kind, execution time, deadline, status."""
    return [
        (
            task.id,
            task.name,
            "Periodica" if task.task_type is TaskType.PERIODIC else "Aperiodica",
            task.execution_time(),
            int(task.deadline),
            "Violado" if task.missed_deadline else "OK",
        )
        for task in tasks
    ]


def write_csv_report(
    tasks: Iterable[Task],
    path: str | PathLike[str],
    out: TextIO | None = None,
) -> None:
    """Write the report for ``tasks`` to the CSV file at ``path``."""
    out = out if out is not None else sys.stdout
    with open(path, "w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle, lineterminator="\n")
        writer.writerow(REPORT_HEADER)
        for task_id, name, kind, exec_time, deadline, status in report_rows(tasks):
            writer.writerow(
                [task_id, name, kind, f"{exec_time:.6f}", deadline, status]
            )
    print(f"📄 Relatório salvo em: {path}", file=out)