"""Creation of the eight CRUD tasks and their deadlines."""

from __future__ import annotations

import random
import sys
import time
from typing import TextIO

from crudsched.crud_tasks import crud_delete, crud_insert, crud_list, crud_update
from crudsched.task import TIME_QUANTUM, Task, TaskType

# name, kind, seconds from time zero to the deadline
_SPECS = (
    ("Inserção A (CREATE)", TaskType.APERIODIC, 12),
    ("Inserção B (CREATE)", TaskType.PERIODIC, 4),
    ("Leitura A (READ)", TaskType.APERIODIC, 11),
    ("Leitura B (READ)", TaskType.PERIODIC, 7),
    ("Atualização A (UPDATE)", TaskType.APERIODIC, 3),
    ("Atualização B (UPDATE)", TaskType.PERIODIC, 8),
    ("Remoção A (DELETE)", TaskType.APERIODIC, 6),
    ("Remoção B (DELETE)", TaskType.PERIODIC, 10),
)

CRUD_JOBS = (
    crud_insert,
    crud_insert,
    crud_list,
    crud_list,
    crud_update,
    crud_update,
    crud_delete,
    crud_delete,
)
"""The CRUD job each task performs, indexed by task id."""


def build_tasks(
    rng: random.Random | None = None,
    now: float | None = None,
    out: TextIO | None = None,
) -> list[Task]:
    """Create the eight CRUD tasks with random sizes and fixed deadlines."""
    rng = rng if rng is not None else random
    now = now if now is not None else time.monotonic()
    out = out if out is not None else sys.stdout

    print(f"Inicializando tarefas CRUD ({len(_SPECS)} no total)...", file=out)
    tasks = [
        Task(
            id=index,
            name=name,
            task_type=kind,
            total_work_units=2 + rng.randrange(TIME_QUANTUM),
            progress=0,
            time_zero=now,
            deadline=now + offset,
        )
        for index, (name, kind, offset) in enumerate(_SPECS)
    ]
    for task, (_, _, offset) in zip(tasks, _SPECS):
        print(f"  - Tarefa {task.id}: {task.name} | Deadline: +{offset}s", file=out)
    return tasks