"""FIFO and round-robin scheduling of tasks, with deadline checks."""

from __future__ import annotations

import math
import sys
import threading
import time
from enum import Enum
from typing import Callable, Iterable, TextIO

from crudsched.task import TIME_QUANTUM, Task

_Clock = Callable[[], float]
_Sleep = Callable[[float], object]


class SchedulingMode(Enum):
    FIFO = "fifo"
    ROUND_ROBIN = "rr"


def _check_deadline(task: Task) -> int:
    """Compare whole seconds of execution with the deadline; record a miss."""
    elapsed = math.floor(task.finish_time) - math.floor(task.start_time)
    allowed = math.floor(task.deadline) - math.floor(task.time_zero)
    task.missed_deadline = elapsed > allowed
    return elapsed


def _run_job(task: Task) -> None:
    if task.task_func is None:
        raise ValueError(f"task {task.id} has no job to run")
    task.task_func()


def format_summary(tasks: Iterable[Task]) -> str:
    """One line per task with its execution time, deadline and status."""
    return "\n".join(
        f"⏱️  {task.name} | Execução: {task.execution_time():0.2f}"
        f"| Deadline: {task.relative_deadline():0.1f} | "
        f"{'❌ Violado' if task.missed_deadline else '✅ OK'}"
        for task in tasks
    )


def run_fifo(
    tasks: Iterable[Task],
    runner: Callable[[Task], object] | None = None,
    clock: _Clock = time.monotonic,
    out: TextIO | None = None,
) -> list[Task]:
    """Run each task to completion in order; return them in completion order."""
    tasks = list(tasks)
    runner = runner if runner is not None else _run_job
    out = out if out is not None else sys.stdout

    print("\n[FIFO] Iniciando escalonamento FIFO com tarefas reais...", file=out)
    for index, task in enumerate(tasks):
        print(f"🧵 Executando tarefa {index}: {task.name}", file=out)
        task.start_time = clock()
        runner(task)
        task.finish_time = clock()
        elapsed = _check_deadline(task)
        if task.missed_deadline:
            print(
                f"⚠️  {task.name} VIOLOU o deadline! | "
                f"Tempo de execução: {elapsed:0.2f}",
                file=out,
            )
        else:
            print(f"✅ {task.name} dentro do deadline.", file=out)

    print("\n[FIFO] Todas as tarefas foram concluídas!", file=out)
    summary = format_summary(tasks)
    if summary:
        print(summary, file=out)
    return tasks


class _Baton:
    """State shared by the scheduler and its workers under one condition."""

    def __init__(self, count: int) -> None:
        self.cond = threading.Condition()
        self.turn: int | None = None
        self.stop = False
        self.done = [False] * count
        self.order: list[int] = []
        self.error: BaseException | None = None


def _run_turn(
    index: int,
    task: Task,
    baton: _Baton,
    quantum: int,
    sleep: _Sleep,
    clock: _Clock,
    out: TextIO,
) -> None:
    print(f"🧵 Executando tarefa {index}: {task.name}", file=out)
    task.start_time = clock()
    task.run_quantum(quantum, sleep, out)
    if not task.is_complete():
        print(f"Thread {task.name}: Quantum finalizado, tarefa pausada.", file=out)
        return

    task.finish_time = clock()
    print(f"**** Thread {task.name}: TAREFA CONCLUÍDA! ****", file=out)
    baton.done[index] = True
    baton.order.append(index)
    elapsed = _check_deadline(task)
    if task.missed_deadline:
        print(
            f"⚠️  {task.name} VIOLOU o deadline! | Tempo de execução: {elapsed:f}",
            file=out,
        )
    else:
        print(
            f"✅ {task.name} dentro do deadline. | Tempo de execução: {elapsed:f}",
            file=out,
        )


def _worker(
    index: int,
    task: Task,
    baton: _Baton,
    quantum: int,
    sleep: _Sleep,
    clock: _Clock,
    out: TextIO,
) -> None:
    with baton.cond:
        while True:
            baton.cond.wait_for(lambda: baton.stop or baton.turn == index)
            if baton.stop:
                return
            try:
                _run_turn(index, task, baton, quantum, sleep, clock, out)
            except BaseException as exc:  # handed back to the scheduler
                baton.error = exc
            baton.turn = None
            baton.cond.notify_all()


def run_round_robin(
    tasks: Iterable[Task],
    quantum: int = TIME_QUANTUM,
    sleep: _Sleep = time.sleep,
    clock: _Clock = time.monotonic,
    out: TextIO | None = None,
) -> list[Task]:
    """Give each task's thread ``quantum`` units in turn until all finish.

    Returns the tasks in the order they completed.
    """
    tasks = list(tasks)
    out = out if out is not None else sys.stdout
    for task in tasks:
        if task.total_work_units <= 0:
            raise ValueError(f"task {task.id} has no work to do")

    baton = _Baton(len(tasks))
    threads = [
        threading.Thread(
            target=_worker,
            args=(index, task, baton, quantum, sleep, clock, out),
            name=f"task-{index}",
            daemon=True,
        )
        for index, task in enumerate(tasks)
    ]
    for thread in threads:
        thread.start()

    try:
        print("\n[RR] Iniciando escalonamento Round Robin com tarefas reais...", file=out)
        sleep(1)
        with baton.cond:
            current = 0
            while len(baton.order) < len(tasks):
                if not baton.done[current]:
                    print(
                        f"[RR] Turno da tarefa {current}: {tasks[current].name}",
                        file=out,
                    )
                    baton.turn = current
                    baton.cond.notify_all()
                    baton.cond.wait_for(lambda: baton.turn is None)
                    if baton.error is not None:
                        raise baton.error
                current = (current + 1) % len(tasks)
    finally:
        with baton.cond:
            baton.stop = True
            baton.cond.notify_all()
        for thread in threads:
            thread.join()

    print("\n[RR] Todas as tarefas foram concluídas!", file=out)
    summary = format_summary(tasks)
    if summary:
        print(summary, file=out)
    return [tasks[index] for index in baton.order]