"""Task records and the simulated units of work they perform."""

from __future__ import annotations

import random
import sys
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, TextIO

TIME_QUANTUM = 4
NUM_THREADS = 8


class TaskType(Enum):
    PERIODIC = "periodic"
    APERIODIC = "aperiodic"


@dataclass
class Task:
    """A schedulable task with progress and timing information.

    Times are seconds on a monotonic clock.
    """

    id: int
    name: str
    task_type: TaskType = TaskType.APERIODIC
    total_work_units: int = 0
    progress: int = 0
    task_func: Optional[Callable[[], object]] = None
    time_zero: float = 0.0
    deadline: float = 0.0
    start_time: float = 0.0
    finish_time: float = 0.0
    missed_deadline: bool = False

    def is_complete(self) -> bool:
        return self.progress >= self.total_work_units

    def relative_deadline(self) -> float:
        """Deadline measured from the task's time zero."""
        return self.deadline - self.time_zero

    def execution_time(self) -> float:
        return self.finish_time - self.start_time

    def run_quantum(
        self,
        units: int,
        sleep: Callable[[float], object] = time.sleep,
        out: TextIO | None = None,
    ) -> int:
        """Do up to ``units`` units of work, one second each; return units done."""
        out = out if out is not None else sys.stdout
        print(
            f"Thread {self.id}: Retomando trabalho. Progresso atual: "
            f"{self.progress}/{self.total_work_units}.",
            file=out,
        )
        done = 0
        for _ in range(units):
            if self.is_complete():
                break
            sleep(1)
            self.progress += 1
            done += 1
            print(
                f"  -> Thread {self.id}: Progresso: "
                f"{self.progress}/{self.total_work_units}",
                file=out,
            )
        print(
            f"Thread {self.id}: Trabalhou por {done} unidades neste quantum.",
            file=out,
        )
        return done


def do_work_fifo(
    thread_id: int,
    rng: random.Random | None = None,
    sleep: Callable[[float], object] = time.sleep,
    out: TextIO | None = None,
) -> int:
    """Sleep for ``thread_id`` plus 0..5 seconds; return the time slept."""
    rng = rng if rng is not None else random.Random()
    out = out if out is not None else sys.stdout
    print(f"Thread {thread_id}: Iniciando trabalho...", file=out)
    work_time = thread_id + rng.randrange(6)
    sleep(work_time)
    print(
        f"Thread {thread_id}: Trabalho concluído. "
        f"Tempo de processamento: {work_time} segundos.",
        file=out,
    )
    return work_time