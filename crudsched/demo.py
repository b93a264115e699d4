"""Stand-alone simulation of round-robin and FIFO turns between worker threads."""

from __future__ import annotations

import argparse
import random
import sys
import threading
import time
from dataclasses import dataclass
from typing import Callable, Sequence, TextIO

from crudsched.scheduler import SchedulingMode
from crudsched.task import do_work_fifo

NUM_WORKERS = 5
TIME_QUANTUM = 2

_Sleep = Callable[[float], object]


@dataclass
class WorkItem:
    """A pausable job: ``progress`` of ``total_work_units`` units are done."""

    id: int
    total_work_units: int
    progress: int = 0


def make_work_items(
    count: int = NUM_WORKERS, rng: random.Random | None = None
) -> list[WorkItem]:
    """Create ``count`` items of 3 to 8 work units each."""
    if count < 0:
        raise ValueError("count must not be negative")
    rng = rng if rng is not None else random.Random()
    return [WorkItem(id=index, total_work_units=3 + rng.randrange(6)) for index in range(count)]


def _do_work(item: WorkItem, units: int, sleep: _Sleep, out: TextIO) -> int:
    print(
        f"Thread {item.id}: Retomando trabalho. Progresso atual: "
        f"{item.progress}/{item.total_work_units}.",
        file=out,
    )
    done = 0
    for _ in range(units):
        if item.progress >= item.total_work_units:
            break
        sleep(1)
        item.progress += 1
        done += 1
        print(
            f"  -> Thread {item.id}: Progresso: {item.progress}/{item.total_work_units}",
            file=out,
        )
    print(f"Thread {item.id}: Trabalhou por {done} unidades neste quantum.", file=out)
    return done


class _Turns:
    """State shared by the scheduler and the workers under one condition."""

    def __init__(self) -> None:
        self.cond = threading.Condition()
        self.turn: int | None = None
        self.stop = False
        self.order: list[int] = []
        self.error: BaseException | None = None


def _rr_worker(
    position: int,
    item: WorkItem,
    turns: _Turns,
    quantum: int,
    sleep: _Sleep,
    out: TextIO,
) -> None:
    with turns.cond:
        while True:
            turns.cond.wait_for(lambda: turns.stop or turns.turn == position)
            if turns.stop:
                return
            try:
                print(
                    f"\n=> Thread {item.id}: Assumindo CPU. Quantum: {quantum} unidades.",
                    file=out,
                )
                _do_work(item, quantum, sleep, out)
                if item.progress >= item.total_work_units:
                    print(f"**** Thread {item.id}: TAREFA CONCLUÍDA! ****", file=out)
                    turns.order.append(position)
                else:
                    print(f"Thread {item.id}: Quantum finalizado, tarefa pausada.", file=out)
            except BaseException as exc:  # handed back to the scheduler
                turns.error = exc
            turns.turn = None
            turns.cond.notify_all()


def run_round_robin_demo(
    items: Sequence[WorkItem],
    quantum: int = TIME_QUANTUM,
    sleep: _Sleep = time.sleep,
    out: TextIO | None = None,
) -> list[int]:
    """Let each item's thread work ``quantum`` units in turn until all finish.

    Returns the ids of the items in the order they completed.
    """
    items = list(items)
    out = out if out is not None else sys.stdout
    if quantum < 1:
        raise ValueError("quantum must be at least 1")
    for item in items:
        if item.total_work_units <= 0:
            raise ValueError(f"item {item.id} has no work to do")

    turns = _Turns()
    threads = [
        threading.Thread(
            target=_rr_worker,
            args=(position, item, turns, quantum, sleep, out),
            name=f"worker-{item.id}",
            daemon=True,
        )
        for position, item in enumerate(items)
    ]
    for thread in threads:
        thread.start()

    try:
        sleep(1)
        with turns.cond:
            current = 0
            while len(turns.order) < len(items):
                item = items[current]
                if item.progress < item.total_work_units:
                    turns.turn = current
                    turns.cond.notify_all()
                    turns.cond.wait_for(lambda: turns.turn is None)
                    if turns.error is not None:
                        raise turns.error
                current = (current + 1) % len(items)
    finally:
        with turns.cond:
            turns.stop = True
            turns.cond.notify_all()
        for thread in threads:
            thread.join()

    print(
        "\n--- ESCALONADOR: Todas as tarefas foram concluídas! Encerrando. ---",
        file=out,
    )
    return [items[position].id for position in turns.order]


def _fifo_worker(
    thread_id: int,
    turns: _Turns,
    times: list[int],
    rng: random.Random,
    sleep: _Sleep,
    out: TextIO,
) -> None:
    with turns.cond:
        turns.cond.wait_for(lambda: turns.stop or turns.turn == thread_id)
        if turns.stop:
            return
        try:
            print(f"Thread {thread_id}: Entrou na seção crítica.", file=out)
            times.append(do_work_fifo(thread_id, rng, sleep, out))
            print(f"Thread {thread_id}: Saindo da seção crítica.\n", file=out)
        except BaseException as exc:  # handed back to the caller
            turns.error = exc
            turns.stop = True
        else:
            turns.turn = thread_id + 1
        turns.cond.notify_all()


def run_fifo_demo(
    count: int = NUM_WORKERS,
    rng: random.Random | None = None,
    sleep: _Sleep = time.sleep,
    out: TextIO | None = None,
) -> list[int]:
    """Run ``count`` threads one after another in order of arrival.

    Returns the seconds each thread worked, in thread order.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    rng = rng if rng is not None else random.Random()
    out = out if out is not None else sys.stdout

    turns = _Turns()
    times: list[int] = []
    threads = [
        threading.Thread(
            target=_fifo_worker,
            args=(thread_id, turns, times, rng, sleep, out),
            name=f"fifo-{thread_id}",
            daemon=True,
        )
        for thread_id in range(count)
    ]
    for thread in threads:
        thread.start()

    try:
        sleep(1)
        with turns.cond:
            turns.turn = 0
            turns.cond.notify_all()
    except BaseException:
        with turns.cond:
            turns.stop = True
            turns.cond.notify_all()
        raise
    finally:
        for thread in threads:
            thread.join()

    if turns.error is not None:
        raise turns.error
    return times


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
        prog="crudsched-demo",
        description="Simulate round-robin or FIFO turns between worker threads.",
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in SchedulingMode],
        default=SchedulingMode.ROUND_ROBIN.value,
        help="scheduling policy (default: rr)",
    )
    parser.add_argument("--seed", type=int, help="seed for the random generator")
    parser.add_argument(
        "--time-scale",
        type=_non_negative,
        default=1.0,
        help="factor applied to every simulated sleep (0 disables waiting)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    mode = SchedulingMode(args.mode)
    rng = random.Random(args.seed)
    scale = args.time_scale
    out = sys.stdout

    def sleep(seconds: float) -> None:
        time.sleep(seconds * scale)

    if mode is SchedulingMode.ROUND_ROBIN:
        print(
            f"--- Simulação Round Robin com Trabalho Pausável (Quantum = {TIME_QUANTUM}) ---",
            file=out,
        )
        items = make_work_items(NUM_WORKERS, rng)
        for item in items:
            print(
                f"  - Tarefa {item.id} criada com {item.total_work_units} unidades de trabalho.",
                file=out,
            )
        print(file=out)
        run_round_robin_demo(items, TIME_QUANTUM, sleep, out)
    else:
        run_fifo_demo(NUM_WORKERS, rng, sleep, out)
    return 0