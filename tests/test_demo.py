import io
import random

import pytest

from crudsched.demo import (
    WorkItem,
    main,
    make_work_items,
    run_fifo_demo,
    run_round_robin_demo,
)


class _Sleeps:
    def __init__(self):
        self.calls = []

    def __call__(self, seconds):
        self.calls.append(seconds)


def test_make_work_items_sizes_and_ids():
    items = make_work_items(20, random.Random(3))
    assert [item.id for item in items] == list(range(20))
    assert all(3 <= item.total_work_units <= 8 for item in items)
    assert all(item.progress == 0 for item in items)


def test_make_work_items_is_reproducible():
    first = make_work_items(5, random.Random(11))
    second = make_work_items(5, random.Random(11))
    assert first == second


def test_make_work_items_rejects_negative_count():
    with pytest.raises(ValueError):
        make_work_items(-1, random.Random(0))


def test_round_robin_completes_all_items():
    items = make_work_items(5, random.Random(42))
    sleeps = _Sleeps()
    out = io.StringIO()
    order = run_round_robin_demo(items, 2, sleeps, out)
    assert sorted(order) == [0, 1, 2, 3, 4]
    assert all(item.progress == item.total_work_units for item in items)
    # one initial pause plus one second per unit of work
    assert len(sleeps.calls) == 1 + sum(item.total_work_units for item in items)
    assert out.getvalue().count("TAREFA CONCLUÍDA!") == 5
    assert "ESCALONADOR: Todas as tarefas foram concluídas!" in out.getvalue()


def test_round_robin_completion_order_follows_quanta():
    items = [WorkItem(0, 1), WorkItem(1, 5), WorkItem(2, 2)]
    order = run_round_robin_demo(items, 2, _Sleeps(), io.StringIO())
    assert order == [0, 2, 1]


def test_round_robin_pauses_unfinished_work():
    items = [WorkItem(0, 3)]
    out = io.StringIO()
    run_round_robin_demo(items, 2, _Sleeps(), out)
    assert out.getvalue().count("Quantum finalizado, tarefa pausada.") == 1
    assert out.getvalue().count("Assumindo CPU. Quantum: 2 unidades.") == 2


def test_round_robin_rejects_zero_quantum():
    with pytest.raises(ValueError):
        run_round_robin_demo([WorkItem(0, 3)], 0, _Sleeps(), io.StringIO())


def test_round_robin_rejects_empty_item():
    with pytest.raises(ValueError):
        run_round_robin_demo([WorkItem(0, 0)], 2, _Sleeps(), io.StringIO())


def test_fifo_runs_threads_in_order():
    sleeps = _Sleeps()
    out = io.StringIO()
    times = run_fifo_demo(5, random.Random(9), sleeps, out)
    assert len(times) == 5
    assert all(thread_id <= t <= thread_id + 5 for thread_id, t in enumerate(times))
    assert sleeps.calls == [1] + times
    text = out.getvalue()
    positions = [text.index(f"Thread {i}: Entrou na seção crítica.") for i in range(5)]
    assert positions == sorted(positions)


def test_fifo_is_reproducible():
    first = run_fifo_demo(4, random.Random(5), _Sleeps(), io.StringIO())
    second = run_fifo_demo(4, random.Random(5), _Sleeps(), io.StringIO())
    assert first == second


def test_fifo_rejects_negative_count():
    with pytest.raises(ValueError):
        run_fifo_demo(-2, random.Random(0), _Sleeps(), io.StringIO())


def test_main_round_robin(capsys):
    assert main(["--seed", "1", "--time-scale", "0"]) == 0
    text = capsys.readouterr().out
    assert "Simulação Round Robin com Trabalho Pausável (Quantum = 2)" in text
    assert text.count("TAREFA CONCLUÍDA!") == 5


def test_main_fifo(capsys):
    assert main(["--mode", "fifo", "--seed", "1", "--time-scale", "0"]) == 0
    text = capsys.readouterr().out
    assert text.count("Saindo da seção crítica.") == 5


def test_main_rejects_negative_time_scale():
    with pytest.raises(SystemExit):
        main(["--time-scale", "-1"])