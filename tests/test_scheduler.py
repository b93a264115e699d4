import io

import pytest

from crudsched.scheduler import (
    SchedulingMode,
    format_summary,
    run_fifo,
    run_round_robin,
)
from crudsched.task import Task


def _task(task_id, units=1, deadline=100.0, name=None):
    return Task(
        id=task_id,
        name=name or f"T{task_id}",
        total_work_units=units,
        time_zero=0.0,
        deadline=deadline,
    )


def _clock(*values):
    values = iter(values)
    return lambda: next(values)


def _no_sleep(_seconds):
    return None


def test_scheduling_mode_values():
    assert SchedulingMode("fifo") is SchedulingMode.FIFO
    assert SchedulingMode("rr") is SchedulingMode.ROUND_ROBIN


def test_format_summary_ok_line():
    task = Task(id=0, name="X", time_zero=0.0, deadline=4.0,
                start_time=1.0, finish_time=3.5)
    assert format_summary([task]) == "⏱️  X | Execução: 2.50| Deadline: 4.0 | ✅ OK"


def test_format_summary_violated_line():
    task = Task(id=0, name="Y", deadline=3.0, missed_deadline=True)
    assert format_summary([task]).endswith("| ❌ Violado")


def test_fifo_runs_in_order_and_flags_misses():
    a, b = _task(0, deadline=5.0, name="A"), _task(1, deadline=5.0, name="B")
    calls = []
    out = io.StringIO()
    result = run_fifo([a, b], lambda t: calls.append(t.name),
                      _clock(0.0, 1.0, 1.0, 10.0), out)
    assert calls == ["A", "B"]
    assert result == [a, b]
    assert [a.missed_deadline, b.missed_deadline] == [False, True]
    assert (b.start_time, b.finish_time) == (1.0, 10.0)
    text = out.getvalue()
    assert "⚠️  B VIOLOU o deadline!" in text
    assert "✅ A dentro do deadline." in text
    assert "[FIFO] Todas as tarefas foram concluídas!" in text


def test_fifo_uses_whole_seconds():
    task = _task(0, deadline=1.0)
    run_fifo([task], lambda t: None, _clock(0.1, 1.9), io.StringIO())
    assert task.missed_deadline is False


def test_fifo_default_runner_calls_task_func():
    calls = []
    task = _task(0)
    task.task_func = lambda: calls.append(task.id)
    result = run_fifo([task], clock=_clock(0.0, 0.0), out=io.StringIO())
    assert result == [task]
    assert calls == [0]
    assert (task.start_time, task.finish_time) == (0.0, 0.0)
    assert task.missed_deadline is False


def test_fifo_without_job_raises():
    with pytest.raises(ValueError):
        run_fifo([_task(0)], clock=_clock(0.0, 0.0), out=io.StringIO())


def test_round_robin_completion_order():
    tasks = [_task(0, 3), _task(1, 1), _task(2, 5)]
    out = io.StringIO()
    done = run_round_robin(tasks, 2, _no_sleep, lambda: 0.0, out)
    assert [t.id for t in done] == [1, 0, 2]
    assert all(t.progress == t.total_work_units for t in tasks)
    assert "[RR] Todas as tarefas foram concluídas!" in out.getvalue()


def test_round_robin_every_task_completes_once():
    tasks = [_task(i, units) for i, units in enumerate([4, 2, 6, 1])]
    done = run_round_robin(tasks, 3, _no_sleep, lambda: 0.0, io.StringIO())
    assert sorted(t.id for t in done) == [0, 1, 2, 3]
    assert all(t.is_complete() and not t.missed_deadline for t in tasks)


def test_round_robin_pauses_unfinished_task():
    task = _task(0, 5)
    out = io.StringIO()
    run_round_robin([task], 4, _no_sleep, lambda: 0.0, out)
    text = out.getvalue()
    assert text.count("Quantum finalizado, tarefa pausada.") == 1
    assert text.count("TAREFA CONCLUÍDA!") == 1


def test_round_robin_flags_missed_deadline():
    task = _task(0, 1, deadline=1.0)
    run_round_robin([task], 4, _no_sleep, _clock(0.0, 5.0), io.StringIO())
    assert task.missed_deadline is True
    assert (task.start_time, task.finish_time) == (0.0, 5.0)


def test_round_robin_rejects_empty_task():
    with pytest.raises(ValueError):
        run_round_robin([_task(0, 0)], 4, _no_sleep, lambda: 0.0, io.StringIO())


def test_round_robin_propagates_worker_error():
    calls = []

    def sleep(seconds):
        calls.append(seconds)
        if len(calls) > 1:
            raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        run_round_robin([_task(0, 2)], 4, sleep, lambda: 0.0, io.StringIO())


def test_round_robin_with_no_tasks():
    assert run_round_robin([], 4, _no_sleep, lambda: 0.0, io.StringIO()) == []