# crudsched

A small simulation of two CPU scheduling policies, **FIFO** and
**Round Robin**. It runs them over eight tasks that belong to a SQLite table of
users. Every task has a deadline. After a run, the scheduler prints how long
each task took and whether it missed its deadline.

It uses only the standard library and needs Python 3.10 or later.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## The `crudsched` command

```
crudsched [--mode {fifo,rr}] [--db PATH] [--seed N] [--time-scale F] [--report PATH]
```

- `--mode`: the scheduling policy. The default is `rr`.
- `--db`: the SQLite file. The default is `dados.db`. The `usuarios` table is
  created if it is missing.
- `--seed`: a seed for the random generator, so runs can be repeated.
- `--time-scale`: a factor applied to every simulated sleep. The default is
  `1.0`. `0` turns waiting off.
- `--report`: also write a CSV report to this path.

The command builds eight tasks: insert, list, update and delete, two of each
(one periodic, one aperiodic). Each task is given 2 to 5 work units and a fixed
deadline between 3 and 12 seconds after the tasks are created.

- **FIFO** runs each task's CRUD job to completion, one after another. Each job
  does its database operation and then waits 2 to 7 seconds.
- **Round Robin** gives every task its own thread. Each thread receives up to 4
  one-second work units per turn, until all tasks are done. In this mode the
  tasks only work off their units and do not run their CRUD jobs.

After each completed task, the execution time in whole seconds is compared
with the deadline. The deadline is measured from the moment the tasks were
created. A final summary lists every task's execution time, deadline and
status.

## The `crudsched-demo` command

```
crudsched-demo [--mode {fifo,rr}] [--seed N] [--time-scale F]
```

This is a self-contained demonstration that uses no database:

- `rr` creates five work items of 3 to 8 units each. Worker threads take
  turns working off up to 2 units at a time.
- `fifo` starts five threads. They run strictly in order, and each one works
  for its id plus 0 to 5 seconds.

## Library use

- `crudsched.db`
  - `UserDatabase(path)` is a thread-safe context manager over the `usuarios`
    table. Its methods are `insert_user`, `update_user`, `remove_users_from`,
    `list_users` and `print_users`.
  - `remove_users_from` deletes every user whose id is at least the one given.
  - Rows come back as `User` records.
- `crudsched.task`
  - `Task` holds progress, deadline and timing fields.
  - It has the methods `is_complete`, `relative_deadline`, `execution_time` and
    `run_quantum`.
  - The module also has `TaskType` and `do_work_fifo`.
- `crudsched.crud_tasks`
  - `crud_insert`, `crud_list`, `crud_update` and `crud_delete` are the four
    jobs.
  - `random_user` picks a name and an `@example.com` address.
- `crudsched.task_manager`
  - `build_tasks` creates the standard eight tasks.
  - `CRUD_JOBS` gives the job for each task.
- `crudsched.scheduler`
  - `run_fifo` and `run_round_robin` both return the tasks in the order they
    completed.
  - `format_summary` produces the final report lines.
  - `SchedulingMode` names the two policies.
- `crudsched.report`
  - `report_rows` returns one row per task.
  - `write_csv_report` writes the columns `ID`, `Nome`, `Tipo`, `Execucao_s`,
    `Deadline_s` and `Status`. `Deadline_s` is the integer part of the deadline
    on the monotonic clock.
- `crudsched.demo`
  - `WorkItem`, `make_work_items`, `run_round_robin_demo` and `run_fifo_demo`
    are the building blocks of the demonstration.

The caller passes in the random sources, sleep functions, clocks and output
streams. A run can therefore be instant and repeatable:

```python
import io
import random
import time

from crudsched.task_manager import build_tasks
from crudsched.scheduler import run_round_robin, format_summary

tasks = build_tasks(random.Random(1), time.monotonic(), io.StringIO())
finished = run_round_robin(tasks, 4, lambda seconds: None, time.monotonic, io.StringIO())
print([task.name for task in finished])
print(format_summary(tasks))
```

## Limitations

- Periodic and aperiodic tasks differ only in their label. Periodic tasks are
  not released again.
- There is no priority or deadline-driven policy. Only FIFO and Round Robin are
  provided.