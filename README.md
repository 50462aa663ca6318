# taskdemos

This package has five small demonstrations. You can import each one as a module, and each one also has a command.

## Modules

### `taskdemos.people`

- `Person(name, age)` is a dataclass.
- `compare_by_age(a, b)` returns `True` when `a` is strictly younger than `b`.
- `sort_by_age(people)` returns a new list ordered from youngest to oldest. The sort is stable.
- `format_people(people)` renders one `"<name> Age is <age>\n"` line per person.
- `default_people()` returns the sample list: Arjun 20, Bhuvan 15, Charan 25 and Dheeraj 23.

### `taskdemos.task_manager`

- `Step(name, order)` is a frozen dataclass.
- `TaskManager` keeps steps in the order you add them:
  - `add_task(name, order)` appends a `Step` and returns it.
  - `len(manager)` gives the number of steps.
  - Iterating over a `TaskManager` yields its steps.
  - `format_tasks()` renders `"STEP <order> : <name>"` lines.
  - `print_tasks(out=None)` writes those lines to `out`, or to standard output when `out` is not given.

### `taskdemos.simple_queue`

- `Task(name, task_id, out=None)` writes `Task <id> created` when it is constructed.
  - `release()` writes `Task <id> destroyed`. It does this once only.
  - `released` tells whether `release()` has been called.
  - A task can be used as a context manager, which releases it on exit.
- `TaskQueue(out=None)` is a first-in, first-out queue. It is not synchronised.
  - `add_task(name, task_id)` adds a task at the back.
  - `is_empty()` tells whether the queue is empty.
  - `len(queue)` gives the number of tasks.
  - `pop_first_task()` returns the front task, or `None` when the queue is empty.

### `taskdemos.locked_queue`

- `LockedTaskQueue(out=None)` is a `TaskQueue` whose `add_task`, `pop_first_task` and `len` are guarded by a lock.
- `process_tasks(task_queue, who_called, delay=0.1, out=None)` takes tasks until the queue is empty. For each task it:
  1. writes `Processing Task <id> : <name> called by <who_called>`;
  2. releases the task;
  3. sleeps for `delay` seconds.

  It returns how many tasks it handled. Several threads can run it on the same queue.

### `taskdemos.blocking_queue`

- `BlockingTaskQueue(out=None)` is a producer/consumer queue.
  - `pop_first_task()` waits until a task arrives or until `shutdown()` is called. After shutdown it still hands out the tasks that remain, and returns `None` once the queue is empty.
  - `add_task` is ignored after `shutdown()`.
  - `shutdown()` wakes every consumer that is waiting.
- `process_tasks(task_queue, delay=0.1, out=None)` consumes tasks until the queue is shut down and drained. It returns how many tasks it handled.

## Install

```
pip install .
pip install ".[test]"   # to run the tests
```

## Commands

| Command | What it does | Options |
| --- | --- | --- |
| `taskdemos-people` | Prints the sample people, then prints them again sorted by age. | none |
| `taskdemos-task-manager` | Prints eight sample steps and the total count. | none |
| `taskdemos-simple-queue` | Queues three sample tasks and processes them in order. | none |
| `taskdemos-locked-queue` | Queues ten tasks. A worker thread and the main thread then drain the queue together. | `--delay` (seconds of work per task, default 0.1) |
| `taskdemos-blocking-queue` | Starts a worker thread, feeds it five tasks, pauses, feeds it five more, then shuts the queue down. | `--delay` (default 0.1), `--pause` (seconds between the batches, default 0.15) |

All output goes to standard output.

## Example

```python
from taskdemos.task_manager import TaskManager

tm = TaskManager()
tm.add_task("Write Code", 1)
tm.add_task("Compile Code", 2)
print(tm.format_tasks(), end="")
print(len(tm))  # 2
```

## What it does not do

Tasks and steps live in memory only. Nothing is saved to disk, and the commands take no input beyond their timing options. The "work" done on each task is only a printed line and an optional sleep.