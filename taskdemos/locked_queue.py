"""A task queue guarded by a lock, drained by two workers at once."""

from __future__ import annotations

import sys
import threading
from typing import TextIO

from taskdemos.simple_queue import (
    _SAMPLES,
    Task,
    TaskQueue,
    _fill,
    _parser,
    _work_through,
)


class LockedTaskQueue(TaskQueue):
    """A FIFO of tasks safe to share between threads."""

    def __init__(self, out: TextIO | None = None) -> None:
        super().__init__(out)
        self._lock = threading.Lock()

    def add_task(self, name: str, task_id: int) -> None:
        """Create a task and put it at the back of the queue."""
        with self._lock:
            super().add_task(name, task_id)

    def pop_first_task(self) -> Task | None:
        """Remove and return the front task, or None when the queue is empty."""
        with self._lock:
            return super().pop_first_task()

    def __len__(self) -> int:
        with self._lock:
            return super().__len__()


def process_tasks(
    task_queue: LockedTaskQueue,
    who_called: str,
    delay: float = 0.1,
    out: TextIO | None = None,
) -> int:
    """Process tasks until the queue is empty; return how many were handled."""
    return _work_through(
        task_queue,
        lambda t: f"Processing Task {t.id} : {t.name} called by {who_called}",
        delay,
        out,
    )


def main(argv: list[str] | None = None) -> int:
    """Fill a queue, then drain it from a worker thread and the main thread."""
    args = _parser("Drain a shared task queue from two threads.", delay=0.1).parse_args(
        argv
    )
    out = sys.stdout
    queue = LockedTaskQueue(out)
    _fill(queue, _SAMPLES)

    out.write("Started processing tasks \n")
    worker = threading.Thread(
        target=process_tasks,
        args=(queue, "thread in main function", args.delay, out),
    )
    worker.start()
    process_tasks(queue, "directly by main function", args.delay, out)
    worker.join()
    out.write("All tasks processed \n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())