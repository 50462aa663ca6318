"""A producer-consumer task queue whose consumers wait for work."""

from __future__ import annotations

import sys
import threading
import time
from typing import TextIO

from taskdemos.simple_queue import (
    _SAMPLES,
    Task,
    TaskQueue,
    _fill,
    _parser,
    _work_through,
)


class BlockingTaskQueue(TaskQueue):
    """A FIFO of tasks where taking a task waits until one arrives or shutdown."""

    def __init__(self, out: TextIO | None = None) -> None:
        super().__init__(out)
        self._cond = threading.Condition()
        self._stopped = False

    def add_task(self, name: str, task_id: int) -> None:
        """Create and enqueue a task; ignored once the queue is shut down."""
        with self._cond:
            if self._stopped:
                return
            super().add_task(name, task_id)
            self._cond.notify()

    def pop_first_task(self) -> Task | None:
        """Wait for a task and return it; return None once shut down and drained."""
        with self._cond:
            self._cond.wait_for(lambda: self._stopped or bool(self._tasks))
            return super().pop_first_task()

    def shutdown(self) -> None:
        """Stop accepting tasks and wake every waiting consumer."""
        with self._cond:
            self._stopped = True
            self._cond.notify_all()


def process_tasks(
    task_queue: BlockingTaskQueue,
    delay: float = 0.1,
    out: TextIO | None = None,
) -> int:
    """Consume tasks until shutdown; return how many were handled."""
    return _work_through(
        task_queue, lambda t: f"Processing task {t.id} : {t.name}", delay, out
    )


def main(argv: list[str] | None = None) -> int:
    """Feed a worker thread in two batches, then shut the queue down."""
    args = _parser(
        "Feed tasks to a waiting worker thread.", delay=0.1, pause=0.15
    ).parse_args(argv)
    out = sys.stdout
    queue = BlockingTaskQueue(out)
    worker = threading.Thread(target=process_tasks, args=(queue, args.delay, out))
    worker.start()

    _fill(queue, _SAMPLES[:5])
    if args.pause > 0:
        time.sleep(args.pause)
    _fill(queue, _SAMPLES[5:])

    queue.shutdown()
    worker.join()
    out.write("All tasks processed \n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())