"""A first-in, first-out queue of tasks that announce their lifetime."""

from __future__ import annotations

import argparse
import sys
import time
from collections import deque
from typing import Callable, Iterable, TextIO

_SAMPLES: tuple[tuple[int, str], ...] = tuple(
    enumerate(
        (
            "Write some code",
            "Compile the code",
            "Test the code",
            "Fix bugs, if any",
            "Retest once more",
            "Code cleanup",
            "Push code to cloud",
            "Raise a pull request",
            "Address review comments, if any",
            "Merge PR to main branch",
        ),
        start=1,
    )
)

_TIMING_HELP = {
    "delay": "seconds of simulated work per task",
    "pause": "seconds between the two batches",
}


class Task:
    """A named task that reports when it is created and when it is released."""

    def __init__(self, name: str, task_id: int, out: TextIO | None = None) -> None:
        self.name = name
        self.id = task_id
        self._out = out if out is not None else sys.stdout
        self._released = False
        self._out.write(f"Task {task_id} created\n")

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        """Report the end of this task's life; later calls do nothing."""
        if not self._released:
            self._released = True
            self._out.write(f"Task {self.id} destroyed\n")

    def __enter__(self) -> Task:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def __repr__(self) -> str:
        return f"Task(name={self.name!r}, id={self.id!r})"


class TaskQueue:
    """An unsynchronised FIFO of tasks."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out
        self._tasks: deque[Task] = deque()

    def add_task(self, name: str, task_id: int) -> None:
        """Create a task and put it at the back of the queue."""
        self._tasks.append(Task(name, task_id, self._out))

    def is_empty(self) -> bool:
        return not self._tasks

    def __len__(self) -> int:
        return len(self._tasks)

    def pop_first_task(self) -> Task | None:
        """Remove and return the front task, or None when the queue is empty."""
        return self._tasks.popleft() if self._tasks else None


def _fill(queue: TaskQueue, samples: Iterable[tuple[int, str]]) -> None:
    for task_id, name in samples:
        queue.add_task(name, task_id)


def _work_through(
    task_queue: TaskQueue,
    describe: Callable[[Task], str],
    delay: float,
    out: TextIO | None,
) -> int:
    """Take tasks until the queue yields None; return how many were handled."""
    stream = out if out is not None else sys.stdout
    handled = 0
    while (task := task_queue.pop_first_task()) is not None:
        with task:
            stream.write(describe(task) + "\n")
            handled += 1
            if delay > 0:
                time.sleep(delay)
    return handled


def _parser(description: str, **timings: float) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    for name, default in timings.items():
        parser.add_argument(
            f"--{name}", type=float, default=default, help=_TIMING_HELP[name]
        )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Queue three sample tasks and process them in order."""
    _parser("Process a queue of sample tasks.").parse_args(argv)
    out = sys.stdout
    queue = TaskQueue(out)
    _fill(queue, _SAMPLES[:3])
    out.write("Started processing tasks \n")
    _work_through(queue, lambda t: f"Processing Task {t.id} : {t.name}", 0, out)
    out.write("All tasks processed \n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())