"""An ordered list of named steps."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TextIO


@dataclass(frozen=True)
class Step:
    """A named step with its position in the workflow."""

    name: str
    order: int


class TaskManager:
    """Keeps steps in the order they were added."""

    def __init__(self) -> None:
        self._steps: list[Step] = []

    def add_task(self, name: str, order: int) -> Step:
        """Append a new step and return it."""
        step = Step(name, order)
        self._steps.append(step)
        return step

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self._steps)

    def format_tasks(self) -> str:
        """Render one ``STEP <order> : <name>`` line per step."""
        return "".join(f"STEP {step.order} : {step.name}\n" for step in self._steps)

    def print_tasks(self, out: TextIO | None = None) -> None:
        """Write the rendered steps to ``out`` (standard output by default)."""
        (out if out is not None else sys.stdout).write(self.format_tasks())


def main(argv: list[str] | None = None) -> int:
    """Build the sample workflow and print it with its step count."""
    parser = argparse.ArgumentParser(description="Print a sample list of steps.")
    parser.parse_args(argv)

    manager = TaskManager()
    manager.add_task("Write Code", 1)
    manager.add_task("Review the code for any improvements", 2)
    manager.add_task("Compile Code", 3)
    manager.add_task("Fix compilation errors if any", 4)
    manager.add_task("Test the code after successful compilation", 5)
    manager.add_task("Push the code and raise PR", 6)
    manager.add_task("Address review comments if any", 7)
    manager.add_task("Merge the PR to main branch", 9)

    out = sys.stdout
    out.write("\nTasks are \n")
    manager.print_tasks(out)
    out.write(f"Total tasks: {len(manager)}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())