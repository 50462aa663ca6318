import io

import pytest

from taskdemos.task_manager import Step, TaskManager, main


def _manager(*steps):
    manager = TaskManager()
    for name, order in steps:
        manager.add_task(name, order)
    return manager


def test_empty_manager():
    manager = _manager()
    assert (len(manager), manager.format_tasks(), list(manager)) == (0, "", [])


def test_add_task_returns_step_and_counts():
    manager = _manager(("Write Code", 1))
    assert manager.add_task("Compile Code", 3) == Step("Compile Code", 3)
    assert len(manager) == 2


def test_iteration_keeps_insertion_order():
    manager = _manager(("c", 9), ("a", 1), ("b", 2))
    assert [(s.name, s.order) for s in manager] == [("c", 9), ("a", 1), ("b", 2)]


def test_format_single_step():
    assert _manager(("Write Code", 1)).format_tasks() == "STEP 1 : Write Code\n"


@pytest.mark.parametrize("explicit", [True, False])
def test_print_tasks_writes_formatted_text(explicit, capsys):
    manager = _manager(("Write Code", 1), ("Compile Code", 3))
    if explicit:
        buffer = io.StringIO()
        manager.print_tasks(buffer)
        written = buffer.getvalue()
    else:
        manager.print_tasks()
        written = capsys.readouterr().out
    assert written == "STEP 1 : Write Code\nSTEP 3 : Compile Code\n"


def test_main_output(capsys):
    assert main([]) == 0
    output = capsys.readouterr().out
    assert output.startswith("\nTasks are \n")
    assert output.endswith("Total tasks: 8\n")
    assert "STEP 9 : Merge the PR to main branch\n" in output