import io
import threading

from taskdemos.locked_queue import LockedTaskQueue, main, process_tasks


def _filled(*ids, out=None):
    queue = LockedTaskQueue(out if out is not None else io.StringIO())
    for task_id in ids:
        queue.add_task(f"t{task_id}", task_id)
    return queue


def test_fifo_order_single_thread():
    queue = _filled(3, 1, 2)
    assert [queue.pop_first_task().id for _ in range(3)] == [3, 1, 2]
    assert queue.pop_first_task() is None


def test_len_tracks_contents():
    queue = _filled(1, 2)
    before = len(queue)
    queue.pop_first_task()
    assert (before, len(queue)) == (2, 1)


def test_concurrent_pops_hand_out_each_task_once():
    ids = list(range(200))
    queue = _filled(*ids)
    taken = []
    taken_lock = threading.Lock()

    def worker():
        while (task := queue.pop_first_task()) is not None:
            with taken_lock:
                taken.append(task.id)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert sorted(taken) == ids
    assert len(queue) == 0


def test_process_tasks_drains_and_reports():
    buffer = io.StringIO()
    queue = _filled(1, 2, out=buffer)
    assert process_tasks(queue, "worker", delay=0, out=buffer) == 2
    assert queue.pop_first_task() is None
    lines = buffer.getvalue().splitlines()
    assert lines[2:] == [
        "Processing Task 1 : t1 called by worker",
        "Task 1 destroyed",
        "Processing Task 2 : t2 called by worker",
        "Task 2 destroyed",
    ]


def test_main_processes_every_task_once(capsys):
    assert main(["--delay", "0"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == "All tasks processed "
    ids = sorted(int(line.split()[2]) for line in lines if line.startswith("Processing"))
    assert ids == list(range(1, 11))