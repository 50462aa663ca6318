"""Demonstrations: people sorted by age, an ordered step list, and plain, locked and blocking task queues."""

__version__ = "0.1.0"
__all__ = ["people", "task_manager", "simple_queue", "locked_queue", "blocking_queue"]