# src/todo_keeper/tasks/errors.py

from __future__ import annotations


class TodoError(Exception):
    """Base class for errors the task engine reports to its caller."""


class ValidationError(TodoError):
    """Task text is empty or whitespace-only."""


class NotFoundError(TodoError):
    def __init__(self, task_id: str) -> None:
        super().__init__(f"Task {task_id!r} not found")
        self.task_id = task_id


class PersistenceError(TodoError):
    """
    Writing the task slot failed.

    Raised by storage backends from save(); the store keeps its previous
    in-memory state when this happens.
    """
