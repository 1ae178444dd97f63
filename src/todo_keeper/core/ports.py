# src/todo_keeper/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the task engine.

TaskStore depends on a storage Protocol instead of a concrete backend, so the
durable slot can be a JSON file, a SQLite row, or an in-memory fake in tests.
"""

from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import Task


class TaskStorage(Protocol):
    """Durable slot holding the full ordered task list."""

    def load(self) -> list[Task]: ...

    # Must raise PersistenceError on failure; partial writes are not allowed.
    def save(self, tasks: Iterable[Task]) -> None: ...
