# src/todo_keeper/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import replace
from datetime import date

from ..core.ports import TaskStorage
from .dates import display_due
from .errors import NotFoundError, ValidationError
from .ids import new_id
from .task_models import Task, TaskStatus

logger = logging.getLogger(__name__)


def _clean_text(text: str | None) -> str:
    cleaned = (text or "").strip()
    if not cleaned:
        raise ValidationError("Task text must not be empty")
    return cleaned


class TaskStore:
    """
    Ordered, in-memory task list backed by a durable slot.

    Every mutation builds the new list, saves it, and only then swaps it in.
    If storage.save() raises, the error propagates and the store keeps its
    previous contents.

    Tasks are immutable, and list() returns a fresh tuple, so nothing outside
    the store can change its records.
    """

    def __init__(
        self,
        storage: TaskStorage,
        *,
        id_factory: Callable[[], str] = new_id,
        load: bool = True,
    ) -> None:
        self._storage = storage
        self._id_factory = id_factory
        self._tasks: list[Task] = []
        if load:
            self.reload()

    def reload(self) -> None:
        self._tasks = list(self._storage.load())
        logger.info("TaskStore ready total=%d", len(self._tasks))

    # ---- low-level helpers ----

    def _index_of(self, task_id: str) -> int:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        raise NotFoundError(task_id)

    def _fresh_id(self) -> str:
        taken = {t.id for t in self._tasks}
        while True:
            candidate = self._id_factory()
            if candidate not in taken:
                return candidate
            logger.warning("Id factory returned a duplicate id %s; retrying", candidate)

    def _commit(self, tasks: list[Task]) -> None:
        self._storage.save(tasks)
        self._tasks = tasks

    # ---- queries ----

    def list(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def get(self, task_id: str) -> Task:
        return self._tasks[self._index_of(task_id)]

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(tuple(self._tasks))

    def __contains__(self, task_id: object) -> bool:
        return any(t.id == task_id for t in self._tasks)

    # ---- mutations ----

    def create(self, text: str, due: date | None = None) -> Task:
        cleaned = _clean_text(text)
        task = Task(id=self._fresh_id(), text=cleaned, due_date=display_due(due))
        self._commit([*self._tasks, task])
        logger.debug("Task created id=%s due=%s", task.id, task.due_date)
        return task

    def update(self, task_id: str, text: str, due: date | None = None) -> Task:
        """Replace text and due date in place. Editing always resets to pending."""
        idx = self._index_of(task_id)
        updated = replace(
            self._tasks[idx],
            text=_clean_text(text),
            due_date=display_due(due),
            completed=False,
            status=TaskStatus.PENDING,
        )
        tasks = list(self._tasks)
        tasks[idx] = updated
        self._commit(tasks)
        logger.debug("Task updated id=%s due=%s", task_id, updated.due_date)
        return updated

    def toggle_complete(self, task_id: str) -> Task:
        idx = self._index_of(task_id)
        current = self._tasks[idx]
        completed = not current.completed
        toggled = replace(current, completed=completed, status=TaskStatus.from_completed(completed))
        tasks = list(self._tasks)
        tasks[idx] = toggled
        self._commit(tasks)
        logger.debug("Task toggled id=%s status=%s", task_id, toggled.status.value)
        return toggled

    def remove(self, task_id: str) -> None:
        idx = self._index_of(task_id)
        self._commit(self._tasks[:idx] + self._tasks[idx + 1 :])
        logger.debug("Task removed id=%s", task_id)

    def clear(self) -> None:
        count = len(self._tasks)
        self._commit([])
        logger.debug("Tasks cleared count=%d", count)
