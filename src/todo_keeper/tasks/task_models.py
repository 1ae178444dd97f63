# src/todo_keeper/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import StrEnum

from .dates import NO_DUE_DATE, parse_date


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    Always mirrors Task.completed; kept as a separate field because it is part
    of the persisted record layout.
    """

    PENDING = "pending"
    COMPLETED = "completed"

    @classmethod
    def from_completed(cls, completed: bool) -> TaskStatus:
        return cls.COMPLETED if completed else cls.PENDING

    @classmethod
    def from_raw(cls, raw: object) -> TaskStatus | None:
        if not isinstance(raw, str) or not raw:
            return None
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    text: str
    due_date: str = NO_DUE_DATE
    completed: bool = False
    status: TaskStatus = TaskStatus.PENDING

    def due(self) -> date | None:
        return parse_date(self.due_date)

    @property
    def has_due_date(self) -> bool:
        return self.due_date != NO_DUE_DATE
