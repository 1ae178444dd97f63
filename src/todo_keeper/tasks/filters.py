# src/todo_keeper/tasks/filters.py

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum

from .task_models import Task


class FilterMode(StrEnum):
    ALL = "All"
    COMPLETED = "Completed"
    PENDING = "Pending"

    @classmethod
    def parse(cls, raw: object) -> FilterMode:
        """Case-insensitive lookup; anything unrecognized means ALL."""
        if isinstance(raw, FilterMode):
            return raw
        if isinstance(raw, str):
            needle = raw.strip().lower()
            for mode in cls:
                if mode.value.lower() == needle:
                    return mode
        return cls.ALL


def apply_filter(tasks: Iterable[Task], mode: FilterMode | str | None) -> list[Task]:
    """Visible subset of `tasks` for `mode`, in input order. Never fails."""
    selected = FilterMode.parse(mode)
    if selected is FilterMode.COMPLETED:
        return [t for t in tasks if t.completed]
    if selected is FilterMode.PENDING:
        return [t for t in tasks if not t.completed]
    return list(tasks)
