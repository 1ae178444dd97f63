# src/todo_keeper/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any

from ..tasks.filters import FilterMode, apply_filter
from ..tasks.task_models import Task
from ..tasks.task_store import TaskStore


@dataclass(slots=True)
class EditDraft:
    """
    Transient front-end state while a task is being edited.

    The store knows nothing about it: the draft is applied by calling
    TaskStore.update(task_id, text, due).
    """

    task_id: str
    text: str
    due: date | None = None


@dataclass
class AppState:
    # Settings object (real Settings or a SimpleNamespace in tests).
    settings: Any
    task_store: TaskStore

    filter_mode: FilterMode = FilterMode.ALL
    draft: EditDraft | None = None

    # Last rendered view, so commands can refer to tasks by position.
    visible: list[Task] = field(default_factory=list)

    def visible_tasks(self) -> list[Task]:
        self.visible = apply_filter(self.task_store.list(), self.filter_mode)
        return self.visible
