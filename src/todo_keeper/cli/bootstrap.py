# src/todo_keeper/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- picks the storage backend and wires it into TaskStore/AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import TaskStorage
from ..core.state import AppState
from ..tasks.filters import FilterMode
from ..tasks.storage import DEFAULT_SLOT_KEY, JsonFileStorage, SqliteStorage
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)


def create_storage(settings) -> TaskStorage:
    backend = str(getattr(settings, "storage_backend", "json")).lower()
    if backend == "sqlite":
        key = getattr(settings, "slot_key", None) or DEFAULT_SLOT_KEY
        return SqliteStorage(settings.tasks_path, key=key)
    if backend != "json":
        logger.warning("Unknown storage backend %r; using json", backend)
    return JsonFileStorage(settings.tasks_path)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    storage = create_storage(settings)
    return AppState(
        settings=settings,
        task_store=TaskStore(storage),
        filter_mode=FilterMode.parse(getattr(settings, "default_filter", None)),
    )
