# tests/test_bootstrap.py

from __future__ import annotations

from types import SimpleNamespace

from todo_keeper.cli.bootstrap import create_initial_state, create_storage
from todo_keeper.tasks.filters import FilterMode
from todo_keeper.tasks.storage import JsonFileStorage, SqliteStorage


def test_state_persists_across_restarts(settings: SimpleNamespace) -> None:
    state = create_initial_state(settings=settings)
    task = state.task_store.create("Buy milk")
    state.task_store.toggle_complete(task.id)

    assert settings.tasks_path.exists()

    restarted = create_initial_state(settings=settings)
    assert restarted.task_store.list() == state.task_store.list()


def test_sqlite_backend_selected(settings: SimpleNamespace) -> None:
    settings.storage_backend = "sqlite"
    settings.tasks_path = settings.data_dir / "tasks.sqlite3"

    storage = create_storage(settings)
    assert isinstance(storage, SqliteStorage)

    state = create_initial_state(settings=settings)
    state.task_store.create("x")
    assert len(create_initial_state(settings=settings).task_store) == 1


def test_unknown_backend_falls_back_to_json(settings: SimpleNamespace) -> None:
    settings.storage_backend = "redis"
    assert isinstance(create_storage(settings), JsonFileStorage)


def test_default_filter_from_settings(settings: SimpleNamespace) -> None:
    settings.default_filter = "completed"
    assert create_initial_state(settings=settings).filter_mode is FilterMode.COMPLETED
