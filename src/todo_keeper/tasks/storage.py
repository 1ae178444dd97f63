# src/todo_keeper/tasks/storage.py

"""
Durable task slot.

The whole task list is stored as one JSON array under a fixed slot name.
Record layout (the field names are the compatibility contract):

    {"id": "...", "task": "...", "dueDate": "MM/dd/yyyy" | "No due date",
     "completed": false, "status": "pending" | "completed"}

Reading is forgiving: a missing, unreadable or malformed slot loads as an
empty list, and individual broken records are dropped. Writing is strict:
save() raises PersistenceError so the caller can keep its previous state.
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
import sqlite3
import time
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from .dates import NO_DUE_DATE, format_date, parse_date
from .errors import PersistenceError
from .task_models import Task, TaskStatus

logger = logging.getLogger(__name__)

DEFAULT_SLOT_KEY = "tasks"


# ---- codec ----


def task_to_record(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "task": task.text,
        "dueDate": task.due_date,
        "completed": task.completed,
        "status": task.status.value,
    }


def dump_tasks(tasks: Iterable[Task]) -> str:
    return json.dumps([task_to_record(t) for t in tasks], ensure_ascii=False, indent=2)


def record_to_task(raw: Mapping[str, Any]) -> Task | None:
    """Validate one stored record. Returns None if the record is unusable."""
    task_id = raw.get("id")
    if not isinstance(task_id, str) or not task_id.strip():
        return None

    text = raw.get("task") or raw.get("text")
    if not isinstance(text, str) or not text.strip():
        return None

    completed = raw.get("completed")
    if not isinstance(completed, bool):
        return None

    due_raw = raw.get("dueDate")
    if due_raw is None or (isinstance(due_raw, str) and due_raw.strip() in ("", NO_DUE_DATE)):
        due_date = NO_DUE_DATE
    elif isinstance(due_raw, str):
        parsed = parse_date(due_raw)
        if parsed is None:
            return None
        due_date = format_date(parsed)
    else:
        return None

    status = TaskStatus.from_completed(completed)
    stored_status = TaskStatus.from_raw(raw.get("status"))
    if stored_status is not None and stored_status != status:
        logger.warning(
            "Task %s has status=%s but completed=%s; using %s",
            task_id,
            stored_status.value,
            completed,
            status.value,
        )

    return Task(
        id=task_id,
        text=text.strip(),
        due_date=due_date,
        completed=completed,
        status=status,
    )


def parse_tasks(raw: str | None) -> list[Task]:
    """Decode a slot value. Never raises."""
    if not raw:
        return []
    try:
        data = json.loads(raw)
    except (ValueError, RecursionError):
        logger.warning("Task slot is not valid JSON; starting with no tasks.")
        return []
    if not isinstance(data, list):
        logger.warning("Task slot holds %s, expected a list; starting with no tasks.", type(data).__name__)
        return []

    out: list[Task] = []
    seen: set[str] = set()
    dropped = 0
    for item in data:
        task = record_to_task(item) if isinstance(item, dict) else None
        if task is None or task.id in seen:
            dropped += 1
            continue
        seen.add(task.id)
        out.append(task)

    if dropped:
        logger.warning("Dropped %d malformed task record(s) while loading.", dropped)
    return out


# ---- backends ----


class JsonFileStorage:
    """Task slot kept in a single JSON file (atomic replace on save)."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Task]:
        if not self._path.exists():
            return []
        try:
            raw = self._path.read_text("utf-8")
        except (OSError, UnicodeDecodeError):
            logger.exception("Failed to read tasks from %s", self._path)
            return []
        tasks = parse_tasks(raw)
        logger.info("Loaded %d task(s) from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        payload = dump_tasks(tasks)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload, "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise PersistenceError(f"Failed to write tasks to {self._path}: {e}") from e
        with contextlib.suppress(OSError):
            os.chmod(self._path, 0o600)
        logger.debug("Saved tasks to %s", self._path)


class SqliteStorage:
    """
    Task slot kept as a row of a small key/value table in SQLite.

    Each method opens its own short-lived connection.
    """

    def __init__(self, db_path: str | Path, key: str = DEFAULT_SLOT_KEY) -> None:
        self._db_path = Path(db_path)
        self._key = key
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()
        logger.info("SqliteStorage ready db=%s key=%s", self._db_path, self._key)

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        return conn

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS kv_slots (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at REAL NOT NULL
                )
                """
            )
            conn.commit()
        finally:
            conn.close()

    def load(self) -> list[Task]:
        try:
            conn = self._get_conn()
            try:
                row = conn.execute(
                    "SELECT value FROM kv_slots WHERE key = ?", (self._key,)
                ).fetchone()
            finally:
                conn.close()
        except sqlite3.Error:
            logger.exception("Failed to read task slot %s from %s", self._key, self._db_path)
            return []
        if row is None:
            return []
        tasks = parse_tasks(row["value"])
        logger.info("Loaded %d task(s) from %s [%s]", len(tasks), self._db_path, self._key)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        payload = dump_tasks(tasks)
        try:
            conn = self._get_conn()
            try:
                conn.execute(
                    """
                    INSERT INTO kv_slots(key, value, updated_at)
                    VALUES (?, ?, ?)
                    ON CONFLICT(key) DO UPDATE SET
                        value = excluded.value,
                        updated_at = excluded.updated_at
                    """,
                    (self._key, payload, time.time()),
                )
                conn.commit()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise PersistenceError(f"Failed to write task slot {self._key}: {e}") from e
        logger.debug("Saved task slot %s to %s", self._key, self._db_path)
