# src/todo_keeper/tasks/ids.py

from __future__ import annotations

import uuid


def new_id() -> str:
    """Random (uuid4) task id. No coordination between stores is needed."""
    return str(uuid.uuid4())
