# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name (default: todo-keeper).",
    "TODO_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Storage
    "TODO_DATA_DIR": "Local data directory for logs and tasks (default: .local/todo).",
    "TODO_STORAGE_BACKEND": "Where the task slot lives: json | sqlite (default: json).",
    "TODO_TASKS_PATH": (
        "Task slot location (default: <data_dir>/tasks.json, or <data_dir>/tasks.sqlite3 for sqlite)."
    ),
    "TODO_SLOT_KEY": "Slot key inside the SQLite key/value table (default: tasks).",
    # Front-end
    "TODO_DEFAULT_FILTER": "Initial filter: All | Completed | Pending (default: All).",
}
