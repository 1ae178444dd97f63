# tests/test_filters.py

from __future__ import annotations

import pytest

from todo_keeper.tasks.filters import FilterMode, apply_filter
from todo_keeper.tasks.task_models import Task, TaskStatus


def _tasks() -> list[Task]:
    return [
        Task(id="1", text="a"),
        Task(id="2", text="b", completed=True, status=TaskStatus.COMPLETED),
        Task(id="3", text="c"),
        Task(id="4", text="d", completed=True, status=TaskStatus.COMPLETED),
    ]


def test_modes_select_expected_tasks() -> None:
    tasks = _tasks()
    assert apply_filter(tasks, FilterMode.ALL) == tasks
    assert [t.id for t in apply_filter(tasks, "Completed")] == ["2", "4"]
    assert [t.id for t in apply_filter(tasks, "Pending")] == ["1", "3"]


def test_completed_and_pending_partition_input() -> None:
    tasks = _tasks()
    done = apply_filter(tasks, FilterMode.COMPLETED)
    pending = apply_filter(tasks, FilterMode.PENDING)

    assert not {t.id for t in done} & {t.id for t in pending}
    assert sorted(t.id for t in done + pending) == [t.id for t in tasks]


@pytest.mark.parametrize("mode", ["Archived", "", None, 42])
def test_unknown_mode_behaves_as_all(mode) -> None:
    tasks = _tasks()
    assert apply_filter(tasks, mode) == tasks


def test_filter_does_not_mutate_input() -> None:
    tasks = _tasks()
    copy = list(tasks)
    apply_filter(tasks, "Pending")
    assert tasks == copy


def test_parse_is_case_insensitive() -> None:
    assert FilterMode.parse("pending") is FilterMode.PENDING
    assert FilterMode.parse(" COMPLETED ") is FilterMode.COMPLETED
    assert FilterMode.parse("nope") is FilterMode.ALL
