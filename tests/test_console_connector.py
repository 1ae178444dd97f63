# tests/test_console_connector.py

from __future__ import annotations

import pytest

from todo_keeper.connectors.console_connector import run_console_loop
from todo_keeper.core.state import AppState


def _feed(monkeypatch: pytest.MonkeyPatch, lines: list[str]) -> None:
    it = iter(lines)

    def fake_input(prompt: str = "") -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


def test_console_drives_store_until_exit(
    state: AppState, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _feed(monkeypatch, ["Buy milk", "", "/done 1", "/exit", "/add never reached"])

    run_console_loop(state)

    (task,) = state.task_store.list()
    assert task.text == "Buy milk"
    assert task.completed is True
    out = capsys.readouterr().out
    assert "Todo Added successfully" in out
    assert "Todo marked completed" in out


def test_console_stops_on_eof(state: AppState, monkeypatch: pytest.MonkeyPatch) -> None:
    _feed(monkeypatch, ["/add a"])
    run_console_loop(state)
    assert len(state.task_store) == 1
