"""Shared fixtures for the to-do list tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from todo_list import TodoList


@pytest.fixture(autouse=True)
def plain_output(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep rendered lines free of ANSI codes."""
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.delenv("FORCE_COLOR", raising=False)


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("TODO_FILE", "TODO_LOG_LEVEL", "TODO_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def todo_list() -> TodoList:
    return TodoList()


@pytest.fixture
def tasks_file(tmp_path: Path) -> Path:
    return tmp_path / "todo_list.txt"
