"""Tests for the interactive shell and the click entry point."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

import pytest
from click.testing import CliRunner

import main as main_module
from cli import CLI
from main import main
from todo_list import TodoList


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a CLI runner."""
    return CliRunner()


@pytest.fixture
def logging_calls(monkeypatch: pytest.MonkeyPatch) -> List[Dict[str, Any]]:
    """Record setup_logging calls instead of reconfiguring the root logger."""
    calls: List[Dict[str, Any]] = []
    monkeypatch.setattr(main_module, "setup_logging", lambda **kw: calls.append(kw))
    return calls


def _run(cli_runner: CliRunner, tasks_file: Path, keys: str):
    return cli_runner.invoke(main, ["--file", str(tasks_file)], input=keys)


@pytest.mark.usefixtures("logging_calls")
class TestMenuLoop:
    def test_add_complete_export_import(self, cli_runner: CliRunner, tasks_file: Path) -> None:
        result = _run(cli_runner, tasks_file, "1\nwash car\n4\n1\n5\n6\n7\n")
        assert result.exit_code == 0, result.output
        assert "task was added successfully" in result.output
        assert "task #1 was marked as completed successfully" in result.output
        assert f"todo list was successfully exported to {tasks_file}" in result.output
        assert f"todo list was successfully imported from {tasks_file}" in result.output
        assert "task id: 1; description: wash car; is completed: true" in result.output
        assert tasks_file.read_text(encoding="utf-8") == "1|||wash car|||true\n"
        assert result.output.rstrip().endswith("exiting...")

    def test_edit_and_delete(self, cli_runner: CliRunner, tasks_file: Path) -> None:
        result = _run(cli_runner, tasks_file, "1\nold text\n3\n1\n  new text  \n5\n2\n1\n7\n")
        assert result.exit_code == 0, result.output
        assert "task #1 was edited successfully" in result.output
        assert "task #1 was deleted successfully" in result.output
        assert tasks_file.read_text(encoding="utf-8") == "1|||new text|||false\n"
        assert result.output.rstrip().split("deleted successfully")[-1].count("right now todo list is empty...") == 1

    def test_invalid_choices(self, cli_runner: CliRunner, tasks_file: Path) -> None:
        result = _run(cli_runner, tasks_file, "abc\n9\n\n7\n")
        assert result.exit_code == 0
        assert result.output.count("invalid action choice. a number must be entered...") == 2
        assert "invalid action choice. please select a valid option..." in result.output

    @pytest.mark.parametrize("action", ["2", "3", "4", "5"])
    def test_actions_on_empty_list(self, cli_runner: CliRunner, tasks_file: Path, action: str) -> None:
        result = _run(cli_runner, tasks_file, f"{action}\n7\n")
        assert result.exit_code == 0
        assert "there's no tasks in todo list..." in result.output
        assert not tasks_file.exists()

    def test_unknown_and_malformed_ids(self, cli_runner: CliRunner, tasks_file: Path) -> None:
        result = _run(cli_runner, tasks_file, "1\na\n3\n5\n2\nxyz\n4\n-1\n7\n")
        assert result.exit_code == 0
        assert "\n      no task found with id #5" in result.output
        assert result.output.count("invalid id of the task. a number must be entered...") == 2
        assert "enter new task description" not in result.output

    def test_unknown_id_on_delete_and_complete(self, cli_runner: CliRunner, tasks_file: Path) -> None:
        result = _run(cli_runner, tasks_file, "1\na\n2\n8\n4\n9\n7\n")
        assert result.exit_code == 0
        assert "\n    no task found with id #8" in result.output
        assert "\n    no task found with id #9" in result.output

    def test_undecodable_input_recovers(self, cli_runner: CliRunner, tasks_file: Path) -> None:
        result = cli_runner.invoke(main, ["--file", str(tasks_file)], input=b"1\n\xff\xfe\n7\n")
        assert result.exit_code == 0, result.output
        assert "error occurred while reading input. try again..." in result.output
        assert "exiting..." in result.output

    def test_failed_import_keeps_tasks(self, cli_runner: CliRunner, tasks_file: Path) -> None:
        tasks_file.write_text("5|||buy milk|||false\n5|||buy eggs|||true\n")
        result = _run(cli_runner, tasks_file, "1\nkeep me\n6\n7\n")
        assert result.exit_code == 0
        assert f"something went wrong. todo list wasn't imported from {tasks_file}" in result.output
        after = result.output.split("wasn't imported")[-1]
        assert "task id: 1; description: keep me; is completed: false" in after

    def test_missing_file_import(self, cli_runner: CliRunner, tasks_file: Path) -> None:
        result = _run(cli_runner, tasks_file, "6\n7\n")
        assert result.exit_code == 0
        assert "wasn't imported" in result.output

    def test_end_of_input_exits_cleanly(self, cli_runner: CliRunner, tasks_file: Path) -> None:
        result = _run(cli_runner, tasks_file, "1\n")
        assert result.exit_code == 0
        assert "exiting..." in result.output


class TestEntryPoint:
    def test_file_from_environment(
        self, cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, logging_calls
    ) -> None:
        target = tmp_path / "from_env.txt"
        monkeypatch.setenv("TODO_FILE", str(target))
        result = cli_runner.invoke(main, [], input="1\nenv task\n5\n7\n")
        assert result.exit_code == 0, result.output
        assert target.read_text(encoding="utf-8") == "1|||env task|||false\n"

    def test_log_level_option(self, cli_runner: CliRunner, tasks_file: Path, logging_calls) -> None:
        result = cli_runner.invoke(main, ["--file", str(tasks_file), "--log-level", "debug"], input="7\n")
        assert result.exit_code == 0
        assert logging_calls[0]["console_level"] == 10

    def test_bad_log_level(self, cli_runner: CliRunner, tasks_file: Path, logging_calls) -> None:
        result = cli_runner.invoke(main, ["--file", str(tasks_file), "--log-level", "chatty"])
        assert result.exit_code == 2
        assert logging_calls == []


def test_handle_action_export_failure(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    todo_list = TodoList()
    todo_list.add("a")
    target = tmp_path / "no-such-dir" / "todo.txt"
    CLI(todo_list, target).handle_action(5)
    assert "wasn't exported" in capsys.readouterr().out
    assert len(todo_list) == 1


def test_export_of_unencodable_description_keeps_previous_file(
    tmp_path: Path, capsys: pytest.CaptureFixture
) -> None:
    target = tmp_path / "todo.txt"
    target.write_text("9|||previous good data|||false\n", encoding="utf-8")
    todo_list = TodoList()
    todo_list.add("ok")
    todo_list.add("bad \udcff")
    CLI(todo_list, target).handle_action(5)
    assert f"something went wrong. todo list wasn't exported to {target}" in capsys.readouterr().out
    assert target.read_text(encoding="utf-8") == "9|||previous good data|||false\n"
    assert len(todo_list) == 2


@pytest.mark.parametrize(
    ("action", "message"),
    [
        (2, "    something went wrong. task #1 wasn't deleted..."),
        (3, "      something went wrong. task #1 wasn't edited..."),
        (4, "    something went wrong. task #1 wasn't marked as completed..."),
    ],
)
def test_mutation_failure_after_valid_id(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys: pytest.CaptureFixture,
    action: int, message: str,
) -> None:
    todo_list = TodoList()
    shell = CLI(todo_list, tmp_path / "todo.txt")
    monkeypatch.setattr(shell, "_read_existing_id", lambda prompt, indent="    ": 1)
    monkeypatch.setattr("cli._read_line", lambda prompt: "new text")
    shell.handle_action(action)
    assert message in capsys.readouterr().out
