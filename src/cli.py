"""Command-line interface loop for the to-do list.

A numbered menu: the list is printed, the user picks an action by number,
the action prompts for whatever it needs and reports the outcome. The CLI
owns no tasks of its own; it works on the TodoList it is given.
"""
import logging
from pathlib import Path
from typing import Callable, Dict, Optional

import click

from errors import InvalidDataError, TaskNotFoundError
from storage import Storage
from todo_list import TodoList, parse_task_id

logger = logging.getLogger(__name__)

NO_TASKS = "there's no tasks in todo list..."

MENU = (
    "\nACTIONS:\n"
    "  1. add new task\n"
    "  2. delete task\n"
    "  3. edit task\n"
    "  4. mark task as completed\n"
    "  5. export todo list to file\n"
    "  6. import todo list from file\n"
    "  7. exit"
)


def _read_line(prompt: str) -> Optional[str]:
    """Prompt for one line; an empty answer is allowed.

    Returns None when the line cannot be decoded. Raises click.Abort on EOF.
    """
    try:
        value = click.prompt(prompt, default="", show_default=False, prompt_suffix=": ")
    except UnicodeDecodeError as exc:
        logger.warning("Unreadable input: %s", exc)
        return None
    return value.strip()


class CLI:
    EXIT = 7

    def __init__(self, todo_list: TodoList, tasks_file: Path):
        self.todo_list: TodoList = todo_list
        self.tasks_file: Path = Path(tasks_file)
        self._actions: Dict[int, Callable[[], None]] = {
            1: self._add,
            2: self._delete,
            3: self._edit,
            4: self._complete,
            5: self._export,
            6: self._import,
        }

    def run(self) -> None:
        """Main REPL loop; the list and menu are printed before every choice."""
        try:
            while True:
                self.todo_list.display()
                click.echo(MENU)
                raw = _read_line("\nselect action by entering the corresponding number")
                if raw is None:
                    click.echo("  error occurred while reading input. try again...")
                    continue
                action = parse_task_id(raw)
                if action is None:
                    click.echo("  invalid action choice. a number must be entered...\n\n")
                    continue
                if action == self.EXIT:
                    break
                self.handle_action(action)
        except (click.Abort, KeyboardInterrupt, EOFError):
            click.echo("")
        click.echo("  exiting...")

    # -------------------- command dispatch --------------------
    def handle_action(self, action: int) -> None:
        handler = self._actions.get(action)
        if handler is None:
            click.echo("  invalid action choice. please select a valid option...\n\n")
            return
        handler()

    # -------------------- user-interactive flows --------------------
    def _add(self) -> None:
        description = _read_line("  enter task description")
        if description is None:
            click.echo("    error occurred while reading task description...\n\n")
            return
        task_id = self.todo_list.add(description)
        logger.info("Task %d added", task_id)
        click.echo("    task was added successfully\n\n")

    def _read_existing_id(self, prompt: str, indent: str = "    ") -> Optional[int]:
        """Ask for an id; print the reason and return None unless it names a task."""
        if self.todo_list.is_empty():
            click.echo(f"  {NO_TASKS}\n\n")
            return None
        raw = _read_line(f"  {prompt}")
        if raw is None:
            click.echo("    error occurred while reading id of the task...\n\n")
            return None
        task_id = parse_task_id(raw)
        if task_id is None:
            click.echo("    invalid id of the task. a number must be entered...\n\n")
            return None
        if task_id not in self.todo_list:
            click.echo(f"{indent}no task found with id #{task_id}\n\n")
            return None
        return task_id

    def _delete(self) -> None:
        task_id = self._read_existing_id("enter id of the task you want to delete")
        if task_id is None:
            return
        try:
            self.todo_list.delete(task_id)
        except TaskNotFoundError:
            click.echo(f"    something went wrong. task #{task_id} wasn't deleted...\n\n")
            return
        click.echo(f"    task #{task_id} was deleted successfully\n\n")

    def _edit(self) -> None:
        task_id = self._read_existing_id("enter id of the task you want to edit", indent="      ")
        if task_id is None:
            return
        new_description = _read_line("    enter new task description")
        if new_description is None:
            click.echo("      error occurred while reading new task description...\n\n")
            return
        try:
            self.todo_list.edit(task_id, new_description)
        except TaskNotFoundError:
            click.echo(f"      something went wrong. task #{task_id} wasn't edited...\n\n")
            return
        click.echo(f"      task #{task_id} was edited successfully\n\n")

    def _complete(self) -> None:
        task_id = self._read_existing_id("enter id of the task you want to mark as completed")
        if task_id is None:
            return
        try:
            self.todo_list.complete(task_id)
        except TaskNotFoundError:
            click.echo(f"    something went wrong. task #{task_id} wasn't marked as completed...\n\n")
            return
        click.echo(f"    task #{task_id} was marked as completed successfully\n\n")

    def _export(self) -> None:
        if self.todo_list.is_empty():
            click.echo(f"  {NO_TASKS}\n\n")
            return
        try:
            Storage.save_tasks(self.todo_list, self.tasks_file)
        except (OSError, InvalidDataError, UnicodeError) as exc:
            logger.error("Export to %s failed: %s", self.tasks_file, exc)
            click.echo(f"  something went wrong. todo list wasn't exported to {self.tasks_file}\n\n")
            return
        click.echo(f"  todo list was successfully exported to {self.tasks_file}\n\n")

    def _import(self) -> None:
        try:
            Storage.load_into(self.todo_list, self.tasks_file)
        except (OSError, InvalidDataError) as exc:
            logger.error("Import from %s failed: %s", self.tasks_file, exc)
            click.echo(f"  something went wrong. todo list wasn't imported from {self.tasks_file}\n\n")
            return
        click.echo(f"  todo list was successfully imported from {self.tasks_file}\n\n")
