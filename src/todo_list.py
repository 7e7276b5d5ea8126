"""To-do list logic: holds tasks by id, id assignment, task mutation, and rendering.

Ids are assigned as max(existing ids) + 1, or 1 for an empty list. Deleting
the highest id therefore frees it for the next add; interior gaps stay.
"""
import logging
import re
from typing import Dict, Iterator, List, Optional, Tuple

import click

from errors import InvalidDataError, TaskNotFoundError
from models import Task
from theme import color

logger = logging.getLogger(__name__)

EMPTY_NOTICE = "right now todo list is empty..."
MAX_TASK_ID = 2 ** 32 - 1
_ID_RE = re.compile(r"\+?[0-9]+")


def parse_task_id(raw: str) -> Optional[int]:
    """Parse an unsigned 32-bit decimal id; None if raw is not one."""
    if not _ID_RE.fullmatch(raw):
        return None
    value = int(raw)
    return value if value <= MAX_TASK_ID else None


class TodoList:
    def __init__(self) -> None:
        self.tasks: Dict[int, Task] = {}

    # -------------------- id management --------------------
    def next_id(self) -> int:
        return max(self.tasks) + 1 if self.tasks else 1

    # -------------------- queries --------------------
    def is_empty(self) -> bool:
        return not self.tasks

    def get(self, task_id: int) -> Task:
        try:
            return self.tasks[task_id]
        except KeyError:
            raise TaskNotFoundError(task_id) from None

    def iterate(self) -> List[Tuple[int, Task]]:
        """Snapshot of (id, task) pairs; order is not part of the contract."""
        return list(self.tasks.items())

    def __iter__(self) -> Iterator[Tuple[int, Task]]:
        return iter(self.iterate())

    def __contains__(self, task_id: object) -> bool:
        return task_id in self.tasks

    def __len__(self) -> int:
        return len(self.tasks)

    # -------------------- task operations --------------------
    def add(self, description: str) -> int:
        task_id = self.next_id()
        self.tasks[task_id] = Task(description=description)
        logger.debug("Added task %d", task_id)
        return task_id

    def delete(self, task_id: int) -> None:
        if task_id not in self.tasks:
            raise TaskNotFoundError(task_id)
        del self.tasks[task_id]
        logger.debug("Deleted task %d", task_id)

    def edit(self, task_id: int, new_description: str) -> None:
        self.get(task_id).description = new_description
        logger.debug("Edited task %d", task_id)

    def complete(self, task_id: int) -> None:
        self.get(task_id).completed = True
        logger.debug("Completed task %d", task_id)

    # -------------------- bulk operations (used by storage) --------------------
    def insert(self, task_id: int, task: Task) -> None:
        """Place a task at an explicit id; an id already present is rejected."""
        if task_id in self.tasks:
            raise InvalidDataError(f"duplicate task id {task_id}")
        self.tasks[task_id] = task

    def clear(self) -> None:
        self.tasks.clear()

    def replace(self, other: "TodoList") -> None:
        """Take over another list's tasks, discarding the current ones."""
        self.tasks = dict(other.tasks)
        logger.debug("Replaced contents with %d task(s)", len(self.tasks))

    # -------------------- display --------------------
    def render_lines(self) -> List[str]:
        if self.is_empty():
            return [f"  {EMPTY_NOTICE}"]
        lines: List[str] = []
        for task_id, task in self.iterate():
            flag = 'true' if task.completed else 'false'
            role = 'done' if task.completed else 'pending'
            lines.append(
                f"  task id: {color(str(task_id), 'id', bold=True)}; "
                f"description: {task.description}; "
                f"is completed: {color(flag, role)}"
            )
        return lines

    def display(self) -> None:
        click.echo("TODO LIST:")
        for line in self.render_lines():
            click.echo(line)
