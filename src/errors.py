"""Error types raised by the registry and the file codec."""
from __future__ import annotations
from typing import Optional


class TaskNotFoundError(KeyError):
    """No task is stored under the requested id."""

    def __init__(self, task_id: int):
        super().__init__(task_id)
        self.task_id = task_id

    def __str__(self) -> str:
        return f"no task found with id #{self.task_id}"


class InvalidDataError(ValueError):
    """A persisted record could not be turned back into a task."""

    def __init__(self, reason: str, line_number: Optional[int] = None, line: Optional[str] = None):
        super().__init__(reason)
        self.reason = reason
        self.line_number = line_number
        self.line = line

    def __str__(self) -> str:
        if self.line_number is None:
            return self.reason
        return f"line {self.line_number}: {self.reason}"
