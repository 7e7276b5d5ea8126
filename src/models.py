"""Data models for the terminal to-do list.

Only the Task dataclass lives here. Identifiers are not stored on the
task itself; the TodoList owns the id -> Task mapping.
"""
from __future__ import annotations
from dataclasses import dataclass

@dataclass
class Task:
    """A single to-do item.

    Fields:
        description: Free-form text, stored and persisted verbatim.
        completed: True once the task has been marked as completed.
    """
    description: str
    completed: bool = False
