"""Persistence helpers (export/import) for the to-do list.

File format: one record per line, UTF-8, newline-terminated:

    <id>|||<description>|||<true|false>

Descriptions are written verbatim. A description containing the delimiter
is saved as is but cannot be loaded back (the record splits into more than
three fields); save_tasks logs a warning when that happens.
"""
import logging
from pathlib import Path
from typing import Tuple, Union

from errors import InvalidDataError
from models import Task
from todo_list import TodoList, parse_task_id

logger = logging.getLogger(__name__)

DELIMITER = '|||'
_BOOL_TOKENS = {'true': True, 'false': False}

PathLike = Union[str, Path]


class Storage:
    @staticmethod
    def format_record(task_id: int, task: Task) -> str:
        """Render one task as a record line (without the trailing newline)."""
        flag = 'true' if task.completed else 'false'
        return f"{task_id}{DELIMITER}{task.description}{DELIMITER}{flag}"

    @staticmethod
    def parse_record(line: str) -> Tuple[int, Task]:
        """Parse a single record (line terminator already removed).

        Raises InvalidDataError on a wrong field count, a bad id or a bad
        completion token.
        """
        parts = line.split(DELIMITER)
        if len(parts) != 3:
            raise InvalidDataError(f"expected 3 fields, found {len(parts)}", line=line)
        raw_id, description, raw_flag = parts
        task_id = parse_task_id(raw_id)
        if task_id is None:
            raise InvalidDataError(f"invalid task id {raw_id!r}", line=line)
        if raw_flag not in _BOOL_TOKENS:
            raise InvalidDataError(f"invalid completion flag {raw_flag!r}", line=line)
        return task_id, Task(description=description, completed=_BOOL_TOKENS[raw_flag])

    @staticmethod
    def save_tasks(todo_list: TodoList, path: PathLike) -> None:
        """Write every task to path, replacing any previous contents.

        All records are encoded before the file is opened, so a task that
        cannot be written raises InvalidDataError and leaves path untouched.
        """
        path = Path(path)
        records = []
        for task_id, task in todo_list.iterate():
            if DELIMITER in task.description:
                logger.warning("Task %d description contains %r; it will not load back", task_id, DELIMITER)
            try:
                records.append((Storage.format_record(task_id, task) + '\n').encode('utf-8'))
            except UnicodeEncodeError as exc:
                raise InvalidDataError(f"task {task_id} description cannot be encoded as UTF-8") from exc
        with open(path, 'wb') as f:
            f.writelines(records)
        logger.info("Saved %d task(s) to %s", len(records), path)

    @staticmethod
    def load_tasks(path: PathLike) -> TodoList:
        """Read path into a fresh TodoList.

        Any malformed or duplicate record aborts the whole import with
        InvalidDataError. Open/read failures propagate as OSError.
        """
        path = Path(path)
        todo_list = TodoList()
        with open(path, 'r', encoding='utf-8', newline='\n') as f:
            try:
                for line_number, raw in enumerate(f, start=1):
                    line = _strip_terminator(raw)
                    try:
                        task_id, task = Storage.parse_record(line)
                        todo_list.insert(task_id, task)
                    except InvalidDataError as exc:
                        logger.warning("Rejected record in %s line %d: %s", path, line_number, exc.reason)
                        raise InvalidDataError(exc.reason, line_number=line_number, line=line) from exc
            except UnicodeDecodeError as exc:
                raise InvalidDataError("file is not valid UTF-8") from exc
        logger.info("Loaded %d task(s) from %s", len(todo_list), path)
        return todo_list

    @staticmethod
    def load_into(todo_list: TodoList, path: PathLike) -> None:
        """Import path into an existing list, replacing it only on full success."""
        staged = Storage.load_tasks(path)
        todo_list.replace(staged)


def _strip_terminator(raw: str) -> str:
    """Drop a trailing '\\n' and then a single '\\r' before it, if present."""
    if raw.endswith('\n'):
        raw = raw[:-1]
        if raw.endswith('\r'):
            raw = raw[:-1]
    return raw
