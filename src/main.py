"""Main entry point for the terminal to-do list."""
import logging
from pathlib import Path
from typing import Optional

import click

from cli import CLI
from config import Settings, parse_log_level
from logging_setup import setup_logging
from todo_list import TodoList

logger = logging.getLogger(__name__)


def _validate_level(ctx: click.Context, param: click.Parameter, value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    try:
        return parse_log_level(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc


@click.command()
@click.option("--file", "-f", "tasks_file", type=click.Path(dir_okay=False, path_type=Path),
              default=None, help="File used by export/import (default: $TODO_FILE or todo_list.txt)")
@click.option("--log-level", default=None, callback=_validate_level,
              help="Console log level (default: $TODO_LOG_LEVEL or WARNING)")
def main(tasks_file: Optional[Path], log_level: Optional[int]) -> None:
    """Interactive to-do list: add, edit, delete and complete tasks, export/import them."""
    settings = Settings.from_env()
    setup_logging(
        console_level=log_level if log_level is not None else settings.log_level,
        log_file=settings.log_file,
    )
    path = tasks_file or settings.tasks_file
    logger.debug("Using tasks file %s", path)
    CLI(TodoList(), path).run()


if __name__ == "__main__":
    main()
