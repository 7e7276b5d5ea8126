"""Settings loaded from environment variables (+ optional .env).

All variables share the TODO_ prefix. Values from a real environment
variable win over the .env file.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

ENV_PREFIX = "TODO"
DEFAULT_FILE = "todo_list.txt"
DEFAULT_LOG_LEVEL = "WARNING"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env_path(name: str, default: Optional[Path]) -> Optional[Path]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def parse_log_level(value: str) -> int:
    """Map a level name ('info') or number ('20') to a logging level."""
    raw = value.strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    if not isinstance(level, int):
        raise ValueError(f"unknown log level: {value!r}")
    return level


@dataclass(frozen=True)
class Settings:
    tasks_file: Path
    log_level: int
    log_file: Optional[Path] = None

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "Settings":
        if load_env_file:
            load_dotenv(override=False)
        raw_level = os.getenv(_k("LOG_LEVEL")) or DEFAULT_LOG_LEVEL
        return cls(
            tasks_file=_env_path(_k("FILE"), Path(DEFAULT_FILE)),
            log_level=parse_log_level(raw_level),
            log_file=_env_path(_k("LOG_FILE"), None),
        )
