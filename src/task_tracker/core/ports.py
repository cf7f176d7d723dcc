# src/task_tracker/core/ports.py

"""
Ports (interfaces) used by the core.

The repository and the CLI depend on Protocols instead of concrete classes,
so storage can be swapped (tests use a real file in tmp_path, but nothing
requires it).
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol


class TaskFile(Protocol):
    """Whole-list persistence: read everything, write everything."""

    def ensure_exists(self) -> None: ...
    def read_all(self) -> list[Any]: ...
    def write_all(self, tasks: Iterable[Any]) -> None: ...


class TaskRepo(Protocol):
    def get(self, task_id: int) -> Any: ...
    def add(self, description: str) -> Any: ...
    def update_description(self, task_id: int, description: str) -> Any: ...
    def update_status(self, task_id: int, status: Any) -> Any: ...
    def delete(self, task_id: int) -> Any: ...
    def list_by_status(self, status: Any = None) -> list[Any]: ...
