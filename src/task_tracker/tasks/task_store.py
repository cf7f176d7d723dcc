# tasks/task_store.py

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from .task_models import Task, TaskError, TaskErrorKind

logger = logging.getLogger(__name__)


class JsonTaskFile:
    """
    JSON file task store.

    The whole task list lives in one file as a JSON array:
    - every read loads and decodes the full file
    - every write serializes the full list and replaces the file

    Writes go to a sibling temp file first and are moved into place with
    os.replace, so readers never see a half-written file.

    Not safe for concurrent writers (no locking).
    """

    def __init__(self, path: str | Path = "tasks.json") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def ensure_exists(self) -> None:
        """Create the file with an empty list if it is missing. Idempotent."""
        if self._path.is_file():
            return
        if self._path.exists():
            raise TaskError(TaskErrorKind.IO, f"{self._path} exists but is not a regular file")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text("[]\n", "utf-8")
        except OSError as e:
            raise TaskError(TaskErrorKind.IO, f"failed to create {self._path}: {e}") from e
        logger.info("Created empty task file %s", self._path)

    def read_all(self) -> list[Task]:
        try:
            raw = self._path.read_text("utf-8")
        except OSError as e:
            raise TaskError(TaskErrorKind.IO, f"failed to read {self._path}: {e}") from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise TaskError(TaskErrorKind.PARSE, f"{self._path} is not valid JSON: {e}") from e

        if not isinstance(data, list):
            raise TaskError(TaskErrorKind.PARSE, f"{self._path} must contain a JSON array")

        tasks = [Task.from_dict(item) for item in data]
        logger.debug("Read %d tasks from %s", len(tasks), self._path)
        return tasks

    def write_all(self, tasks: Iterable[Task]) -> None:
        records = [t.to_dict() for t in tasks]
        payload = json.dumps(records, ensure_ascii=False, indent=2) + "\n"

        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            tmp.write_text(payload, "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            tmp.unlink(missing_ok=True)
            raise TaskError(TaskErrorKind.IO, f"failed to write {self._path}: {e}") from e
        logger.debug("Wrote %d tasks to %s", len(records), self._path)
