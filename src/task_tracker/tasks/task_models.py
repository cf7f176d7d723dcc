# tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any


class TaskStatus(StrEnum):
    """Task lifecycle status (stored verbatim in the JSON file)."""

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"

    @classmethod
    def parse(cls, raw: str | None) -> TaskStatus:
        """Strict lookup; unknown values raise TaskError(INVALID_STATUS)."""
        try:
            return cls(raw)
        except ValueError:
            raise TaskError(TaskErrorKind.INVALID_STATUS, f"invalid status: {raw!r}") from None


class TaskErrorKind(StrEnum):
    IO = "io"
    PARSE = "parse"
    NOT_FOUND = "not_found"
    INVALID_STATUS = "invalid_status"
    INVALID_INPUT = "invalid_input"


class TaskError(Exception):
    """
    Single error type for the task subsystem.

    Callers branch on `kind`; the message is only for humans.
    """

    def __init__(self, kind: TaskErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f"TaskError({self.kind.value}, {self.message!r})"


# Nanosecond fractions (RFC 3339 writers) are cut to microseconds.
_EXTRA_FRACTION_RE = re.compile(r"(\.\d{6})\d+")


def _parse_ts(raw: Any, field_name: str) -> datetime:
    if not isinstance(raw, str):
        raise TaskError(TaskErrorKind.PARSE, f"{field_name} must be an ISO-8601 string")
    try:
        return datetime.fromisoformat(_EXTRA_FRACTION_RE.sub(r"\1", raw))
    except ValueError:
        raise TaskError(TaskErrorKind.PARSE, f"bad {field_name} timestamp: {raw!r}") from None


@dataclass(slots=True)
class Task:
    id: int
    description: str
    status: TaskStatus
    created_at: datetime
    updated_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "description": self.description,
            "status": self.status.value,
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, raw: Any) -> Task:
        if not isinstance(raw, dict):
            raise TaskError(TaskErrorKind.PARSE, "task record must be a JSON object")

        task_id = raw.get("id")
        # bool is an int subclass; reject it explicitly.
        if not isinstance(task_id, int) or isinstance(task_id, bool):
            raise TaskError(TaskErrorKind.PARSE, f"task id must be an integer, got {task_id!r}")

        description = raw.get("description")
        if not isinstance(description, str):
            raise TaskError(TaskErrorKind.PARSE, f"task {task_id}: description must be a string")

        try:
            status = TaskStatus(raw.get("status"))
        except ValueError:
            raise TaskError(
                TaskErrorKind.PARSE, f"task {task_id}: unknown status {raw.get('status')!r}"
            ) from None

        return cls(
            id=task_id,
            description=description,
            status=status,
            created_at=_parse_ts(raw.get("createdAt"), "createdAt"),
            updated_at=_parse_ts(raw.get("updatedAt"), "updatedAt"),
        )
