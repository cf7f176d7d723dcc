# tasks/task_repo.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from enum import StrEnum

from ..core.ports import TaskFile
from .task_models import Task, TaskError, TaskErrorKind, TaskStatus

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _now_local() -> datetime:
    return datetime.now().astimezone()


class IdStrategy(StrEnum):
    """
    How add() picks the id of a new task.

    count: len(tasks) + 1. Can reuse an id after a delete.
    max:   max(existing ids) + 1. Never collides with a stored id.
    """

    COUNT = "count"
    MAX = "max"


class TaskRepository:
    """
    Task operations over a TaskFile.

    Each operation reads the full list, changes it in memory and writes the
    full list back. Lookups are linear; the first task with a matching id wins.
    """

    def __init__(
        self,
        store: TaskFile,
        *,
        clock: Clock | None = None,
        id_strategy: IdStrategy | str = IdStrategy.MAX,
    ) -> None:
        self._store = store
        self._clock = clock or _now_local
        self._id_strategy = IdStrategy(id_strategy)

    @property
    def store(self) -> TaskFile:
        return self._store

    @property
    def id_strategy(self) -> IdStrategy:
        return self._id_strategy

    # ---- helpers ----

    def _next_id(self, tasks: list[Task]) -> int:
        if self._id_strategy is IdStrategy.COUNT:
            return len(tasks) + 1
        return max((t.id for t in tasks), default=0) + 1

    @staticmethod
    def _index_of(tasks: list[Task], task_id: int) -> int:
        for i, task in enumerate(tasks):
            if task.id == task_id:
                return i
        raise TaskError(TaskErrorKind.NOT_FOUND, f"task {task_id} not found")

    def _mutate(self, task_id: int, apply: Callable[[Task], None]) -> Task:
        tasks = self._store.read_all()
        task = tasks[self._index_of(tasks, task_id)]
        apply(task)
        task.updated_at = self._clock()
        self._store.write_all(tasks)
        return task

    # ---- public API ----

    def get(self, task_id: int) -> Task:
        tasks = self._store.read_all()
        return tasks[self._index_of(tasks, task_id)]

    def add(self, description: str) -> Task:
        tasks = self._store.read_all()
        now = self._clock()
        task = Task(
            id=self._next_id(tasks),
            description=description,
            status=TaskStatus.TODO,
            created_at=now,
            updated_at=now,
        )
        tasks.append(task)
        self._store.write_all(tasks)
        logger.info("Task added id=%s", task.id)
        return task

    def update_description(self, task_id: int, description: str) -> Task:
        def apply(task: Task) -> None:
            task.description = description

        task = self._mutate(task_id, apply)
        logger.info("Task description updated id=%s", task_id)
        return task

    def update_status(self, task_id: int, status: TaskStatus | str) -> Task:
        # Validate before touching the store.
        new_status = TaskStatus.parse(status)

        def apply(task: Task) -> None:
            task.status = new_status

        task = self._mutate(task_id, apply)
        logger.info("Task status updated id=%s status=%s", task_id, new_status.value)
        return task

    def delete(self, task_id: int) -> Task:
        tasks = self._store.read_all()
        removed = tasks.pop(self._index_of(tasks, task_id))
        self._store.write_all(tasks)
        logger.info("Task deleted id=%s", task_id)
        return removed

    def list_by_status(self, status: TaskStatus | str | None = None) -> list[Task]:
        """
        Return tasks in stored order.

        An empty or missing filter returns every task; otherwise only tasks
        whose status equals the filter.
        """
        tasks = self._store.read_all()
        if not status:
            return tasks
        return [t for t in tasks if t.status == status]
