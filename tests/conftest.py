# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from task_tracker.core.state import AppState
from task_tracker.tasks.task_repo import TaskRepository
from task_tracker.tasks.task_store import JsonTaskFile

from .fakes import FakeClock


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and AppState.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="task-tracker-test",
        log_level="WARNING",
        data_dir=tmp_path / "data",
        tasks_file_path=tmp_path / "tasks.json",
        id_strategy="max",
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> JsonTaskFile:
    s = JsonTaskFile(settings.tasks_file_path)
    s.ensure_exists()
    return s


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def repo(store: JsonTaskFile, clock: FakeClock) -> TaskRepository:
    return TaskRepository(store, clock=clock)


@pytest.fixture()
def state(settings: SimpleNamespace, repo: TaskRepository) -> AppState:
    """AppState wired with a real JSON file in tmp_path and a fake clock."""
    return AppState(settings=settings, repo=repo)
