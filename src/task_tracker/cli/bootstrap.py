# src/task_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- builds the JSON task file for the configured path and makes sure it exists,
- wires the repository into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_repo import TaskRepository
from ..tasks.task_store import JsonTaskFile

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Raises TaskError(IO) if the task file cannot be created; callers treat
    that as fatal. If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    store = JsonTaskFile(settings.tasks_file_path)
    store.ensure_exists()

    repo = TaskRepository(store, id_strategy=settings.id_strategy)
    logger.info(
        "Task file ready path=%s id_strategy=%s", store.path, settings.id_strategy
    )
    return AppState(settings=settings, repo=repo)
