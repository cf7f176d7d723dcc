# tests/test_main.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from task_tracker.cli import main as main_mod
from task_tracker.cli.bootstrap import create_initial_state
from task_tracker.logging_setup import setup_logging
from task_tracker.tasks.task_models import TaskError, TaskErrorKind
from task_tracker.tasks.task_repo import IdStrategy


def test_create_initial_state_creates_task_file(settings) -> None:
    state = create_initial_state(settings=settings)

    assert settings.tasks_file_path.read_text("utf-8").strip() == "[]"
    assert state.settings is settings
    assert state.repo.list_by_status() == []


def test_create_initial_state_uses_configured_id_strategy(settings) -> None:
    settings.id_strategy = "count"
    state = create_initial_state(settings=settings)
    assert state.repo.id_strategy is IdStrategy.COUNT


def test_create_initial_state_fails_with_io_error(settings, tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", "utf-8")
    settings.tasks_file_path = blocker / "tasks.json"

    with pytest.raises(TaskError) as exc:
        create_initial_state(settings=settings)
    assert exc.value.kind is TaskErrorKind.IO


@pytest.fixture()
def quiet_main(monkeypatch, settings):
    """Patch main's collaborators so it does not touch real logging or stdin."""
    loops: list[object] = []
    monkeypatch.setattr(main_mod, "get_settings", lambda: settings)
    monkeypatch.setattr(main_mod, "setup_logging", lambda **kwargs: None)
    monkeypatch.setattr(main_mod, "run_console_loop", lambda state: loops.append(state))
    return loops


def test_main_runs_console_loop(quiet_main, settings, capsys) -> None:
    assert main_mod.main() == 0

    assert len(quiet_main) == 1
    assert settings.tasks_file_path.exists()
    assert capsys.readouterr().out.startswith("Task Tracker CLI")


def test_main_aborts_when_task_file_cannot_be_created(
    quiet_main, settings, tmp_path: Path, capsys
) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", "utf-8")
    settings.tasks_file_path = blocker / "tasks.json"

    assert main_mod.main() == 1

    assert quiet_main == []
    assert "Error initializing file: " in capsys.readouterr().out


@pytest.fixture()
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


def test_setup_logging_writes_file_and_filters_console(
    restore_root_logging, tmp_path: Path
) -> None:
    log_file = setup_logging(log_dir=tmp_path / "logs", console_level=logging.WARNING)

    logging.getLogger("task_tracker.test").debug("debug line")
    logging.getLogger("somelib").warning("third party warning")
    for h in logging.getLogger().handlers:
        h.flush()

    content = log_file.read_text("utf-8")
    assert "debug line" in content
    assert "third party warning" in content

    console = next(
        h for h in logging.getLogger().handlers if not isinstance(h, logging.FileHandler)
    )
    third_party = logging.LogRecord("somelib", logging.WARNING, __file__, 1, "x", None, None)
    own = logging.LogRecord("task_tracker.x", logging.WARNING, __file__, 1, "x", None, None)
    assert not console.filter(third_party)
    assert console.filter(own)


def test_main_falls_back_to_console_logging_when_log_dir_is_unusable(
    restore_root_logging, monkeypatch, settings, tmp_path: Path, capsys
) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", "utf-8")
    settings.data_dir = blocker / "logs"
    loops: list[object] = []
    monkeypatch.setattr(main_mod, "get_settings", lambda: settings)
    monkeypatch.setattr(main_mod, "run_console_loop", lambda state: loops.append(state))

    assert main_mod.main() == 0

    assert len(loops) == 1
    assert capsys.readouterr().out.startswith("Task Tracker CLI")
    handlers = logging.getLogger().handlers
    assert handlers
    assert not any(isinstance(h, logging.FileHandler) for h in handlers)


def test_setup_logging_without_log_dir_is_console_only(restore_root_logging) -> None:
    assert setup_logging(log_dir=None) is None

    (handler,) = logging.getLogger().handlers
    assert not isinstance(handler, logging.FileHandler)
