# src/task_tracker/cli/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from ..core.state import AppState
from ..tasks.task_models import Task, TaskError, TaskErrorKind, TaskStatus

Prompt = Callable[[str], str]
CommandEmitter = Callable[[str], None]
CommandHandler = Callable[[AppState, Prompt, CommandEmitter], str]

logger = logging.getLogger(__name__)

COMMAND_PROMPT = "Enter a command (add, update, delete, list, exit):"
UNKNOWN_COMMAND = "Unknown command, please try again."
INVALID_TASK_ID = "Invalid task ID."
INVALID_OPTION = "Invalid option"

_INT_RE = re.compile(r"[+-]?[0-9]+")

# list menu choice -> status filter ("" means all)
LIST_FILTERS: dict[str, str] = {
    "1": TaskStatus.DONE.value,
    "2": TaskStatus.IN_PROGRESS.value,
    "3": TaskStatus.TODO.value,
    "4": "",
    "": "",
}


class CommandRegistry:
    """Word-command registry used by the console loop (add, list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def names(self) -> list[str]:
        return list(self._help)

    def handle(
        self,
        state: AppState,
        line: str,
        prompt: Prompt,
        emit: CommandEmitter,
    ) -> str:
        """
        Dispatch a command line like "add".
        Returns the text to print; unknown commands get a hint, never an error.
        """
        name = line.strip().lower()
        handler = self._handlers.get(name)
        if not handler:
            logger.debug("Unknown command %r", name)
            return UNKNOWN_COMMAND

        logger.debug("Dispatching command %r", name)
        return handler(state, prompt, emit)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name} - {help_text}")
        lines.append("  exit - Quit the tracker.")
        return "\n".join(lines)


registry = CommandRegistry()


def parse_task_id(raw: str) -> int:
    text = raw.strip()
    if not _INT_RE.fullmatch(text):
        raise TaskError(TaskErrorKind.INVALID_INPUT, f"not an integer task id: {raw!r}")
    return int(text)


def format_task(task: Task) -> str:
    return f"ID: {task.id}, Description: {task.description}, Status: {task.status.value}"


def cmd_help(state: AppState, prompt: Prompt, emit: CommandEmitter) -> str:
    return registry.build_help()


def cmd_add(state: AppState, prompt: Prompt, emit: CommandEmitter) -> str:
    description = prompt("Enter task description: ").strip()
    try:
        task = state.repo.add(description)
    except TaskError as e:
        logger.info("add failed kind=%s: %s", e.kind.value, e.message)
        return f"Error adding task: {e.message}"
    return f"Task added successfully! (ID: {task.id})"


def cmd_update(state: AppState, prompt: Prompt, emit: CommandEmitter) -> str:
    """
    update -> task id -> 1 (description) | 2 (status) -> new value
    """
    try:
        task_id = parse_task_id(prompt("Enter task ID to update: "))
    except TaskError:
        return INVALID_TASK_ID

    emit("1. Update Description")
    emit("2. Update Status")
    option = prompt("Choose option: ").strip()

    if option == "1":
        description = prompt("Enter new task description: ").strip()
        try:
            state.repo.update_description(task_id, description)
        except TaskError as e:
            logger.info("update_description failed kind=%s: %s", e.kind.value, e.message)
            return f"Error updating description: {e.message}"
        return "Task description updated successfully!"

    if option == "2":
        status = prompt("Enter new status (todo, in-progress, done): ").strip()
        try:
            state.repo.update_status(task_id, status)
        except TaskError as e:
            logger.info("update_status failed kind=%s: %s", e.kind.value, e.message)
            return f"Error updating status: {e.message}"
        return "Task status updated successfully!"

    return INVALID_OPTION


def cmd_delete(state: AppState, prompt: Prompt, emit: CommandEmitter) -> str:
    try:
        task_id = parse_task_id(prompt("Enter task ID to delete: "))
    except TaskError:
        return INVALID_TASK_ID

    try:
        state.repo.delete(task_id)
    except TaskError as e:
        logger.info("delete failed kind=%s: %s", e.kind.value, e.message)
        return f"Error deleting task: {e.message}"
    return "Task deleted successfully!"


def cmd_list(state: AppState, prompt: Prompt, emit: CommandEmitter) -> str:
    emit("Choose listing option:")
    emit("1. Done")
    emit("2. In-progress")
    emit("3. Todo")
    emit("4. All (default)")
    option = prompt("Select option (1-4): ").strip()

    status = LIST_FILTERS.get(option)
    if status is None:
        # Unrecognized choice still lists everything.
        emit(INVALID_OPTION)
        status = ""

    try:
        tasks = state.repo.list_by_status(status)
    except TaskError as e:
        logger.info("list failed kind=%s: %s", e.kind.value, e.message)
        return f"Error listing tasks: {e.message}"

    lines = ["Tasks:"]
    lines.extend(format_task(t) for t in tasks)
    if not tasks:
        lines.append("No tasks found.")
    return "\n".join(lines)


registry.register("add", cmd_add, help_text="Add a new task (prompts for description).")
registry.register(
    "update", cmd_update, help_text="Update a task's description or status by id."
)
registry.register("delete", cmd_delete, help_text="Delete a task by id.")
registry.register("list", cmd_list, help_text="List tasks, optionally filtered by status.")
registry.register("help", cmd_help, help_text="Show available commands.", aliases=["?"])
