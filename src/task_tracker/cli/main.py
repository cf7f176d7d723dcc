# src/task_tracker/cli/main.py

"""
CLI entrypoint.

Initializes logging, makes sure the task file exists, then runs the console
REPL in the main thread until `exit`.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging
from ..tasks.task_models import TaskError

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    console_level = getattr(logging, settings.log_level, logging.WARNING)
    try:
        setup_logging(log_dir=settings.data_dir, console_level=console_level)
    except OSError as e:
        setup_logging(log_dir=None, console_level=console_level)
        logger.warning("File logging disabled, cannot use %s: %s", settings.data_dir, e)

    logger.info("Starting %s...", settings.app_name)
    print("Task Tracker CLI")

    try:
        state = create_initial_state(settings=settings)
    except TaskError as e:
        logger.error("Startup failed kind=%s: %s", e.kind.value, e.message)
        print(f"Error initializing file: {e.message}")
        return 1

    run_console_loop(state)
    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
