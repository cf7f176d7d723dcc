# src/task_tracker/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import COMMAND_PROMPT
from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

EXIT_MESSAGE = "Exiting Task Tracker CLI. Thank you!"


def run_console_loop(
    state: AppState,
    *,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """
    Blocking REPL: read a command, run it, print the result, repeat.

    Returns on `exit`, EOF or Ctrl+C. Command failures are printed and the
    loop continues.
    """
    logger.info("Console connector started.")

    while True:
        write("\n" + COMMAND_PROMPT)
        try:
            command = read_line("").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if not command:
            continue

        if command.lower() == "exit":
            logger.info("Console exit command received.")
            write(EXIT_MESSAGE)
            break

        try:
            reply = command_registry.handle(state, command, prompt=read_line, emit=write)
        except (EOFError, KeyboardInterrupt):
            logger.info("Input closed during %r, exiting.", command)
            write("")
            break
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        write(reply)

    logger.info("Console connector finished.")
