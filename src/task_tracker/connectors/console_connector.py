# src/task_tracker/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import FAREWELL, CommandInterpreter

logger = logging.getLogger(__name__)

PROMPT = "> "

ReadLine = Callable[[str], str]
Write = Callable[[str], None]


def run_console_loop(
    interpreter: CommandInterpreter,
    *,
    read_line: ReadLine | None = None,
    write: Write = print,
    show_help: bool = True,
) -> None:
    """
    Read one command per line until `exit`, EOF or Ctrl+C.

    `read_line` defaults to input(); tests pass their own reader and writer.
    """
    if read_line is None:
        read_line = input

    logger.info("Console session started (store=%s).", interpreter.store.path)
    if show_help:
        write(interpreter.help_text())

    while True:
        try:
            line = read_line(PROMPT)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        try:
            result = interpreter.handle_line(line)
        except Exception:
            logger.exception("Command handler crashed.")
            write("Internal error while handling a command.")
            continue

        if result.output is not None:
            write(result.output)
        if result.exit:
            logger.info("Console exit command received.")
            break

    write(FAREWELL)
    logger.info("Console session finished.")
