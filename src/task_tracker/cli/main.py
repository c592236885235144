# src/task_tracker/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds the task store and runs the console loop
until `exit` or end of input.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_interpreter
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    console_level = getattr(logging, settings.log_level, logging.WARNING)
    if not isinstance(console_level, int):
        console_level = logging.WARNING
    log_dir = settings.data_dir if settings.log_to_file else None
    setup_logging(log_dir=log_dir, console_level=console_level)

    logger.info("Starting %s (tasks=%s)...", settings.app_name, settings.tasks_path)

    interpreter = create_interpreter(settings)
    run_console_loop(interpreter, show_help=settings.show_help_on_start)

    logger.info("Bye.")


if __name__ == "__main__":
    main()
