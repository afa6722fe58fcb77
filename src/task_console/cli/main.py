# src/task_console/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console menu loop
in the main thread until the user exits.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    if not isinstance(console_level, int):
        console_level = logging.WARNING

    setup_logging(console_level=console_level, log_file=settings.log_file)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)

    try:
        run_console_loop(state)
    finally:
        # Tasks live in memory only; nothing to flush.
        logger.info("Bye. %d task(s) discarded.", state.task_store.count_tasks())


if __name__ == "__main__":
    main()
