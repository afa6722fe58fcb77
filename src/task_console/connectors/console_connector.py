# src/task_console/connectors/console_connector.py

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from ..cli.commands import MenuRegistry
from ..cli.commands import registry as default_registry
from ..core.ports import LineReader, LineWriter
from ..core.state import AppState
from ..tasks.errors import TaskError

logger = logging.getLogger(__name__)

CHOICE_PROMPT_TEMPLATE = "Enter your choice ({first}-{last}): "
NO_INPUT_TEXT = "❌ No input received. Please try again."
GOODBYE_TEXT = "👋 Exiting Task Manager. Goodbye!"
PROCESSING_TEXT = "Processing..."


def _failure_text(message: str) -> str:
    return f"🚨 Operation Failed: {message}"


def run_console_loop(
    state: AppState,
    *,
    read_line: LineReader | None = None,
    write: LineWriter | None = None,
    sleep: Callable[[float], None] | None = None,
    menu: MenuRegistry | None = None,
) -> None:
    """
    Interactive menu loop: show menu, read a choice, run it, report, repeat.

    Stays in the loop until the exit action is chosen or the input stream ends.
    Task errors are reported and never end the loop.
    """
    read_line = read_line or input
    write = write or print
    sleep = sleep or time.sleep
    menu = menu or default_registry

    keys = menu.keys
    choice_prompt = CHOICE_PROMPT_TEMPLATE.format(
        first=keys[0] if keys else "", last=keys[-1] if keys else ""
    )
    delay = float(getattr(state.settings, "pacing_delay_seconds", 0.0) or 0.0)

    def prompt(text: str) -> str:
        return read_line(text) or ""

    logger.info("Console loop started (pacing_delay=%.2fs).", delay)

    while True:
        write("\n" + menu.render_menu())

        try:
            choice = read_line(choice_prompt)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write()
            break

        if not choice:
            write(NO_INPUT_TEXT)
            continue

        try:
            reply = menu.dispatch(state, choice.strip(), prompt, write)
        except TaskError as e:
            logger.info("Operation failed: %s", e)
            write("\n" + _failure_text(str(e)))
            continue
        except (EOFError, KeyboardInterrupt):
            logger.info("Console input closed during an action, exiting.")
            write()
            break
        except Exception:
            logger.exception("Menu handler crashed.")
            write("\n" + _failure_text("Internal error."))
            continue

        if reply is None:
            write("\n" + GOODBYE_TEXT)
            break

        write("\n" + reply)

        write("\n" + PROCESSING_TEXT)
        if delay > 0:
            sleep(delay)

    logger.info("Console loop finished.")
