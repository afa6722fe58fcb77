# src/task_console/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the interactive menu readable:
    - our own logs pass at the handler level
    - Python warnings (captured as 'py.warnings') only at ERROR+
    - any other 3rd party only at ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name

        if name == "task_console" or name.startswith("task_console."):
            return True

        return record.levelno >= logging.ERROR


LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"


def _handler(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT))
    return handler


def setup_logging(
    *,
    console_level: int = logging.WARNING,
    log_file: str | Path | None = None,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Configure logging with:
    - Console handler on stderr, filtered for interactive use
    - File handler (only when log_file is given) with full debug output

    Call this ONCE, very early (before first logger.info).
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    console = _handler(logging.StreamHandler(sys.stderr), console_level)
    console.addFilter(_ConsoleNoiseFilter())
    root.addHandler(console)

    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        root.addHandler(_handler(logging.FileHandler(path, encoding="utf-8"), file_level))

    logging.captureWarnings(True)
