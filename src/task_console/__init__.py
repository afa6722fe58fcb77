# src/task_console/__init__.py

"""Interactive console task tracker (in-memory, single session)."""

__version__ = "0.1.0"
