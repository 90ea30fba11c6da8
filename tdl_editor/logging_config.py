"""Logging setup for the TDL editor.

All loggers live under the ``tdl_editor`` namespace so a single call to
:func:`setup_logging` configures the whole package.
"""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "tdl_editor"
FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger inside the package namespace.

    Args:
        name: Module name, usually ``__name__``.

    Returns:
        Logger whose name starts with ``tdl_editor``.
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logging(level: str | int = "WARNING", log_file: str | Path | None = None) -> None:
    """Configure package logging.

    Installs a rich console handler on stderr and, optionally, a plain file
    handler. Calling it again replaces the previous handlers.

    Args:
        level: Log level name or number.
        log_file: Optional path of a log file.
    """
    if isinstance(level, str):
        numeric_level = logging.getLevelName(level.upper())
        if not isinstance(numeric_level, int):
            raise ValueError(f"Unknown log level: {level}")
    elif isinstance(level, int) and not isinstance(level, bool):
        numeric_level = level
    else:
        raise ValueError(f"Unknown log level: {level!r}")

    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    console_handler.setLevel(numeric_level)
    root.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        file_handler.setLevel(numeric_level)
        root.addHandler(file_handler)

    root.setLevel(numeric_level)
    root.propagate = False
    root.debug("Logging configured (level=%s, file=%s)", level, log_file)
