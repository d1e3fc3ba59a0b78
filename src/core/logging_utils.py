"""Logging helpers.

Routes stdlib `logging` through a rich `RichHandler` on stderr, so log
records never mix with the text a command prints on stdout.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_MARKER = "_shell_idioms_handler"


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Install the rich handler on the root logger.

    Calling it again swaps the previously installed handler instead of
    stacking a new one, so repeated CLI invocations (tests) stay quiet.
    """

    numeric_level = logging.getLevelName(level.strip().upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            root_logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_level=True,
        show_path=False,
        rich_tracebacks=True,
    )
    setattr(handler, _HANDLER_MARKER, True)
    root_logger.addHandler(handler)
    root_logger.setLevel(numeric_level)

    root_logger.debug("Logging initialized at level %s", level)
    return root_logger


def get_logger(name: str | None = None) -> logging.Logger:
    return logging.getLogger(name)
