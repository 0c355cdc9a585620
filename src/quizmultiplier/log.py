# src/quizmultiplier/log.py
"""Logging setup for applications using quizmultiplier.

Library modules only create module-level loggers; nothing is configured on
import. Call ``setup_logging`` from the application (the CLI does) to
attach a handler to the root logger.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str | int = logging.WARNING, rich: bool = False) -> logging.Handler:
    """Configure the root logger.

    Args:
        level: Log level name or number.
        rich: Use ``rich.logging.RichHandler`` instead of a plain stream handler.

    Returns:
        The handler that was installed.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    handler: logging.Handler
    if rich:
        from rich.console import Console
        from rich.logging import RichHandler

        # stderr keeps stdout clean for piped JSON output
        handler = RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.setLevel(level)

    root_logger = logging.getLogger()
    # Replace a handler installed by a previous call so repeated setup does not duplicate output
    for existing in list(root_logger.handlers):
        if getattr(existing, "_quizmult_handler", False):
            root_logger.removeHandler(existing)
    handler._quizmult_handler = True  # type: ignore[attr-defined]
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
    return handler
