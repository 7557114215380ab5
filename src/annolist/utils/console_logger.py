from __future__ import annotations

import logging
import sys

from annolist.config import CONSOLE_HANDLER_NAME

_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


class _StderrHandler(logging.StreamHandler):
    """Writes to whatever ``sys.stderr`` is when the record is emitted."""

    def __init__(self) -> None:
        super().__init__(sys.stderr)

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value) -> None:
        pass


def ensure_console_logger(
    logger: logging.Logger | None = None,
    handler_name: str = CONSOLE_HANDLER_NAME,
    *,
    level: int = logging.INFO,
) -> logging.Logger:
    """Attach a stderr handler named *handler_name* to *logger* once.

    Defaults to the ``annolist`` package logger so every module logger
    propagates into it.  Calling again only changes the level.  Log lines go
    to stderr so they never mix with command output on stdout.
    """
    logger = logger or logging.getLogger("annolist")
    for handler in logger.handlers:
        if getattr(handler, "name", None) == handler_name:
            handler.setLevel(level)
            logger.setLevel(level)
            return logger
    handler = _StderrHandler()
    handler.setLevel(level)
    handler.name = handler_name
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
