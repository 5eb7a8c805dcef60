"""Logging setup shared by the dokugen CLI and service."""

from __future__ import annotations

import logging
from typing import TextIO

_LOGGER_NAME = "dokugen"
_CONSOLE_FORMAT = "[dokugen:%(component)s] %(levelname)s %(message)s"


class _ComponentFilter(logging.Filter):
    """Tag each record with the engine component that emitted it.

    Component loggers are named ``dokugen.<component>``
    (``traverser``, ``snippets`` ...), so the console line shows which stage
    skipped a directory or a file without printing the full dotted name.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if name.startswith(_LOGGER_NAME + "."):
            name = name[len(_LOGGER_NAME) + 1 :]
        elif name == _LOGGER_NAME:
            name = "main"
        record.component = name
        return True


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a component logger under the dokugen hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(*, verbose: bool = False, stream: TextIO | None = None) -> logging.Logger:
    """Install the console handler for a dokugen run.

    Verbose runs log at DEBUG, which surfaces skipped snippets and unreadable
    manifests; otherwise only INFO and above reach the console.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Repeated CLI invocations in one process must not stack handlers.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.addFilter(_ComponentFilter())
    handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(handler)
    return logger


__all__ = ["configure_logging", "get_logger"]
