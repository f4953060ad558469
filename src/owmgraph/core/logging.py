"""Logging setup for owmgraph, rendered through Rich on stderr."""

import logging
import sys
from enum import Enum
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "owmgraph"


class LogLevel(str, Enum):
    """Log level enumeration."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


def setup_logging(
    level: LogLevel = LogLevel.WARNING,
    rich_output: bool = True,
) -> logging.Logger:
    """Route log records to stderr at ``level``, replacing any earlier handlers.

    Plain ``asctime - name - level`` lines are used when ``rich_output`` is off.
    """
    handler: logging.Handler
    if rich_output:
        handler = RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )

    numeric_level = logging.getLevelName(level.value.upper())
    root_logger = logging.getLogger()
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(numeric_level)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(numeric_level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger under the ``owmgraph`` namespace; module names are used as-is."""
    if name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


class StructuredLogger:
    """Logger that appends bound ``key=value`` context to each message."""

    def __init__(self, name: str, context: dict[str, Any] | None = None):
        self._logger = get_logger(name)
        self._context = context or {}

    def bind(self, **kwargs: Any) -> "StructuredLogger":
        return StructuredLogger(self._logger.name, {**self._context, **kwargs})

    def _format(self, message: str, fields: dict[str, Any]) -> str:
        context = {**self._context, **fields}
        if not context:
            return message
        return f"{message} [{' '.join(f'{k}={v}' for k, v in context.items())}]"

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logger.debug(self._format(message, kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self._logger.warning(self._format(message, kwargs))
