"""Exceptions raised by owmgraph."""

from typing import Any


class OwmGraphError(Exception):
    """Base exception; ``details`` is appended to the message when present."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ConfigError(OwmGraphError):
    """Invalid or unreadable configuration, from files or OWMGRAPH_* variables."""


class TemplateInputError(OwmGraphError):
    """Render request could not be read or understood."""

    def __init__(
        self,
        message: str,
        source: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, details)
        self.source = source
