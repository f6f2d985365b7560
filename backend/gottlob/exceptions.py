"""Exceptions raised by the Gottlob logic engine."""

from __future__ import annotations

from typing import Optional


class GottlobError(Exception):
    """Base exception for Gottlob."""

    pass


class ParseError(GottlobError, ValueError):
    """Raised when text does not conform to the active grammar."""

    def __init__(
        self,
        message: str = "could not parse",
        position: Optional[int] = None,
        expression: str = "",
    ):
        self.message = message
        self.position = position
        self.expression = expression
        super().__init__(message)

    def __str__(self) -> str:
        if self.position is None:
            return self.message
        return f"{self.message} (at position {self.position})"


class ConfigError(GottlobError):
    """Raised when a configuration file cannot be loaded or validated."""

    def __init__(self, message: str = "Invalid configuration.", path: str = ""):
        self.path = path
        if path:
            message = f"{message} [{path}]"
        super().__init__(message)
