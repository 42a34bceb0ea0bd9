"""Exceptions raised by the x-monotone decomposition and its file tooling."""

from __future__ import annotations


class MonotoneError(Exception):
    """Base class for all xmonotone errors."""


class InvalidInputError(MonotoneError, ValueError):
    """Input vertices cannot be processed (non-finite or malformed coordinates)."""


class PolyFormatError(MonotoneError, ValueError):
    """A .poly file does not follow the `N` + `x y` line format."""

    def __init__(self, message: str, line: int | None = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
