"""Exception hierarchy for terminal, protocol and geometry failures."""

from __future__ import annotations

import os
from typing import Optional


class RaweditError(Exception):
    """Base class for all rawedit errors."""


class TerminalError(RaweditError):
    """
    Unrecoverable failure talking to the terminal device.

    Raised when terminal attributes cannot be read or applied, or when the
    device itself cannot be read or written for a reason other than
    "would block". Callers are expected to restore the terminal and exit.
    """

    def __init__(self, operation: str, cause: Optional[BaseException] = None) -> None:
        self.operation = operation
        self.cause = cause
        super().__init__(self._describe())

    def _describe(self) -> str:
        if self.cause is None:
            return self.operation
        if isinstance(self.cause, OSError) and self.cause.errno is not None:
            return f"{self.operation}: {os.strerror(self.cause.errno)}"
        # termios.error carries (errno, message) in args
        args = getattr(self.cause, "args", ())
        if len(args) >= 2 and isinstance(args[1], str):
            return f"{self.operation}: {args[1]}"
        return f"{self.operation}: {self.cause}"


class ProtocolError(RaweditError):
    """Malformed or incomplete escape-sequence reply from the terminal."""


class GeometryError(RaweditError):
    """Terminal geometry could not be determined."""
