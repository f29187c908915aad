"""Low-level terminal operations: device I/O and raw mode."""

from __future__ import annotations

import atexit
import errno
import logging
import os
import sys
import termios
from typing import Any, Optional

from rawedit.errors import TerminalError

logger = logging.getLogger(__name__)

# Indexes into the list returned by termios.tcgetattr
IFLAG, OFLAG, CFLAG, LFLAG, ISPEED, OSPEED, CC = range(7)

# Errors that mean "nothing to read/write right now"
_WOULD_BLOCK = {errno.EAGAIN, errno.EWOULDBLOCK, errno.EINTR}


class TerminalDevice:
    """
    Byte-level access to the terminal.

    Uses os.read()/os.write() on raw descriptors to bypass Python's I/O
    buffering. A read that times out (raw mode with VMIN=0) returns b"".
    """

    def __init__(self, fd_in: Optional[int] = None, fd_out: Optional[int] = None) -> None:
        self.fd_in = sys.stdin.fileno() if fd_in is None else fd_in
        self.fd_out = sys.stdout.fileno() if fd_out is None else fd_out

    def read(self, n: int = 1) -> bytes:
        """Read up to ``n`` bytes; b"" on timeout."""
        try:
            return os.read(self.fd_in, n)
        except OSError as e:
            if e.errno in _WOULD_BLOCK:
                return b""
            raise TerminalError("read", e) from e

    def write(self, data: bytes) -> int:
        """Write ``data`` in one call and return the number of bytes written."""
        try:
            return os.write(self.fd_out, data)
        except OSError as e:
            if e.errno in _WOULD_BLOCK:
                return 0
            raise TerminalError("write", e) from e

    def size(self) -> os.terminal_size:
        """Ask the OS for the window size. Raises OSError if unsupported."""
        return os.get_terminal_size(self.fd_out)


def make_raw(attrs: list[Any], timeout_ds: int = 1) -> list[Any]:
    """
    Return a raw-mode copy of ``attrs`` (as from termios.tcgetattr).

    The input list is left untouched. Reads return after at least 0 bytes
    or ``timeout_ds`` tenths of a second.
    """
    raw = list(attrs)
    raw[CC] = list(attrs[CC])
    raw[IFLAG] &= ~(termios.BRKINT | termios.ICRNL | termios.INPCK | termios.ISTRIP | termios.IXON)
    raw[OFLAG] &= ~termios.OPOST
    raw[CFLAG] |= termios.CS8
    raw[LFLAG] &= ~(termios.ECHO | termios.ICANON | termios.ISIG | termios.IEXTEN)
    raw[CC][termios.VMIN] = 0
    raw[CC][termios.VTIME] = timeout_ds
    return raw


class TerminalModeController:
    """
    Switches a terminal into raw mode and back.

    The original attributes are captured on the first ``enter()`` and
    restored by ``leave()``. ``leave()`` is registered with atexit, and
    only does anything while raw mode is active, so restoring twice is a
    no-op.

    Example:
        >>> with TerminalModeController(fd):
        ...     run_editor()
    """

    def __init__(self, fd: Optional[int] = None, timeout_ds: int = 1) -> None:
        self.fd = sys.stdin.fileno() if fd is None else fd
        self.timeout_ds = timeout_ds
        self._saved: Optional[list[Any]] = None
        self._active = False
        self._registered = False

    @property
    def saved_mode(self) -> Optional[list[Any]]:
        """Copy of the captured attributes, or None before ``enter()``."""
        if self._saved is None:
            return None
        saved = list(self._saved)
        saved[CC] = list(self._saved[CC])
        return saved

    @property
    def active(self) -> bool:
        return self._active

    def enter(self) -> None:
        """Capture the current mode (first call only) and install raw mode."""
        if self._saved is None:
            try:
                self._saved = termios.tcgetattr(self.fd)
            except termios.error as e:
                raise TerminalError("tcgetattr", e) from e
        if not self._registered:
            atexit.register(self.leave)
            self._registered = True

        raw = make_raw(self._saved, self.timeout_ds)
        try:
            termios.tcsetattr(self.fd, termios.TCSAFLUSH, raw)
        except termios.error as e:
            raise TerminalError("tcsetattr", e) from e
        self._active = True
        logger.debug("raw mode enabled on fd %d", self.fd)

    def leave(self) -> None:
        """Restore the captured mode if raw mode is active."""
        if not self._active or self._saved is None:
            return
        # Clear the flag first so a failed restore is not retried from atexit
        self._active = False
        try:
            termios.tcsetattr(self.fd, termios.TCSAFLUSH, self._saved)
        except termios.error as e:
            raise TerminalError("tcsetattr", e) from e
        logger.debug("terminal mode restored on fd %d", self.fd)

    def __enter__(self) -> TerminalModeController:
        self.enter()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.leave()
