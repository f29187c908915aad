"""Pytest configuration: scripted terminal doubles and a real pty."""

import os
from typing import Iterator, Optional

import pytest


class FakeDevice:
    """
    Scripted stand-in for TerminalDevice.

    Input is handed out from ``data``; once it runs out every read times
    out (returns b""). Writes are recorded in ``writes``.
    """

    def __init__(
        self,
        data: bytes = b"",
        size: Optional[os.terminal_size] = None,
        size_error: Optional[OSError] = None,
        short_writes: bool = False,
        max_idle_reads: int = 1000,
        fd_in: int = -1,
    ) -> None:
        self.data = bytearray(data)
        self.writes: list[bytes] = []
        self._size = size
        self._size_error = size_error
        self._short_writes = short_writes
        self._idle = 0
        self._max_idle = max_idle_reads
        self.fd_in = fd_in
        self.fd_out = -1

    def read(self, n: int = 1) -> bytes:
        if not self.data:
            self._idle += 1
            if self._idle > self._max_idle:
                raise RuntimeError("scripted input exhausted")
            return b""
        chunk = bytes(self.data[:n])
        del self.data[:n]
        return chunk

    def write(self, data: bytes) -> int:
        self.writes.append(bytes(data))
        if self._short_writes:
            return max(len(data) - 1, 0)
        return len(data)

    def size(self) -> os.terminal_size:
        if self._size_error is not None:
            raise self._size_error
        if self._size is None:
            raise OSError(25, "Inappropriate ioctl for device")
        return self._size

    @property
    def output(self) -> bytes:
        return b"".join(self.writes)


class FakeTerminal:
    """Stand-in for TerminalModeController that counts restores."""

    def __init__(self) -> None:
        self.leave_calls = 0

    def leave(self) -> None:
        self.leave_calls += 1


class FakeModeController(FakeTerminal):
    """Stand-in for TerminalModeController that tracks raw mode."""

    def __init__(self, fd: int = -1, timeout_ds: int = 1) -> None:
        super().__init__()
        self.fd = fd
        self.active = False
        self.restores = 0

    def enter(self) -> None:
        self.active = True

    def leave(self) -> None:
        super().leave()
        if self.active:
            self.active = False
            self.restores += 1

    def __enter__(self) -> "FakeModeController":
        self.enter()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.leave()


@pytest.fixture
def fake_terminal() -> FakeTerminal:
    return FakeTerminal()


@pytest.fixture
def pty_fd() -> Iterator[int]:
    """Slave side of a fresh pseudo terminal; skips where none is available."""
    try:
        master, slave = os.openpty()
    except OSError as e:
        pytest.skip(f"no pseudo terminal available: {e}")
    try:
        yield slave
    finally:
        os.close(slave)
        os.close(master)
