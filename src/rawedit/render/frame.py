"""Append-only byte buffer for assembling one screen frame."""

from __future__ import annotations

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class Writable(Protocol):
    def write(self, data: bytes) -> int: ...


class FrameBuffer:
    """
    Collects a frame's output so it can be written in a single call.

    Appends that cannot be allocated are dropped rather than raised; a
    frame may then be incomplete. Flushing does not retry partial writes.
    """

    def __init__(self) -> None:
        self._buf = bytearray()

    def append(self, data: bytes) -> None:
        """Add ``data`` to the end of the frame."""
        try:
            self._buf += data
        except MemoryError:
            logger.warning("dropped %d bytes from frame: out of memory", len(data))

    def flush_to(self, device: Writable) -> int:
        """Write the frame in one call and discard it. Returns bytes written."""
        total = len(self._buf)
        try:
            written = device.write(bytes(self._buf))
        finally:
            self._buf = bytearray()
        if written < total:
            logger.warning("partial frame write: %d of %d bytes", written, total)
        return written

    def getvalue(self) -> bytes:
        return bytes(self._buf)

    def __len__(self) -> int:
        return len(self._buf)
