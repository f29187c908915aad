"""Terminal size discovery with a cursor-position fallback."""

from __future__ import annotations

import logging
import re
from typing import Protocol

from rawedit.core.constants import CURSOR_REPORT_END, PROBE_MOVE, QUERY_CURSOR
from rawedit.core.state import ScreenSize
from rawedit.errors import GeometryError, ProtocolError

logger = logging.getLogger(__name__)


class GeometryDevice(Protocol):
    """What the resolver needs from a terminal."""

    def read(self, n: int = 1) -> bytes: ...

    def write(self, data: bytes) -> int: ...

    def size(self): ...


def parse_cursor_report(buf: bytes, separator: str = ";") -> tuple[int, int]:
    """
    Parse a cursor position report ``ESC [ <rows> SEP <cols> R``.

    The trailing ``R`` may be missing. Returns ``(rows, cols)``.

    Raises:
        ProtocolError: if the reply does not start with ``ESC [`` or the
            fields cannot be parsed.
    """
    if not buf.startswith(b"\x1b["):
        raise ProtocolError(f"cursor report missing ESC [ prefix: {buf!r}")

    pattern = rb"(\d+)" + re.escape(separator.encode("ascii")) + rb"(\d+)R?"
    match = re.fullmatch(pattern, buf[2:])
    if match is None:
        raise ProtocolError(f"malformed cursor report: {buf!r}")
    return int(match.group(1)), int(match.group(2))


class GeometryResolver:
    """
    Determine the visible rows and columns of a terminal.

    Asks the OS first. If that fails or reports zero columns, pushes the
    cursor to the bottom-right corner and asks the terminal where it is.
    """

    def __init__(
        self,
        device: GeometryDevice,
        buffer_size: int = 32,
        separator: str = ";",
    ) -> None:
        self.device = device
        self.buffer_size = buffer_size
        self.separator = separator

    def resolve(self) -> ScreenSize:
        """Return the terminal size or raise GeometryError."""
        try:
            size = self.device.size()
        except OSError as e:
            logger.info("window size query failed (%s), probing cursor", e)
        else:
            if size.columns > 0 and size.lines > 0:
                logger.debug("window size %dx%d from OS", size.lines, size.columns)
                return ScreenSize(size.lines, size.columns)
            logger.info("OS reported %dx%d, probing cursor", size.lines, size.columns)

        return self.probe()

    def probe(self) -> ScreenSize:
        """Measure the screen by moving the cursor as far as it will go."""
        if self.device.write(PROBE_MOVE) != len(PROBE_MOVE):
            raise GeometryError("short write while moving cursor for size probe")
        try:
            rows, cols = self.cursor_position()
        except ProtocolError as e:
            raise GeometryError(f"cursor probe failed: {e}") from e
        logger.debug("window size %dx%d from cursor probe", rows, cols)
        return ScreenSize(rows, cols)

    def cursor_position(self) -> tuple[int, int]:
        """Query the cursor position (1-indexed rows, cols)."""
        if self.device.write(QUERY_CURSOR) != len(QUERY_CURSOR):
            raise ProtocolError("short write while querying cursor position")

        buf = bytearray()
        while len(buf) < self.buffer_size:
            chunk = self.device.read(1)
            if not chunk:
                break
            if chunk == CURSOR_REPORT_END:
                break
            buf += chunk

        return parse_cursor_report(bytes(buf), self.separator)
