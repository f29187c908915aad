"""Core terminal infrastructure - raw mode, key decoding, geometry."""

from rawedit.cli.core.terminal import TerminalDevice, TerminalModeController, make_raw
from rawedit.cli.core.input import ByteSource, Key, KeyDecoder, KeyEvent, decode_bytes
from rawedit.cli.core.geometry import GeometryResolver, parse_cursor_report

__all__ = [
    "TerminalDevice",
    "TerminalModeController",
    "make_raw",
    "ByteSource",
    "Key",
    "KeyDecoder",
    "KeyEvent",
    "decode_bytes",
    "GeometryResolver",
    "parse_cursor_report",
]
