"""Shared constants for the VT100 escape sequences the editor speaks."""

# Control bytes
ESC = b"\x1b"
CSI = ESC + b"["

# Screen control
CLEAR_SCREEN = CSI + b"2J"
CURSOR_HOME = CSI + b"H"
HIDE_CURSOR = CSI + b"?25l"
SHOW_CURSOR = CSI + b"?25h"
ERASE_LINE = CSI + b"K"
NEWLINE = b"\r\n"

# Geometry probe: push the cursor as far right/down as the terminal allows,
# then ask where it ended up
PROBE_MOVE = CSI + b"999C" + CSI + b"999B"
QUERY_CURSOR = CSI + b"6n"
CURSOR_REPORT_END = b"R"


def move_cursor(row: int, col: int) -> bytes:
    """Build a cursor-position sequence (1-indexed)."""
    return CSI + f"{row};{col}H".encode("ascii")


def ctrl(char: str) -> int:
    """Byte code produced by Ctrl+<char>."""
    return ord(char) & 0x1F
