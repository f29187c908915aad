"""
rawedit: terminal I/O core for a screen editor

Puts a terminal into raw mode, decodes keystrokes (including arrow and
paging escape sequences), discovers the screen size and redraws the
whole screen in one write per frame.

Quick Start:
    $ rawedit            # Ctrl-Q quits

Library use:
    >>> from rawedit import decode_bytes, Key
    >>> decode_bytes(b"\\x1b[A").key is Key.UP
    True
"""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Core types
from rawedit.core.config import EditorConfig
from rawedit.core.document import Document
from rawedit.core.state import Cursor, EditorState, ScreenSize

# Errors
from rawedit.errors import GeometryError, ProtocolError, RaweditError, TerminalError

# Terminal I/O
from rawedit.cli.core.input import Key, KeyDecoder, KeyEvent, decode_bytes
from rawedit.cli.core.geometry import GeometryResolver, parse_cursor_report
from rawedit.cli.core.terminal import TerminalDevice, TerminalModeController

# Rendering
from rawedit.render.frame import FrameBuffer
from rawedit.render.screen import ScreenRenderer

__all__ = [
    # Version
    "__version__",
    # Core types
    "EditorConfig",
    "Document",
    "Cursor",
    "EditorState",
    "ScreenSize",
    # Errors
    "RaweditError",
    "TerminalError",
    "ProtocolError",
    "GeometryError",
    # Terminal I/O
    "Key",
    "KeyEvent",
    "KeyDecoder",
    "decode_bytes",
    "GeometryResolver",
    "parse_cursor_report",
    "TerminalDevice",
    "TerminalModeController",
    # Rendering
    "FrameBuffer",
    "ScreenRenderer",
]
