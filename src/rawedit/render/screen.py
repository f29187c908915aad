"""Render editor state to a full-screen frame."""

from __future__ import annotations

import logging
from typing import Optional

from rawedit.core.config import EditorConfig
from rawedit.core.constants import (
    CURSOR_HOME,
    ERASE_LINE,
    HIDE_CURSOR,
    NEWLINE,
    SHOW_CURSOR,
    move_cursor,
)
from rawedit.core.state import EditorState
from rawedit.render.frame import FrameBuffer, Writable

logger = logging.getLogger(__name__)


class ScreenRenderer:
    """
    Draw the document, or a welcome banner, onto every screen row.

    The cursor is hidden while drawing and each row is cleared to the end
    after its content, so the screen is repainted in place without a full
    clear and without flicker.
    """

    def __init__(self, config: Optional[EditorConfig] = None) -> None:
        self.config = config or EditorConfig()

    def compose(self, state: EditorState) -> FrameBuffer:
        """Build the frame for ``state`` without writing it."""
        frame = FrameBuffer()
        frame.append(HIDE_CURSOR)
        frame.append(CURSOR_HOME)

        self._draw_rows(frame, state)

        frame.append(move_cursor(state.cursor.y + 1, state.cursor.x + 1))
        frame.append(SHOW_CURSOR)
        return frame

    def refresh(self, state: EditorState, device: Writable) -> None:
        """Compose and write one frame."""
        frame = self.compose(state)
        size = len(frame)
        frame.flush_to(device)
        logger.debug("flushed %d byte frame", size)

    def _draw_rows(self, frame: FrameBuffer, state: EditorState) -> None:
        rows = state.screen.rows
        cols = state.screen.cols
        document = state.document

        for y in range(rows):
            text = document.row(y)
            if text is not None:
                frame.append(text.encode("utf-8", errors="replace")[:cols])
            elif document.is_empty and y == rows // 3:
                frame.append(self.banner_line(cols))
            else:
                frame.append(self.config.empty_row_marker)

            frame.append(ERASE_LINE)
            if y < rows - 1:
                frame.append(NEWLINE)

    def banner_line(self, cols: int) -> bytes:
        """Welcome banner centered in ``cols`` cells, never wider than ``cols``."""
        banner = self.config.banner.encode("utf-8")[:cols]
        padding = (cols - len(banner)) // 2

        line = bytearray()
        marker = self.config.empty_row_marker
        if padding >= len(marker) > 0:
            line += marker
            padding -= len(marker)
        line += b" " * padding
        line += banner
        return bytes(line)
