"""Per-session editor state: cursor, geometry and document."""

from __future__ import annotations

from dataclasses import dataclass, field

from rawedit.core.document import Document
from rawedit.errors import GeometryError


@dataclass
class Cursor:
    """Cursor position in screen cells (0-indexed)."""
    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class ScreenSize:
    """Terminal dimensions. Both must be positive."""
    rows: int
    cols: int

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise GeometryError(f"invalid terminal size {self.rows}x{self.cols}")


@dataclass
class EditorState:
    """
    Everything the renderer and event loop share for one session.

    Passed explicitly to each component. The saved terminal mode is not
    kept here; TerminalModeController owns it.
    """
    screen: ScreenSize
    cursor: Cursor = field(default_factory=Cursor)
    document: Document = field(default_factory=Document)
