"""Document - the text the screen renderer draws rows from."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class Document:
    """
    Placeholder document holding at most one row of text.

    The renderer only needs a row count and per-row text, so that is all
    this exposes. A general multi-row buffer is not part of this stage.
    """
    text: Optional[str] = None

    @classmethod
    def placeholder(cls) -> Document:
        """Single-row sample document."""
        return cls("Hello World")

    @property
    def row_count(self) -> int:
        return 0 if self.text is None else 1

    @property
    def is_empty(self) -> bool:
        return self.row_count == 0

    def row(self, index: int) -> Optional[str]:
        """Text of row ``index``, or None if the document has no such row."""
        if 0 <= index < self.row_count:
            return self.text
        return None
