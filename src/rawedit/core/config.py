"""Editor configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass

from rawedit import __version__
from rawedit.core.constants import ctrl


@dataclass(frozen=True)
class EditorConfig:
    """
    Tunables for one editor session.

    Everything here is a code-level default; the editor reads no
    environment variables or config files in this stage.

    Example:
        >>> config = EditorConfig(inclusive_clamp=False)
        >>> config.banner
        'rawedit editor -- version 0.1.0'
    """

    # Banner
    name: str = "rawedit"
    version: str = __version__
    empty_row_marker: bytes = b"~"

    # Keys
    quit_key: int = ctrl("q")

    # Raw-mode read timeout, in tenths of a second (VTIME)
    read_timeout_ds: int = 1

    # Geometry probe
    probe_buffer_size: int = 32
    cursor_report_separator: str = ";"

    # When True the cursor may sit one cell past the last column/row,
    # i.e. 0 <= x <= cols and 0 <= y <= rows
    inclusive_clamp: bool = True

    @property
    def banner(self) -> str:
        """Welcome text shown on an empty document."""
        return f"{self.name} editor -- version {self.version}"
