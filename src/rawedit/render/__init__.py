"""Frame assembly and screen rendering."""

from rawedit.render.frame import FrameBuffer
from rawedit.render.screen import ScreenRenderer

__all__ = ["FrameBuffer", "ScreenRenderer"]
