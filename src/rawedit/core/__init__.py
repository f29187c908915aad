"""Core session types: state, document, configuration."""

from rawedit.core.config import EditorConfig
from rawedit.core.document import Document
from rawedit.core.state import Cursor, EditorState, ScreenSize

__all__ = ["EditorConfig", "Document", "Cursor", "EditorState", "ScreenSize"]
