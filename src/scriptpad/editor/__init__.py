"""Live editing support for the screenplay text buffer."""

from __future__ import annotations

from .caret import Viewport, caret_line, center_caret
from .insertion import InsertionResult, insert_element
from .session import (
    CaretPlacement,
    CaretUpdate,
    EditorSession,
    KeystrokeResult,
    WritingActivity,
)
from .snippets import ElementKind, Snippet, build_snippet
from .wrap import WrapResult, auto_wrap_dialogue, is_dialogue_line, wrap_text

__all__ = [
    "CaretPlacement",
    "CaretUpdate",
    "EditorSession",
    "ElementKind",
    "InsertionResult",
    "KeystrokeResult",
    "Snippet",
    "Viewport",
    "WrapResult",
    "WritingActivity",
    "auto_wrap_dialogue",
    "build_snippet",
    "caret_line",
    "center_caret",
    "insert_element",
    "is_dialogue_line",
    "wrap_text",
]
