"""scriptpad: a screenplay formatting engine.

Converts screenplay scenes between typed blocks (scene heading, action,
character, dialogue, transition) and column-indented plain text, and keeps
that text well formed while it is edited: element insertion, dialogue
auto-wrap and caret tracking.
"""

from scriptpad.config import ScriptpadSettings, get_logger, get_settings
from scriptpad.editor import (
    EditorSession,
    ElementKind,
    Viewport,
    auto_wrap_dialogue,
    center_caret,
    insert_element,
)
from scriptpad.formatting import blocks_to_text, text_to_blocks
from scriptpad.models import (
    Action,
    Block,
    Character,
    Dialogue,
    Scene,
    SceneHeading,
    Transition,
)
from scriptpad.screenplay import Screenplay, TitlePage

__version__ = "0.1.0"

__all__ = [
    "Action",
    "Block",
    "Character",
    "Dialogue",
    "EditorSession",
    "ElementKind",
    "Scene",
    "SceneHeading",
    "Screenplay",
    "ScriptpadSettings",
    "TitlePage",
    "Transition",
    "Viewport",
    "__version__",
    "auto_wrap_dialogue",
    "blocks_to_text",
    "center_caret",
    "get_logger",
    "get_settings",
    "insert_element",
    "text_to_blocks",
]
