"""Screenplay page layout and block/text conversion."""

from __future__ import annotations

from .converter import blocks_to_text, classify_line, text_to_blocks
from .layout import (
    CHARACTER_INDENT,
    DIALOGUE_INDENT,
    DIALOGUE_WIDTH,
    PAGE_WIDTH,
    SCENE_PREFIXES,
    TRANSITION_INDENT,
    center80,
    leading_spaces,
    leading_whitespace,
    pad,
)

__all__ = [
    "CHARACTER_INDENT",
    "DIALOGUE_INDENT",
    "DIALOGUE_WIDTH",
    "PAGE_WIDTH",
    "SCENE_PREFIXES",
    "TRANSITION_INDENT",
    "blocks_to_text",
    "center80",
    "classify_line",
    "leading_spaces",
    "leading_whitespace",
    "pad",
    "text_to_blocks",
]
