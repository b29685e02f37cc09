"""Placeholder snippets inserted for each screenplay element."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from scriptpad.editor.wrap import wrap_text
from scriptpad.formatting.layout import (
    DIALOGUE_INDENT,
    DIALOGUE_WIDTH,
    TRANSITION_INDENT,
    center80,
    pad,
)

SCENE_PLACEHOLDER = "INT. LOCATION - DAY"
CHARACTER_PLACEHOLDER = "CHARACTER NAME"
DIALOGUE_PLACEHOLDER = "Dialogue goes here."
ACTION_PLACEHOLDER = "Action description goes here."
TRANSITION_PLACEHOLDER = "CUT TO:"


class ElementKind(str, Enum):
    """Elements the user can insert from the editor toolbar."""

    SCENE = "scene"
    ACTION = "action"
    CHARACTER = "character"
    DIALOGUE = "dialogue"
    TRANSITION = "transition"


@dataclass(frozen=True)
class Snippet:
    """Placeholder text plus the caret range to select inside it.

    ``sel_start`` and ``sel_end`` are relative to the start of ``text``.
    """

    text: str
    sel_start: int
    sel_end: int


def build_snippet(kind: ElementKind | str) -> Snippet:
    """Build the insertion snippet for ``kind``.

    Raises:
        ValueError: If ``kind`` names no known element
    """
    kind = ElementKind(kind)

    if kind is ElementKind.SCENE:
        # select "LOCATION"
        return Snippet(text=f"{SCENE_PLACEHOLDER}\n\n", sel_start=5, sel_end=13)

    if kind is ElementKind.CHARACTER:
        line = center80(CHARACTER_PLACEHOLDER)
        offset = line.index(CHARACTER_PLACEHOLDER)
        return Snippet(
            text=f"{line}\n\n",
            sel_start=offset,
            sel_end=offset + len(CHARACTER_PLACEHOLDER),
        )

    if kind is ElementKind.DIALOGUE:
        wrapped = "\n".join(
            pad(DIALOGUE_INDENT, line)
            for line in wrap_text(DIALOGUE_PLACEHOLDER, DIALOGUE_WIDTH)
        )
        return Snippet(
            text=f"{wrapped}\n\n",
            sel_start=DIALOGUE_INDENT,
            sel_end=DIALOGUE_INDENT + len(DIALOGUE_PLACEHOLDER),
        )

    if kind is ElementKind.ACTION:
        return Snippet(text=f"{ACTION_PLACEHOLDER}\n\n", sel_start=0, sel_end=28)

    return Snippet(
        text=f"{pad(TRANSITION_INDENT, TRANSITION_PLACEHOLDER)}\n\n",
        sel_start=TRANSITION_INDENT,
        sel_end=TRANSITION_INDENT + len(TRANSITION_PLACEHOLDER),
    )
