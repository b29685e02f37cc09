"""Conversion between typed blocks and column-indented screenplay text."""

from __future__ import annotations

import re
from collections.abc import Sequence

from scriptpad.config import get_logger
from scriptpad.formatting.layout import (
    CHARACTER_INDENT,
    DIALOGUE_INDENT,
    SCENE_PREFIXES,
    TRANSITION_INDENT,
    leading_whitespace,
    pad,
)
from scriptpad.models.blocks import (
    Action,
    Block,
    Character,
    Dialogue,
    SceneHeading,
    Transition,
)

logger = get_logger(__name__)

LINE_BREAK = re.compile(r"\r?\n")


def _render_block(block: Block, index: int) -> str:
    """Render one block as its line of screenplay text."""
    if isinstance(block, Action):
        # Blank line between an action paragraph and whatever precedes it
        return "\n" + block.text if index > 0 else block.text
    if isinstance(block, Character):
        return pad(CHARACTER_INDENT, block.text)
    if isinstance(block, Dialogue):
        return pad(DIALOGUE_INDENT, block.text)
    if isinstance(block, Transition):
        return pad(TRANSITION_INDENT, block.text)
    return block.text


def blocks_to_text(blocks: Sequence[Block]) -> str:
    """Render blocks as column-indented screenplay text.

    Args:
        blocks: Blocks in script order

    Returns:
        One line per block joined with newlines, empty for no blocks
    """
    text = "\n".join(_render_block(block, i) for i, block in enumerate(blocks))
    logger.debug("Rendered blocks to text", blocks=len(blocks), chars=len(text))
    return text


def classify_line(line: str) -> Block:
    """Classify a single line of screenplay text.

    Indentation thresholds are checked from the widest column down, so a
    line indented 51 columns is a transition even though it also clears the
    character and dialogue thresholds. Any indent at or above a threshold
    counts, e.g. 25 columns reads as dialogue.
    """
    indent = leading_whitespace(line)
    text = line.strip()
    if indent >= TRANSITION_INDENT:
        return Transition(text=text)
    if indent >= CHARACTER_INDENT:
        return Character(text=text)
    if indent >= DIALOGUE_INDENT:
        return Dialogue(text=text)
    if line.startswith(SCENE_PREFIXES):
        return SceneHeading(text=text)
    return Action(text=text)


def text_to_blocks(text: str) -> list[Block]:
    """Parse screenplay text back into blocks.

    Empty lines are dropped and every other line becomes exactly one block.
    Lines that break the column conventions are still classified, never
    rejected.

    Args:
        text: Screenplay text with ``\\n`` or ``\\r\\n`` line endings

    Returns:
        Blocks in line order
    """
    blocks = [classify_line(line) for line in LINE_BREAK.split(text) if line]
    logger.debug("Parsed text to blocks", chars=len(text), blocks=len(blocks))
    return blocks
