"""Typed screenplay blocks.

A block is one screenplay element and the text it carries. Blocks are the
storage shape of a scene: the editor works on plain text and converts to
blocks only when a scene is loaded or saved.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from scriptpad.exceptions import DocumentError


class BlockType(str, Enum):
    """Screenplay element tags as they appear in stored documents."""

    SCENE_HEADING = "sceneHeading"
    ACTION = "action"
    CHARACTER = "character"
    DIALOGUE = "dialogue"
    TRANSITION = "transition"


class BaseBlock(BaseModel):
    """Fields shared by every block."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    text: str


class SceneHeading(BaseBlock):
    """Scene heading, e.g. ``INT. KITCHEN - NIGHT``."""

    type: Literal["sceneHeading"] = "sceneHeading"


class Action(BaseBlock):
    """Flush-left action paragraph."""

    type: Literal["action"] = "action"


class Character(BaseBlock):
    """Character cue above a dialogue block."""

    type: Literal["character"] = "character"


class Dialogue(BaseBlock):
    """One line of spoken dialogue."""

    type: Literal["dialogue"] = "dialogue"


class Transition(BaseBlock):
    """Transition such as ``CUT TO:``."""

    type: Literal["transition"] = "transition"


Block = Annotated[
    SceneHeading | Action | Character | Dialogue | Transition,
    Field(discriminator="type"),
]

BlockList: TypeAdapter[list[Block]] = TypeAdapter(list[Block])


def parse_blocks(data: Iterable[Any]) -> list[Block]:
    """Validate stored block dictionaries into block models.

    Args:
        data: Sequence of ``{"type": ..., "text": ...}`` mappings

    Returns:
        List of typed blocks in the same order

    Raises:
        DocumentError: If an entry has an unknown type or no text
    """
    try:
        return BlockList.validate_python(list(data))
    except PydanticValidationError as e:
        raise DocumentError(
            message="Invalid block document",
            hint=(
                "Each block needs a 'text' string and a 'type' of "
                + ", ".join(t.value for t in BlockType)
            ),
            details={"errors": e.error_count(), "first_error": e.errors()[0]["msg"]},
        ) from e


def dump_blocks(blocks: Sequence[Block]) -> list[dict[str, str]]:
    """Return the stored dictionary form of ``blocks``."""
    return [{"type": block.type, "text": block.text} for block in blocks]
