"""scriptpad data models."""

from scriptpad.models.blocks import (
    Action,
    Block,
    BlockList,
    BlockType,
    Character,
    Dialogue,
    SceneHeading,
    Transition,
    dump_blocks,
    parse_blocks,
)
from scriptpad.models.scene import Scene

__all__ = [
    "Action",
    "Block",
    "BlockList",
    "BlockType",
    "Character",
    "Dialogue",
    "Scene",
    "SceneHeading",
    "Transition",
    "dump_blocks",
    "parse_blocks",
]
