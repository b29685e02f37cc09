"""Scene buffer model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Scene(BaseModel):
    """One scene of a screenplay and its plain-text buffer.

    The buffer is the source of truth while editing; blocks are derived from
    it only when the scene is saved.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    content: str = ""
