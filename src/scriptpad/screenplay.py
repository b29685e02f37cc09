"""Screenplay documents: title page, ordered scenes and the load/save boundary.

Stored scenes are block lists. They are rendered to text once when a
screenplay is loaded and parsed back to blocks once when it is saved; in
between, each scene is edited as plain text.
"""

from __future__ import annotations

import time
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from scriptpad.config import get_logger
from scriptpad.editor.session import EditorSession
from scriptpad.exceptions import DocumentError, SceneNotFoundError
from scriptpad.formatting.converter import blocks_to_text, text_to_blocks
from scriptpad.models.blocks import Block
from scriptpad.models.scene import Scene

logger = get_logger(__name__)

DEFAULT_TITLE = "Screenplay Title"


class TitlePage(BaseModel):
    """Author details printed on the title page."""

    model_config = ConfigDict(populate_by_name=True)

    author_name: str = Field(default="Author Name", alias="authorName")
    author_address: str = Field(default="Author's Address", alias="authorAddress")
    author_city: str = Field(default="City, State ZIP", alias="authorCity")
    author_phone: str = Field(default="(555) 555-5555", alias="authorPhone")
    author_email: str = Field(default="author@example.com", alias="authorEmail")


class SceneDocument(BaseModel):
    """Stored form of one scene."""

    blocks: list[Block] = Field(default_factory=list)


class ScreenplayDocument(BaseModel):
    """Everything the persistence layer stores for one screenplay.

    ``screenplay`` holds the metadata fields (``screenplayTitle`` and the
    title page) and ``scenes`` maps scene ids to their blocks.
    """

    id: str = ""
    screenplay: dict[str, Any] = Field(default_factory=dict)
    scenes: dict[str, SceneDocument] = Field(default_factory=dict)


def _validate(model: type[BaseModel], data: Any, what: str) -> Any:
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        raise DocumentError(
            message=f"Invalid {what} document",
            hint="Check the stored document against the screenplay format",
            details={"errors": e.error_count(), "first_error": e.errors()[0]["msg"]},
        ) from e


class Screenplay(BaseModel):
    """A screenplay being edited: metadata plus scene text buffers."""

    id: str = ""
    title: str = DEFAULT_TITLE
    title_page: TitlePage = Field(default_factory=TitlePage)
    scenes: list[Scene] = Field(default_factory=list)
    unsaved: bool = False

    @property
    def scene_ids(self) -> list[str]:
        return [scene.id for scene in self.scenes]

    def _index(self, scene_id: str) -> int:
        for i, scene in enumerate(self.scenes):
            if scene.id == scene_id:
                return i
        raise SceneNotFoundError(scene_id, self.scene_ids)

    def _new_scene_id(self) -> str:
        stamp = time.time_ns() // 1_000_000
        existing = set(self.scene_ids)
        while f"scene-{stamp}" in existing:
            stamp += 1
        return f"scene-{stamp}"

    def get_scene(self, scene_id: str) -> Scene:
        return self.scenes[self._index(scene_id)]

    def add_scene(self) -> Scene:
        """Append an empty scene."""
        scene = Scene(id=self._new_scene_id())
        self.scenes.append(scene)
        self.unsaved = True
        logger.info("Added scene", screenplay_id=self.id, scene_id=scene.id)
        return scene

    def update_scene(self, scene_id: str, content: str) -> Scene:
        """Replace the text buffer of a scene.

        Raises:
            SceneNotFoundError: If the screenplay has no such scene
        """
        index = self._index(scene_id)
        scene = Scene(id=scene_id, content=content)
        self.scenes[index] = scene
        self.unsaved = True
        return scene

    def delete_scene(self, scene_id: str) -> None:
        """Remove a scene.

        Raises:
            SceneNotFoundError: If the screenplay has no such scene
        """
        del self.scenes[self._index(scene_id)]
        self.unsaved = True
        logger.info("Deleted scene", screenplay_id=self.id, scene_id=scene_id)

    def open_scene(self, scene_id: str, **kwargs: Any) -> EditorSession:
        """Start an editor session whose changes are written back here.

        Keyword arguments are passed on to :class:`EditorSession`.
        """
        scene = self.get_scene(scene_id)
        return EditorSession(
            scene.id,
            scene.content,
            on_change=lambda s: self.update_scene(s.id, s.content),
            **kwargs,
        )

    def mark_saved(self) -> None:
        self.unsaved = False

    @classmethod
    def from_document(
        cls,
        document: Mapping[str, Any],
        scene_documents: Mapping[str, Any],
        screenplay_id: str = "",
    ) -> Screenplay:
        """Load a stored screenplay, rendering each scene's blocks to text.

        Args:
            document: Metadata document (``screenplayTitle``, title page fields)
            scene_documents: Scene id to ``{"blocks": [...]}``, in scene order
            screenplay_id: Identifier of the screenplay

        Returns:
            Screenplay with no unsaved changes

        Raises:
            DocumentError: If a scene document holds invalid blocks
        """
        title_page = TitlePage(
            **{
                name: document.get(field.alias or name) or ""
                for name, field in TitlePage.model_fields.items()
            }
        )
        scenes = []
        for scene_id, data in scene_documents.items():
            stored = _validate(SceneDocument, data, "scene")
            scenes.append(Scene(id=scene_id, content=blocks_to_text(stored.blocks)))

        logger.info(
            "Loaded screenplay", screenplay_id=screenplay_id, scenes=len(scenes)
        )
        return cls(
            id=screenplay_id,
            title=document.get("screenplayTitle") or DEFAULT_TITLE,
            title_page=title_page,
            scenes=scenes,
        )

    @classmethod
    def from_stored(cls, data: Any) -> Screenplay:
        """Load from the combined :class:`ScreenplayDocument` shape.

        Raises:
            DocumentError: If ``data`` is not a valid screenplay document
        """
        stored: ScreenplayDocument = _validate(ScreenplayDocument, data, "screenplay")
        return cls.from_document(
            stored.screenplay,
            {scene_id: scene.model_dump() for scene_id, scene in stored.scenes.items()},
            screenplay_id=stored.id,
        )

    def to_document(self) -> ScreenplayDocument:
        """Parse every scene buffer back into blocks for storage.

        The scene ids in the result are the complete set to keep; stored
        scenes missing from it were deleted.
        """
        metadata: dict[str, Any] = {"screenplayTitle": self.title}
        metadata.update(self.title_page.model_dump(by_alias=True))
        return ScreenplayDocument(
            id=self.id,
            screenplay=metadata,
            scenes={
                scene.id: SceneDocument(blocks=text_to_blocks(scene.content))
                for scene in self.scenes
            },
        )
