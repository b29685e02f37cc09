"""Editing session for one open scene.

Mutations and caret placement are two separate steps. A mutation commits the
new buffer and returns a pending caret placement; the caller renders the
buffer and only then calls :meth:`EditorSession.place_caret`, so centering
reads the geometry of the committed text rather than the stale one.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from scriptpad.config import get_logger, get_settings
from scriptpad.editor.caret import Viewport, center_caret
from scriptpad.editor.insertion import insert_element
from scriptpad.editor.snippets import ElementKind
from scriptpad.editor.wrap import auto_wrap_dialogue
from scriptpad.exceptions import EditorStateError
from scriptpad.formatting.converter import text_to_blocks
from scriptpad.models.blocks import Block
from scriptpad.models.scene import Scene

logger = get_logger(__name__)


class WritingActivity(Protocol):
    """Tracker told about every day the user writes."""

    def record_today(self) -> None: ...


@dataclass(frozen=True)
class CaretPlacement:
    """Selection to apply once the committed buffer has been rendered.

    ``reposition`` is False when the mutation left the caret where the
    surface already has it; the view is then not re-centred.
    """

    selection_start: int
    selection_end: int
    reposition: bool = True


@dataclass(frozen=True)
class CaretUpdate:
    """Selection and scroll position after a placement was applied."""

    selection_start: int
    selection_end: int
    scroll_top: float


@dataclass(frozen=True)
class KeystrokeResult:
    """Formatted buffer, caret offset and scroll position for a keystroke."""

    text: str
    caret: int
    scroll_top: float


class EditorSession:
    """Authoritative text buffer of one scene while it is being edited."""

    def __init__(
        self,
        scene_id: str,
        content: str = "",
        *,
        viewport: Viewport | None = None,
        on_change: Callable[[Scene], None] | None = None,
        activity: WritingActivity | None = None,
    ) -> None:
        """Open a session.

        Args:
            scene_id: Identifier of the scene being edited
            content: Initial buffer, usually ``blocks_to_text`` of stored blocks
            viewport: Default geometry used to centre the caret, taken from
                the configured editor geometry when not given
            on_change: Called with the updated scene after every mutation
            activity: Writing activity tracker notified on every keystroke
        """
        self.scene_id = scene_id
        self.viewport = viewport or get_settings().viewport()
        self.scroll_top = 0.0
        self._content = content
        self._selection = (len(content), len(content))
        self._pending: CaretPlacement | None = None
        self._on_change = on_change
        self._activity = activity

    @property
    def content(self) -> str:
        return self._content

    @property
    def selection(self) -> tuple[int, int]:
        return self._selection

    @property
    def pending(self) -> CaretPlacement | None:
        return self._pending

    def to_scene(self) -> Scene:
        return Scene(id=self.scene_id, content=self._content)

    def blocks(self) -> list[Block]:
        """Blocks for the current buffer, for saving."""
        return text_to_blocks(self._content)

    def _commit(self, content: str, placement: CaretPlacement) -> CaretPlacement:
        if self._pending is not None:
            logger.debug(
                "Dropping stale caret placement",
                scene_id=self.scene_id,
                selection=(self._pending.selection_start, self._pending.selection_end),
            )
        self._content = content
        self._pending = placement
        if self._on_change is not None:
            self._on_change(self.to_scene())
        return placement

    def handle_change(self, raw_text: str, caret_before: int) -> CaretPlacement:
        """Commit text typed by the user, re-flowing dialogue.

        Args:
            raw_text: Buffer as the input surface holds it after the keystroke
            caret_before: Caret offset in ``raw_text``

        Returns:
            Pending caret placement, following the caret through the wrap
        """
        result = auto_wrap_dialogue(raw_text)
        caret = result.map_offset(caret_before)
        if result.changed:
            logger.debug(
                "Wrapped dialogue",
                scene_id=self.scene_id,
                delta=result.delta,
                caret_before=caret_before,
                caret_after=caret,
            )
        placement = self._commit(
            result.text,
            CaretPlacement(caret, caret, reposition=result.changed),
        )
        if self._activity is not None:
            self._activity.record_today()
        return placement

    def insert_element(
        self,
        kind: ElementKind | str,
        selection_start: int | None = None,
        selection_end: int | None = None,
    ) -> CaretPlacement:
        """Insert an element snippet at the selection.

        Args:
            kind: Element to insert
            selection_start: Selection start, defaults to the session's caret
            selection_end: Selection end, defaults to the session's caret

        Returns:
            Pending caret placement selecting the placeholder
        """
        start = self._selection[0] if selection_start is None else selection_start
        end = self._selection[1] if selection_end is None else selection_end
        result = insert_element(kind, self._content, start, end)
        return self._commit(
            result.content,
            CaretPlacement(result.caret_start, result.caret_end),
        )

    def place_caret(self, viewport: Viewport | None = None) -> CaretUpdate:
        """Apply the pending caret placement after the buffer was rendered.

        Args:
            viewport: Geometry of the rendered surface, defaults to the
                session viewport

        Returns:
            Selection and scroll position to apply to the surface

        Raises:
            EditorStateError: If no mutation is waiting for a caret placement
        """
        if self._pending is None:
            raise EditorStateError(
                message="No pending caret placement",
                hint="Commit a change or an insertion before placing the caret",
                details={"scene_id": self.scene_id},
            )
        placement, self._pending = self._pending, None
        self._selection = (placement.selection_start, placement.selection_end)
        if placement.reposition:
            self.scroll_top = center_caret(
                self._content, placement.selection_start, viewport or self.viewport
            )
        return CaretUpdate(
            selection_start=placement.selection_start,
            selection_end=placement.selection_end,
            scroll_top=self.scroll_top,
        )

    def process_keystroke(
        self,
        raw_text: str,
        caret_before: int,
        viewport: Viewport | None = None,
    ) -> KeystrokeResult:
        """Commit a keystroke and place the caret in one call.

        For callers without a separate render cycle.
        """
        self.handle_change(raw_text, caret_before)
        update = self.place_caret(viewport)
        return KeystrokeResult(
            text=self._content,
            caret=update.selection_start,
            scroll_top=update.scroll_top,
        )
