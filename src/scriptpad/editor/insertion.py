"""Context-aware insertion of element snippets into a scene buffer."""

from __future__ import annotations

from dataclasses import dataclass

from scriptpad.config import get_logger
from scriptpad.editor.snippets import ElementKind, Snippet, build_snippet

logger = get_logger(__name__)


@dataclass(frozen=True)
class InsertionResult:
    """Buffer after an insertion and the caret range over the placeholder."""

    content: str
    caret_start: int
    caret_end: int
    separator: str
    snippet: Snippet


def current_line(content: str, offset: int) -> str:
    """Text of the line containing ``offset``, up to ``offset``."""
    before = content[:offset]
    return before[before.rfind("\n") + 1 :]


def insert_element(
    kind: ElementKind | str,
    content: str,
    selection_start: int,
    selection_end: int,
) -> InsertionResult:
    """Replace the selection with the snippet for ``kind``.

    When the caret's line already holds text, the snippet is pushed onto a
    fresh line first: one newline for dialogue (it stays attached to the
    character cue above it), a blank line for everything else.

    Args:
        kind: Element to insert
        content: Current scene buffer
        selection_start: Start of the user's selection
        selection_end: End of the user's selection

    Returns:
        InsertionResult with the new buffer and placeholder selection
    """
    kind = ElementKind(kind)
    start, end = sorted(
        (
            max(0, min(selection_start, len(content))),
            max(0, min(selection_end, len(content))),
        )
    )
    snippet = build_snippet(kind)

    separator = ""
    if current_line(content, start).strip():
        separator = "\n" if kind is ElementKind.DIALOGUE else "\n\n"

    new_content = content[:start] + separator + snippet.text + content[end:]
    base = start + len(separator)

    logger.debug(
        "Inserted element",
        kind=kind.value,
        offset=start,
        replaced=end - start,
        separator=len(separator),
    )
    return InsertionResult(
        content=new_content,
        caret_start=base + snippet.sel_start,
        caret_end=base + snippet.sel_end,
        separator=separator,
        snippet=snippet,
    )
