"""Caret geometry: which line holds the caret and where to scroll."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Viewport:
    """Geometry of the surface rendering the scene buffer.

    Attributes:
        line_height: Height of one rendered line
        client_height: Visible height of the surface
        scroll_height: Full content height; derived from the line count when
            not given
    """

    line_height: int = 20
    client_height: int = 500
    scroll_height: int | None = None

    def content_height(self, text: str) -> int:
        if self.scroll_height is not None:
            return self.scroll_height
        return max(self.client_height, (text.count("\n") + 1) * self.line_height)

    def max_scroll(self, text: str) -> int:
        return max(0, self.content_height(text) - self.client_height)


def caret_line(text: str, offset: int) -> int:
    """Zero-based index of the line containing ``offset``."""
    return text.count("\n", 0, max(0, offset))


def center_caret(text: str, offset: int, viewport: Viewport) -> float:
    """Scroll position that vertically centres the caret's line.

    Clamped to ``[0, max_scroll]``.
    """
    line = caret_line(text, offset)
    desired = (
        line * viewport.line_height
        - viewport.client_height / 2
        + viewport.line_height / 2
    )
    return max(0.0, min(desired, float(viewport.max_scroll(text))))
