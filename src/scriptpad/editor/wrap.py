"""Dialogue auto-wrap with caret offset tracking.

Every keystroke re-flows dialogue lines that have grown past the dialogue
column width. The pass reports where each input offset ends up so the caret
can follow the character it was next to, instead of being shifted by the
overall change in length.
"""

from __future__ import annotations

import re
from bisect import bisect_right
from dataclasses import dataclass, field

from scriptpad.formatting.layout import (
    DIALOGUE_INDENT,
    DIALOGUE_WIDTH,
    leading_spaces,
    pad,
)

_WORD = re.compile(r"[^ ]+")

Span = tuple[int, int]


def _wrap_spans(raw: str, width: int) -> list[Span]:
    """Greedy word packing of ``raw`` into ``(start, end)`` slices.

    Each slice runs from the first to the last word of a wrapped line, so the
    spaces at a break belong to no line. A word wider than ``width`` gets a
    line of its own.
    """
    spans: list[Span] = []
    start = 0
    end: int | None = None
    for match in _WORD.finditer(raw):
        if end is not None and match.end() - start > width:
            spans.append((start, end))
            start = match.start()
        end = match.end()
    if end is not None:
        spans.append((start, end))
    return spans


def wrap_text(raw: str, width: int = DIALOGUE_WIDTH) -> list[str]:
    """Hard-wrap ``raw`` to ``width`` columns, breaking only at spaces."""
    return [raw[start:end] for start, end in _wrap_spans(raw, width)]


def is_dialogue_line(line: str) -> bool:
    """Whether ``line`` is indented at least to the dialogue column.

    Character cues and transitions clear the dialogue column too, so an
    over-long cue or transition is re-flowed like dialogue. Any indent past
    column 20 stays in the body and is kept on the first wrapped line.
    """
    return leading_spaces(line) >= DIALOGUE_INDENT


@dataclass(frozen=True)
class _WrappedLine:
    """A dialogue line the wrap pass replaced."""

    source_start: int
    source_end: int
    target_start: int
    target_end: int
    spans: tuple[Span, ...]

    def map_offset(self, offset: int) -> int:
        rel = offset - self.source_start
        if rel <= DIALOGUE_INDENT:
            return self.target_start + rel
        body_pos = rel - DIALOGUE_INDENT
        line_start = self.target_start + DIALOGUE_INDENT
        previous_end = line_start
        for start, end in self.spans:
            if body_pos < start:
                # inside the spaces consumed by a break
                return previous_end
            if body_pos <= end:
                return line_start + body_pos - start
            previous_end = line_start + end - start
            line_start = previous_end + 1 + DIALOGUE_INDENT
        # trailing whitespace trimmed from the body
        return previous_end


@dataclass(frozen=True)
class WrapResult:
    """Outcome of one dialogue wrap pass.

    Attributes:
        source: Text before wrapping
        text: Text after wrapping
    """

    source: str
    text: str
    _lines: tuple[_WrappedLine, ...] = field(default=(), repr=False)

    @property
    def changed(self) -> bool:
        return self.text != self.source

    @property
    def delta(self) -> int:
        """Change in buffer length introduced by wrapping."""
        return len(self.text) - len(self.source)

    def map_offset(self, offset: int) -> int:
        """Translate an offset in ``source`` to the matching offset in ``text``.

        Line breaks inserted before ``offset`` push it forward, changes after
        it leave it alone. Offsets are clamped to the source bounds first.
        """
        offset = max(0, min(offset, len(self.source)))
        index = bisect_right([line.source_start for line in self._lines], offset)
        if index == 0:
            return offset
        line = self._lines[index - 1]
        if offset <= line.source_end:
            return line.map_offset(offset)
        return offset + (line.target_end - line.source_end)


def auto_wrap_dialogue(text: str, width: int = DIALOGUE_WIDTH) -> WrapResult:
    """Re-flow over-long dialogue lines in ``text``.

    A dialogue line whose de-indented, right-trimmed body is longer than
    ``width`` is replaced by the wrapped body, one dialogue-indented line per
    wrapped segment. All other lines pass through unchanged.

    Args:
        text: Full scene buffer
        width: Maximum body width of a dialogue line

    Returns:
        WrapResult with the new buffer and its offset mapping
    """
    output: list[str] = []
    wrapped: list[_WrappedLine] = []
    source_pos = 0
    target_pos = 0
    for line in text.split("\n"):
        rendered = line
        if is_dialogue_line(line):
            body = line[DIALOGUE_INDENT:].rstrip()
            if len(body) > width:
                spans = _wrap_spans(body, width)
                rendered = "\n".join(
                    pad(DIALOGUE_INDENT, body[start:end]) for start, end in spans
                )
                wrapped.append(
                    _WrappedLine(
                        source_start=source_pos,
                        source_end=source_pos + len(line),
                        target_start=target_pos,
                        target_end=target_pos + len(rendered),
                        spans=tuple(spans),
                    )
                )
        output.append(rendered)
        source_pos += len(line) + 1
        target_pos += len(rendered) + 1

    if not wrapped:
        return WrapResult(source=text, text=text)
    return WrapResult(source=text, text="\n".join(output), _lines=tuple(wrapped))
