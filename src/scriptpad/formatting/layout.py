"""Column layout of the plain-text screenplay page.

Element type is encoded purely by how far a line is indented, so these
constants are shared by the converter and the live editor.
"""

from __future__ import annotations

import re

PAGE_WIDTH = 80
DIALOGUE_INDENT = 20
DIALOGUE_WIDTH = 35
CHARACTER_INDENT = 33
TRANSITION_INDENT = 51

SCENE_PREFIXES = ("INT.", "EXT.")

_LEADING_WHITESPACE = re.compile(r"^\s*")


def pad(n: int, text: str = "") -> str:
    """Prefix ``text`` with ``n`` spaces."""
    return " " * n + text


def center80(text: str) -> str:
    """Left-pad ``text`` so it sits centred on an 80-column page."""
    return pad(max(0, (PAGE_WIDTH - len(text)) // 2), text)


def leading_whitespace(line: str) -> int:
    """Length of the leading whitespace run, tabs included."""
    match = _LEADING_WHITESPACE.match(line)
    return match.end() if match else 0


def leading_spaces(line: str) -> int:
    """Length of the leading run of literal space characters."""
    return len(line) - len(line.lstrip(" "))
