"""Tests for block/text conversion."""

import pytest

from scriptpad.formatting.converter import (
    blocks_to_text,
    classify_line,
    text_to_blocks,
)
from scriptpad.formatting.layout import center80, leading_spaces, leading_whitespace, pad
from scriptpad.models.blocks import (
    Action,
    Character,
    Dialogue,
    SceneHeading,
    Transition,
)

SCENE_BLOCKS = [
    SceneHeading(text="INT. DINER - NIGHT"),
    Action(text="Rain streaks the windows."),
    Character(text="MARGE"),
    Dialogue(text="You're late."),
    Transition(text="CUT TO:"),
]


class TestLayoutHelpers:
    """Test the column helpers."""

    def test_pad(self):
        """Test padding with spaces."""
        assert pad(3, "x") == "   x"
        assert pad(0) == ""

    def test_center80_character_placeholder_lands_on_character_column(self):
        """Test that centring the placeholder cue gives the character indent."""
        line = center80("CHARACTER NAME")
        assert leading_spaces(line) == 33

    def test_center80_never_negative(self):
        """Test that text wider than the page is not padded."""
        text = "X" * 90
        assert center80(text) == text

    def test_leading_whitespace_counts_tabs(self):
        """Test that tabs count towards the whitespace run."""
        assert leading_whitespace("\t\t  x") == 4
        assert leading_spaces("\t\t  x") == 0
        assert leading_whitespace("") == 0


class TestBlocksToText:
    """Test rendering blocks as text."""

    def test_render_scene(self, sample_text):
        """Test rendering every block type."""
        assert blocks_to_text(SCENE_BLOCKS) == sample_text

    def test_empty_sequence(self):
        """Test that no blocks render as empty text."""
        assert blocks_to_text([]) == ""

    def test_first_action_has_no_gap(self):
        """Test that a leading action is not preceded by a blank line."""
        assert blocks_to_text([Action(text="a"), Action(text="b")]) == "a\n\nb"

    def test_action_after_dialogue_gets_gap(self):
        """Test the blank line between dialogue and following action."""
        text = blocks_to_text([Dialogue(text="Hi."), Action(text="She sits.")])
        assert text == " " * 20 + "Hi.\n\nShe sits."

    def test_indents(self):
        """Test the fixed column of each indented block."""
        lines = blocks_to_text(
            [Character(text="BOB"), Dialogue(text="Yes."), Transition(text="FADE OUT.")]
        ).split("\n")
        assert [leading_spaces(line) for line in lines] == [33, 20, 51]


class TestTextToBlocks:
    """Test parsing text back into blocks."""

    def test_parse_scene(self, sample_text):
        """Test parsing every block type."""
        assert text_to_blocks(sample_text) == SCENE_BLOCKS

    def test_crlf_line_endings(self):
        """Test that Windows line endings are accepted."""
        blocks = text_to_blocks("INT. BARN - DAY\r\n\r\nHay everywhere.")
        assert blocks == [
            SceneHeading(text="INT. BARN - DAY"),
            Action(text="Hay everywhere."),
        ]

    def test_empty_text(self):
        """Test that empty text yields no blocks."""
        assert text_to_blocks("") == []
        assert text_to_blocks("\n\n\n") == []

    def test_whitespace_only_line_is_kept(self):
        """Test that only truly empty lines are dropped."""
        assert text_to_blocks("a\n   \nb") == [
            Action(text="a"),
            Action(text=""),
            Action(text="b"),
        ]

    def test_empty_action_does_not_survive_round_trip(self):
        """Test that an empty action renders as blank lines only."""
        blocks = text_to_blocks("INT. HOUSE\n   \nhello")
        assert blocks == [
            SceneHeading(text="INT. HOUSE"),
            Action(text=""),
            Action(text="hello"),
        ]
        assert blocks_to_text(blocks) == "INT. HOUSE\n\n\n\nhello"
        assert text_to_blocks(blocks_to_text(blocks)) == [
            SceneHeading(text="INT. HOUSE"),
            Action(text="hello"),
        ]

    def test_ext_heading(self):
        """Test exterior scene headings."""
        assert text_to_blocks("EXT. PIER - DAWN") == [SceneHeading(text="EXT. PIER - DAWN")]

    def test_indented_heading_is_action(self):
        """Test that the heading prefix must start the line."""
        assert text_to_blocks("  INT. HOUSE - DAY") == [Action(text="INT. HOUSE - DAY")]


class TestClassificationPrecedence:
    """Test the ordered indentation thresholds."""

    @pytest.mark.parametrize(
        ("indent", "expected"),
        [
            (0, Action),
            (19, Action),
            (20, Dialogue),
            (25, Dialogue),
            (32, Dialogue),
            (33, Character),
            (50, Character),
            (51, Transition),
            (70, Transition),
        ],
    )
    def test_threshold_boundaries(self, indent, expected):
        """Test classification at and around each threshold."""
        block = classify_line(pad(indent, "words"))
        assert isinstance(block, expected)
        assert block.text == "words"

    def test_transition_wins_over_heading_shape(self):
        """Test that a 51-column line is a transition whatever its text."""
        assert classify_line(pad(51, "INT. HOUSE - DAY")) == Transition(
            text="INT. HOUSE - DAY"
        )

    def test_character_wins_over_dialogue(self):
        """Test that a 33-column line is never read as dialogue."""
        assert classify_line(pad(33, "EXT. ROOF")) == Character(text="EXT. ROOF")

    def test_tab_indent_counts(self):
        """Test that any whitespace run is measured, not only spaces."""
        assert classify_line("\t" * 51 + "CUT TO:") == Transition(text="CUT TO:")

    @pytest.mark.parametrize("length", range(1, 61))
    def test_rendered_character_reads_back_as_character(self, length):
        """Test that character cues of any name length survive the trip."""
        name = ("ABCDEFGHIJ" * 6)[:length]
        assert text_to_blocks(blocks_to_text([Character(text=name)])) == [
            Character(text=name)
        ]
