"""Tests for text wrapping."""

import pytest

from tablewriter.width import display_width
from tablewriter.wrap import CONTINUATION_MARKER, split_lines, wrap_text

RED = "\x1b[31m"
RESET = "\x1b[0m"


class TestWrapText:
    """Tests for wrap_text."""

    def test_short_text_is_one_line(self) -> None:
        assert wrap_text("The Good", 30) == ["The Good"]

    def test_greedy_fill(self) -> None:
        text = "A multiline\nstring with some lines being really long."
        assert wrap_text(text, 30) == [
            "A multiline string with some",
            "lines being really long.",
        ]

    def test_exact_fit(self) -> None:
        """A token that exactly fills the remaining space stays on the line."""
        assert wrap_text("ab cd", 5) == ["ab cd"]
        assert wrap_text("ab cde", 5) == ["ab", "cde"]

    def test_empty_input(self) -> None:
        assert wrap_text("", 10) == [""]

    def test_whitespace_only_input(self) -> None:
        assert wrap_text("   \n  ", 10) == [""]

    def test_collapses_whitespace(self) -> None:
        assert wrap_text("  Some   Data  ", 30) == ["Some Data"]

    def test_long_token_is_hard_broken(self) -> None:
        assert wrap_text("abcdefghij", 4) == ["abc-", "def-", "ghij"]

    def test_hard_break_tail_joins_next_token(self) -> None:
        assert wrap_text("abcdefg hi", 5) == ["abcd-", "efg", "hi"]
        assert wrap_text("abcdef g", 5) == ["abcd-", "ef g"]

    def test_limit_one_has_no_marker(self) -> None:
        assert wrap_text("abc", 1) == ["a", "b", "c"]

    def test_limit_below_one_is_treated_as_one(self) -> None:
        assert wrap_text("ab", 0) == ["a", "b"]

    def test_no_text_is_dropped(self) -> None:
        text = "supercalifragilisticexpialidocious is long"
        lines = wrap_text(text, 7)
        rejoined = "".join(
            line[: -len(CONTINUATION_MARKER)] if line.endswith(CONTINUATION_MARKER) else line + " "
            for line in lines
        )
        assert rejoined.split() == text.split()

    def test_escape_sequences_are_not_split(self) -> None:
        lines = wrap_text(f"{RED}abcdefgh{RESET}", 4)
        assert lines == [f"{RED}abc-", "def-", f"gh{RESET}"]

    def test_colored_words_measure_visible_width(self) -> None:
        assert wrap_text(f"{RED}ab{RESET} cd", 5) == [f"{RED}ab{RESET} cd"]

    def test_wide_glyph_wider_than_limit_is_kept(self) -> None:
        """A glyph wider than the budget is emitted alone rather than lost."""
        assert wrap_text("你好", 1) == ["你", "好"]

    def test_wide_glyph_drops_marker_when_it_cannot_fit(self) -> None:
        assert wrap_text("中文字", 2) == ["中", "文", "字"]

    def test_wide_glyph_keeps_marker_when_it_fits(self) -> None:
        assert wrap_text("中文字", 3) == ["中-", "文-", "字"]

    @pytest.mark.parametrize("limit", [1, 2, 3, 5, 8, 13, 30])
    def test_lines_fit_limit(self, limit: int) -> None:
        text = (
            "Learn East has computers with adapted keyboards with enlarged print etc "
            "https://example.com/a/very/long/path/that/cannot/break"
        )
        for line in wrap_text(text, limit):
            assert display_width(line) <= limit

    @pytest.mark.parametrize("limit", [1, 2, 3, 4, 7])
    def test_wide_glyph_lines_fit_limit(self, limit: int) -> None:
        """Only a line holding one glyph wider than the limit may overflow it."""
        for line in wrap_text("中文字 漢字テキスト a中b文c", limit):
            assert display_width(line) <= limit or len(line) == 1

    def test_deterministic(self) -> None:
        text = "the way across, he splits the keyboard in two"
        assert wrap_text(text, 12) == wrap_text(text, 12)


class TestSplitLines:
    """Tests for split_lines (wrapping disabled)."""

    def test_splits_on_newlines_only(self) -> None:
        text = "A multiline\nstring with some lines being really long."
        assert split_lines(text) == ["A multiline", "string with some lines being really long."]

    def test_no_newline(self) -> None:
        assert split_lines("one line") == ["one line"]

    def test_empty(self) -> None:
        assert split_lines("") == [""]
