"""Unit tests for proclang.lexer.cursor — CharCursor traversal."""
from __future__ import annotations

from proclang.lexer.cursor import SENTINEL, CharCursor


class TestCharCursor:
    def test_starts_on_first_character(self) -> None:
        cursor = CharCursor("ab")
        assert cursor.index == 0
        assert cursor.current == "a"
        assert not cursor.at_end()

    def test_empty_source_starts_at_end(self) -> None:
        cursor = CharCursor("")
        assert cursor.at_end()
        assert cursor.current == SENTINEL
        assert cursor.peek_next() is None

    def test_advance_moves_one_character(self) -> None:
        cursor = CharCursor("ab")
        cursor.advance()
        assert cursor.index == 1
        assert cursor.current == "b"

    def test_advance_past_last_character_pins_index(self) -> None:
        cursor = CharCursor("ab")
        cursor.advance()
        cursor.advance()
        assert cursor.at_end()
        assert cursor.index == 2
        assert cursor.current == SENTINEL

    def test_advance_at_end_is_a_no_op(self) -> None:
        cursor = CharCursor("a")
        for _ in range(3):
            cursor.advance()
        assert cursor.index == 1
        assert cursor.current == SENTINEL

    def test_peek_next_does_not_consume(self) -> None:
        cursor = CharCursor("xy")
        assert cursor.peek_next() == "y"
        assert cursor.current == "x"
        assert cursor.index == 0

    def test_peek_next_on_last_character_is_none(self) -> None:
        cursor = CharCursor("xy")
        cursor.advance()
        assert cursor.peek_next() is None

    def test_non_ascii_characters_are_single_steps(self) -> None:
        cursor = CharCursor("é€x")
        cursor.advance()
        assert cursor.current == "€"
        cursor.advance()
        assert cursor.current == "x"

    def test_nul_in_source_is_not_end(self) -> None:
        cursor = CharCursor("\0a")
        assert cursor.current == SENTINEL
        assert not cursor.at_end()

    def test_slice_returns_consumed_text(self) -> None:
        cursor = CharCursor("hello world")
        for _ in range(5):
            cursor.advance()
        assert cursor.slice(0) == "hello"
        assert cursor.source == "hello world"
