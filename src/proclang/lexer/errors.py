"""Lex error types for the proclang lexer.

Every error carries the raw 0-based character index at which it was
detected so that callers can report precise diagnostics.  Errors abort
the current scan; see ``LexerConfig.recover`` for reporting them as
``ERROR`` tokens instead.
"""
from __future__ import annotations


class LexError(Exception):
    """Base class for all lexing failures.

    Parameters
    ----------
    message:
        Human-readable description of the problem.
    position:
        0-based character index in the source where the error occurred.
    """

    def __init__(self, message: str, position: int) -> None:
        super().__init__(f"LexError at {position}: {message}")
        self.lex_message = message
        self.position = position


class UnknownCharacterError(LexError):
    """The current character starts no recognized token category."""

    def __init__(self, character: str, position: int) -> None:
        super().__init__(f"Unexpected character {character!r}", position)
        self.character = character


class UnterminatedStringError(LexError):
    """End of input was reached inside a string literal.

    ``position`` is where the literal starts.
    """

    def __init__(self, position: int) -> None:
        super().__init__("Unterminated string literal", position)


class InvalidEscapeSequenceError(LexError):
    """A quoted string contains an unsupported ``\\`` escape code."""

    def __init__(self, character: str, position: int) -> None:
        super().__init__(f"Invalid escape sequence \\{character}", position)
        self.character = character
