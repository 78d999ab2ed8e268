"""Token definitions for the proclang scripting language.

Defines the token vocabulary produced by the proclang lexer.  Every
scanned token is a ``Token`` dataclass carrying its ``TokenKind``, its
text and the raw character index where it starts in the source.

Token kinds are deliberately coarse: the lexer classifies text into
numbers, comments, strings, symbols, operators, identifiers and
keywords, and leaves finer distinctions (which operator, which
keyword) to the parser, which inspects ``Token.text``.
"""
from __future__ import annotations

import functools
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Final


class TokenKind(Enum):
    """Closed set of proclang token kinds."""

    NUMBER = auto()
    COMMENT = auto()
    STRING = auto()
    SYMBOL = auto()
    OPERATOR = auto()
    IDENTIFIER = auto()
    KEYWORD = auto()
    END_OF_INPUT = auto()
    ERROR = auto()


# ---------------------------------------------------------------------------
# Vocabulary tables
# ---------------------------------------------------------------------------

KEYWORDS: Final[frozenset[str]] = frozenset({
    "proc",
    "event",
    "fn",
    "if",
    "elif",
    "else",
    "while",
    "forever",
    "for",
    "in",
    "break",
    "private",
})

# Two-character tokens always win over their one-character prefix.
TWO_CHAR_TOKENS: Final[dict[str, TokenKind]] = {
    "==": TokenKind.OPERATOR,
    "!=": TokenKind.OPERATOR,
    "<=": TokenKind.OPERATOR,
    ">=": TokenKind.OPERATOR,
    "||": TokenKind.OPERATOR,
    "&&": TokenKind.OPERATOR,
    "++": TokenKind.OPERATOR,
    "--": TokenKind.OPERATOR,
    "<<": TokenKind.OPERATOR,
    ">>": TokenKind.OPERATOR,
    "//": TokenKind.OPERATOR,
    "**": TokenKind.OPERATOR,
    "+=": TokenKind.OPERATOR,
    "-=": TokenKind.OPERATOR,
    "/=": TokenKind.OPERATOR,
    "*=": TokenKind.OPERATOR,
    "@{": TokenKind.SYMBOL,
    "${": TokenKind.SYMBOL,
}

SINGLE_CHAR_OPERATORS: Final[frozenset[str]] = frozenset("+-/*%<>^!~")

SINGLE_CHAR_SYMBOLS: Final[frozenset[str]] = frozenset(";:{}()[].,=")

WHITESPACE: Final[frozenset[str]] = frozenset(" \t\r\n")

QUOTES: Final[frozenset[str]] = frozenset("'\"")


@functools.total_ordering
@dataclass(frozen=True, slots=True)
class Token:
    """A single scanned token.

    Parameters
    ----------
    kind:
        The ``TokenKind`` variant for this token.
    text:
        The matched source text.  For strings this is the resolved
        content without quotes; for comments it is the body after ``#``.
    offset:
        0-based character index of the token's first character.  Not
        part of equality, hashing or ordering.

    Tokens order by ``(kind, text)``, kinds in declaration order.
    """

    kind: TokenKind
    text: str
    offset: int = field(default=0, compare=False)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return (self.kind.value, self.text) < (other.kind.value, other.text)

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.text!r}, @{self.offset})"

    @property
    def is_end(self) -> bool:
        """Return True for the ``END_OF_INPUT`` token."""
        return self.kind is TokenKind.END_OF_INPUT
