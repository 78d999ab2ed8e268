"""proclang Lexer module.

Exports the ``Lexer`` class, the ``tokenize`` convenience function,
the lexer configuration and the ``LexError`` hierarchy.
"""
from __future__ import annotations

from proclang.lexer.config import IdentifierProfile, LexerConfig
from proclang.lexer.cursor import SENTINEL, CharCursor
from proclang.lexer.errors import (
    InvalidEscapeSequenceError,
    LexError,
    UnknownCharacterError,
    UnterminatedStringError,
)
from proclang.lexer.lexer import Lexer, tokenize

__all__ = [
    "CharCursor",
    "IdentifierProfile",
    "InvalidEscapeSequenceError",
    "LexError",
    "Lexer",
    "LexerConfig",
    "SENTINEL",
    "UnknownCharacterError",
    "UnterminatedStringError",
    "tokenize",
]
