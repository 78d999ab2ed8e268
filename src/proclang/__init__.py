"""proclang — lexer for the proclang event/procedure scripting language.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import proclang

    tokens = proclang.tokenize("if x == 1")
    # [Token(KEYWORD, 'if', @0), Token(IDENTIFIER, 'x', @3),
    #  Token(OPERATOR, '==', @5), Token(NUMBER, '1', @8)]

    for token in proclang.lex(source):
        ...

    proclang.__version__
    '0.1.0'
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from proclang.grammar.serializer import TokenSerializer
from proclang.grammar.tokens import Token, TokenKind
from proclang.lexer.config import IdentifierProfile, LexerConfig
from proclang.lexer.errors import LexError

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from proclang.lexer.lexer import Lexer


def tokenize(source: str, config: LexerConfig | None = None) -> list[Token]:
    """Tokenize a proclang source string into a list of tokens.

    Parameters
    ----------
    source:
        Complete proclang source text.
    config:
        Optional lexer configuration.

    Returns
    -------
    list[Token]
        Tokens in source order, without the ``END_OF_INPUT`` token.

    Raises
    ------
    proclang.LexError
        If the source contains invalid characters or literals.
    """
    from proclang.lexer.lexer import tokenize as _tokenize

    return _tokenize(source, config)


def lex(source: str, config: LexerConfig | None = None) -> "Lexer":
    """Return a lazy token iterator over ``source``.

    The iterator stops before ``END_OF_INPUT``.  Errors are raised when
    the offending token is reached, not up front.
    """
    from proclang.lexer.lexer import Lexer

    return Lexer(source, config)


__all__ = [
    "__version__",
    "IdentifierProfile",
    "LexError",
    "LexerConfig",
    "Token",
    "TokenKind",
    "TokenSerializer",
    "lex",
    "tokenize",
]
