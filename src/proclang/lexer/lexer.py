"""proclang Lexer: converts raw source text into a stream of tokens.

The lexer is a pull-based, single-pass character scanner.  Each call
to :meth:`Lexer.next_token` skips leading whitespace and produces
exactly one token, advancing the cursor by the characters it consumed.
The lexer is also an iterator that stops *before* the
``END_OF_INPUT`` token.

Token categories are tried in a fixed order, the first match winning:

    1. two-character operators/symbols (``==``, ``+=``, ``${`` ...)
    2. one-character operators (``+ - / * % < > ^ ! ~``)
    3. one-character symbols (``; : { } ( ) [ ] . , =``)
    4. ``#`` comments, running to the end of the line
    5. raw strings ``r'...'`` / ``r"..."`` (no escape processing)
    6. quoted strings ``'...'`` / ``"..."`` with ``\\\\ \\' \\" \\n \\r \\t``
    7. identifiers and keywords
    8. numbers: digits with at most one decimal point (``0-9`` under the
       ASCII profile, any ``str.isdecimal()`` digit otherwise)

Because two-character tokens are checked first, longest match is
enforced by ordering alone; there is no backtracking.
"""
from __future__ import annotations

import logging
import string
from typing import Final

from proclang.grammar.tokens import (
    KEYWORDS,
    QUOTES,
    SINGLE_CHAR_OPERATORS,
    SINGLE_CHAR_SYMBOLS,
    TWO_CHAR_TOKENS,
    WHITESPACE,
    Token,
    TokenKind,
)
from proclang.lexer.config import DEFAULT_CONFIG, IdentifierProfile, LexerConfig
from proclang.lexer.cursor import CharCursor
from proclang.lexer.errors import (
    InvalidEscapeSequenceError,
    LexError,
    UnknownCharacterError,
    UnterminatedStringError,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_DIGITS: Final[frozenset[str]] = frozenset(string.digits)
_IDENT_EXTRA: Final[frozenset[str]] = frozenset("_$")
_ASCII_IDENT_START: Final[frozenset[str]] = frozenset(string.ascii_letters) | _IDENT_EXTRA
_ASCII_IDENT_CONT: Final[frozenset[str]] = _ASCII_IDENT_START | _DIGITS

_ESCAPE_MAP: Final[dict[str, str]] = {
    "\\": "\\",
    "'": "'",
    '"': '"',
    "n": "\n",
    "r": "\r",
    "t": "\t",
}


class Lexer:
    """Pull-based proclang lexer.

    Parameters
    ----------
    source:
        The complete source text to tokenize.  It is only read, so the
        same string may back any number of lexers.
    config:
        Optional :class:`LexerConfig`; defaults are used when omitted.

    A lexer holds mutable scan position and is not safe to share
    between threads.
    """

    __slots__ = ("_cursor", "_config", "errors")

    def __init__(self, source: str, config: LexerConfig | None = None) -> None:
        self._cursor = CharCursor(source)
        self._config = config or DEFAULT_CONFIG
        self.errors: list[LexError] = []

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def position(self) -> int:
        """Current 0-based character index of the cursor."""
        return self._cursor.index

    def next_token(self) -> Token:
        """Scan and return the next token.

        Returns ``END_OF_INPUT`` with empty text once the source is
        exhausted, and keeps returning it on further calls.

        Raises
        ------
        LexError
            On malformed input, unless the lexer runs in recovery mode.
        """
        while True:
            self._skip_whitespace()
            start = self._cursor.index
            if self._cursor.at_end():
                return Token(TokenKind.END_OF_INPUT, "", start)
            try:
                token = self._scan_token(start)
            except LexError as exc:
                if not self._config.recover:
                    raise
                token = self._recover(exc, start)
            if token.kind is TokenKind.COMMENT and not self._config.include_comments:
                continue
            return token

    def tokenize(self) -> list[Token]:
        """Scan the remaining source and return its tokens.

        ``END_OF_INPUT`` is not included in the list.
        """
        return list(self)

    def __iter__(self) -> Lexer:
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token.is_end:
            raise StopIteration
        return token

    # ------------------------------------------------------------------
    # Internal scanner
    # ------------------------------------------------------------------

    def _skip_whitespace(self) -> None:
        cursor = self._cursor
        while not cursor.at_end() and cursor.current in WHITESPACE:
            cursor.advance()

    def _scan_token(self, start: int) -> Token:
        """Dispatch on the current character to one token scanner."""
        cursor = self._cursor
        ch = cursor.current
        nxt = cursor.peek_next()

        if nxt is not None:
            pair = ch + nxt
            kind = TWO_CHAR_TOKENS.get(pair)
            if kind is not None:
                cursor.advance()
                cursor.advance()
                return Token(kind, pair, start)

        if ch in SINGLE_CHAR_OPERATORS:
            cursor.advance()
            return Token(TokenKind.OPERATOR, ch, start)
        if ch in SINGLE_CHAR_SYMBOLS:
            cursor.advance()
            return Token(TokenKind.SYMBOL, ch, start)
        if ch == "#":
            return self._scan_comment(start)
        if ch == "r" and nxt in QUOTES:
            cursor.advance()  # r prefix
            return self._scan_string(start, raw=True)
        if ch in QUOTES:
            return self._scan_string(start, raw=False)
        if self._is_ident_start(ch):
            return self._scan_ident_or_keyword(start)
        if self._is_digit(ch):
            return self._scan_number(start)

        raise UnknownCharacterError(ch, start)

    # ------------------------------------------------------------------
    # Token-specific scanners
    # ------------------------------------------------------------------

    def _scan_comment(self, start: int) -> Token:
        """Consume a ``#`` comment up to, not including, the newline."""
        cursor = self._cursor
        cursor.advance()  # '#'
        body_start = cursor.index
        while not cursor.at_end() and cursor.current != "\n":
            cursor.advance()
        return Token(TokenKind.COMMENT, cursor.slice(body_start), start)

    def _scan_string(self, start: int, raw: bool) -> Token:
        """Consume a string literal whose opening quote is current.

        Raw strings take every character verbatim up to the next
        matching quote.  Quoted strings resolve backslash escapes.
        """
        cursor = self._cursor
        terminator = cursor.current
        escaped = False
        buf: list[str] = []
        while True:
            cursor.advance()
            if cursor.at_end():
                raise UnterminatedStringError(start)
            ch = cursor.current
            if raw:
                if ch == terminator:
                    break
                buf.append(ch)
            elif escaped:
                resolved = _ESCAPE_MAP.get(ch)
                if resolved is None:
                    raise InvalidEscapeSequenceError(ch, cursor.index)
                buf.append(resolved)
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == terminator:
                break
            else:
                buf.append(ch)
        cursor.advance()  # closing quote
        return Token(TokenKind.STRING, "".join(buf), start)

    def _scan_ident_or_keyword(self, start: int) -> Token:
        cursor = self._cursor
        while not cursor.at_end() and self._is_ident_cont(cursor.current):
            cursor.advance()
        word = cursor.slice(start)
        kind = TokenKind.KEYWORD if word in KEYWORDS else TokenKind.IDENTIFIER
        return Token(kind, word, start)

    def _scan_number(self, start: int) -> Token:
        """Consume digits and at most one decimal point.

        A second point ends the literal, so ``1.2.3`` scans as ``1.2``
        and leaves ``.3`` for the following tokens.
        """
        cursor = self._cursor
        seen_point = False
        while not cursor.at_end():
            ch = cursor.current
            if ch == ".":
                if seen_point:
                    break
                seen_point = True
            elif not self._is_digit(ch):
                break
            cursor.advance()
        return Token(TokenKind.NUMBER, cursor.slice(start), start)

    def _is_digit(self, ch: str) -> bool:
        if self._config.identifier_profile is IdentifierProfile.ASCII:
            return ch in _DIGITS
        return ch.isdecimal()

    def _is_ident_start(self, ch: str) -> bool:
        if self._config.identifier_profile is IdentifierProfile.ASCII:
            return ch in _ASCII_IDENT_START
        return ch.isalpha() or ch in _IDENT_EXTRA

    def _is_ident_cont(self, ch: str) -> bool:
        if self._config.identifier_profile is IdentifierProfile.ASCII:
            return ch in _ASCII_IDENT_CONT
        return ch.isalnum() or ch in _IDENT_EXTRA

    # ------------------------------------------------------------------
    # Error recovery
    # ------------------------------------------------------------------

    def _recover(self, exc: LexError, start: int) -> Token:
        """Record ``exc`` and resynchronize after the offending span.

        Returns an ``ERROR`` token holding the raw source text that was
        skipped.
        """
        self.errors.append(exc)
        logger.debug("Recovering from %s", exc)
        cursor = self._cursor
        if isinstance(exc, UnknownCharacterError):
            cursor.advance()
        elif isinstance(exc, InvalidEscapeSequenceError):
            self._skip_rest_of_string(cursor.source[start])
        # An unterminated string has already run to end of input.
        return Token(TokenKind.ERROR, cursor.slice(start), start)

    def _skip_rest_of_string(self, terminator: str) -> None:
        """Skip past the closing quote of a quoted string, or to the end."""
        cursor = self._cursor
        cursor.advance()  # the bad escape code
        while not cursor.at_end():
            ch = cursor.current
            cursor.advance()
            if ch == "\\":
                cursor.advance()
            elif ch == terminator:
                return


# ---------------------------------------------------------------------------
# Module-level convenience function
# ---------------------------------------------------------------------------


def tokenize(source: str, config: LexerConfig | None = None) -> list[Token]:
    """Tokenize a proclang source string and return its tokens.

    Parameters
    ----------
    source:
        proclang source text.
    config:
        Optional lexer configuration.

    Returns
    -------
    list[Token]
        All tokens in source order; ``END_OF_INPUT`` is not included.

    Raises
    ------
    LexError
        If the source contains invalid characters or literals and
        ``config.recover`` is not set.

    Example
    -------
    ::

        from proclang.lexer import tokenize
        tokens = tokenize("foo = 1 + 2")
    """
    tokens = Lexer(source, config).tokenize()
    logger.debug("Tokenized %d characters into %d tokens", len(source), len(tokens))
    return tokens
