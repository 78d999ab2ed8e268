"""Character cursor used by the proclang lexer."""
from __future__ import annotations

from typing import Final

SENTINEL: Final[str] = "\0"


class CharCursor:
    """Single-character traversal over an immutable source string.

    ``index`` is always the position of ``current`` within ``source``,
    except at end of input where ``index == len(source)`` and
    ``current`` is :data:`SENTINEL`.  End of input is decided by the
    index alone, so a NUL character in the source is ordinary input.
    """

    __slots__ = ("_source", "_index", "_current")

    def __init__(self, source: str) -> None:
        self._source: str = source
        self._index: int = 0
        self._current: str = source[0] if source else SENTINEL

    @property
    def source(self) -> str:
        return self._source

    @property
    def index(self) -> int:
        return self._index

    @property
    def current(self) -> str:
        return self._current

    def at_end(self) -> bool:
        """Return True once every character has been consumed."""
        return self._index == len(self._source)

    def advance(self) -> None:
        """Move to the next character; a no-op at end of input."""
        if self.at_end():
            return
        self._index += 1
        if self._index < len(self._source):
            self._current = self._source[self._index]
        else:
            self._current = SENTINEL

    def peek_next(self) -> str | None:
        """Return the character after ``current`` without consuming it."""
        idx = self._index + 1
        return self._source[idx] if idx < len(self._source) else None

    def slice(self, start: int) -> str:
        """Return the source text from ``start`` up to the cursor."""
        return self._source[start : self._index]
