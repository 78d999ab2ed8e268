"""Configuration for the proclang lexer."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class IdentifierProfile(Enum):
    """Character classes accepted in identifiers, keywords and numbers.

    UNICODE
        Any character for which ``str.isalpha()`` holds may start an
        identifier and any ``str.isalnum()`` character may continue one,
        plus ``_`` and ``$``.  Numbers are made of ``str.isdecimal()``
        digits.
    ASCII
        ``[A-Za-z_$][A-Za-z0-9_$]*``; numbers use ``0-9`` only.
    """

    UNICODE = "unicode"
    ASCII = "ascii"


@dataclass(frozen=True)
class LexerConfig:
    """Options for :class:`~proclang.lexer.lexer.Lexer`.

    Parameters
    ----------
    identifier_profile:
        Which characters form identifiers (default UNICODE).
    include_comments:
        Emit ``COMMENT`` tokens (default True).  When False comments are
        still scanned but dropped.
    recover:
        Emit ``ERROR`` tokens and keep scanning instead of raising
        ``LexError`` (default False).
    """

    identifier_profile: IdentifierProfile = IdentifierProfile.UNICODE
    include_comments: bool = True
    recover: bool = False


DEFAULT_CONFIG = LexerConfig()
