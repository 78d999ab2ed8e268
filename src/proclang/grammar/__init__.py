"""proclang grammar: token vocabulary and token serialization."""
from __future__ import annotations

from proclang.grammar.serializer import TokenSerializer
from proclang.grammar.tokens import KEYWORDS, Token, TokenKind

__all__ = ["KEYWORDS", "Token", "TokenKind", "TokenSerializer"]
