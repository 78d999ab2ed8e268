"""Token serialization for proclang.

Converts token streams to and from plain dict/list structures that map
naturally to JSON and YAML.  The CLI uses this to dump tokens; other
tools can use it to cache or exchange lexer output.

Usage
-----
::

    from proclang.grammar.serializer import TokenSerializer

    serializer = TokenSerializer()
    json_text = serializer.to_json(tokens)
    tokens2 = serializer.from_json(json_text)
    assert tokens == tokens2
"""
from __future__ import annotations

import json
from collections.abc import Iterable

import yaml

from proclang.grammar.tokens import Token, TokenKind


class TokenSerializer:
    """Serialize and deserialize ``Token`` sequences."""

    # ------------------------------------------------------------------
    # Dict helpers
    # ------------------------------------------------------------------

    def to_dict(self, token: Token) -> dict[str, object]:
        """Convert a single ``Token`` into a plain dict."""
        return {"kind": token.kind.name, "text": token.text, "offset": token.offset}

    def from_dict(self, data: dict[str, object]) -> Token:
        """Rebuild a ``Token`` from a dict produced by :meth:`to_dict`.

        Raises
        ------
        ValueError
            If ``kind`` does not name a ``TokenKind`` member.
        """
        kind_name = str(data["kind"])
        try:
            kind = TokenKind[kind_name]
        except KeyError:
            raise ValueError(f"Unknown token kind {kind_name!r}") from None
        return Token(kind=kind, text=str(data["text"]), offset=int(data.get("offset", 0)))  # type: ignore[arg-type]

    def to_list(self, tokens: Iterable[Token]) -> list[dict[str, object]]:
        return [self.to_dict(token) for token in tokens]

    def from_list(self, data: list[dict[str, object]]) -> list[Token]:
        return [self.from_dict(item) for item in data]

    # ------------------------------------------------------------------
    # JSON helpers
    # ------------------------------------------------------------------

    def to_json(self, tokens: Iterable[Token], indent: int = 2) -> str:
        """Serialize tokens to a JSON array string."""
        return json.dumps(self.to_list(tokens), indent=indent, ensure_ascii=False)

    def from_json(self, text: str) -> list[Token]:
        """Deserialize tokens from a JSON array string."""
        data: list[dict[str, object]] = json.loads(text)
        return self.from_list(data)

    # ------------------------------------------------------------------
    # YAML helpers
    # ------------------------------------------------------------------

    def to_yaml(self, tokens: Iterable[Token]) -> str:
        """Serialize tokens to a YAML sequence."""
        return yaml.dump(self.to_list(tokens), default_flow_style=False, allow_unicode=True, sort_keys=False)

    def from_yaml(self, text: str) -> list[Token]:
        """Deserialize tokens from a YAML sequence."""
        data: list[dict[str, object]] = yaml.safe_load(text) or []
        return self.from_list(data)
