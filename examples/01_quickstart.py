#!/usr/bin/env python3
"""Example: Quickstart — proclang

Minimal working example: tokenize a proclang program, pull tokens
lazily, and recover from malformed input.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install proclang
"""
from __future__ import annotations

import proclang

SOURCE = '''
# move the sprite until it reaches the edge
event on_click {
    x = 0
    while x < 480 {
        x += 2.5
        say("at " + x)
    }
}
'''


def main() -> None:
    print(f"proclang version: {proclang.__version__}")

    # Step 1: Tokenize the whole program
    tokens = proclang.tokenize(SOURCE)
    keywords = [t.text for t in tokens if t.kind is proclang.TokenKind.KEYWORD]
    print(f"Scanned {len(tokens)} tokens; keywords: {keywords}")

    # Step 2: Pull tokens lazily
    for token in proclang.lex("if score == 10"):
        print(f"  {token.kind.name:<10} {token.text!r} @{token.offset}")

    # Step 3: Handle a lex error
    try:
        proclang.tokenize('say("bad \\q escape")')
    except proclang.LexError as exc:
        print(f"Lex error: {exc}")

    # Step 4: Keep going past errors
    lexer = proclang.lex("a ? b", proclang.LexerConfig(recover=True))
    print(f"Recovered tokens: {lexer.tokenize()}; errors: {len(lexer.errors)}")


if __name__ == "__main__":
    main()
