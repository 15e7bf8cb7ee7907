"""Tokenizer for S-expression source text."""

from typing import Iterable

DEFAULT_SYMBOLS = "()"

# str.isspace() also accepts these information separators; they are not
# Unicode White_Space and stay part of a token.
NON_WHITESPACE = frozenset("\x1c\x1d\x1e\x1f")


class Tokenizer:
    """Splits text on whitespace and on single-character delimiters.

    Delimiters are emitted verbatim as one-character tokens; every other
    token is folded to lowercase.
    """

    def __init__(self, symbols: Iterable[str] = DEFAULT_SYMBOLS):
        self.symbols = frozenset(symbols)

    def tokenize(self, text: str) -> list[str]:
        tokens: list[str] = []
        pending = ""
        for ch in text:
            if ch.isspace() and ch not in NON_WHITESPACE:
                if pending:
                    tokens.append(pending.lower())
                    pending = ""
                continue
            if ch in self.symbols:
                if pending:
                    tokens.append(pending.lower())
                    pending = ""
                tokens.append(ch)
                continue
            pending += ch
        if pending:
            tokens.append(pending.lower())
        return tokens


def tokenize(text: str, symbols: Iterable[str] = DEFAULT_SYMBOLS) -> list[str]:
    return Tokenizer(symbols).tokenize(text)
