"""Token cursor and recursive-descent tree builder for S-expressions."""

from typing import Iterable

from .tokenizer import DEFAULT_SYMBOLS, Tokenizer
from .types import Group, Symbol, Tree

OPEN = "("
CLOSE = ")"


class ParseError(SyntaxError):
    pass


class OutOfRange(ParseError):
    def __init__(self, index: int, available: int):
        super().__init__(f"Token index '{index}'; {available} tokens available")
        self.index = index
        self.available = available


class UnexpectedToken(ParseError):
    def __init__(self, expected: str, actual: str, position: int):
        super().__init__(
            f"Token '{expected}' expected, token '{actual}' encountered at position {position}"
        )
        self.expected = expected
        self.actual = actual
        self.position = position


class Cursor:
    """Read position over a token list.

    All parsing is built from these primitives. Lookahead past either end
    raises OutOfRange; advance() never raises, so a cursor pushed past the
    end only fails on the next read.
    """

    __slots__ = ("_tokens", "_i")

    def __init__(self, src: str, symbols: Iterable[str] = DEFAULT_SYMBOLS):
        self._tokens = Tokenizer(symbols).tokenize(src)
        self._i = 0

    @classmethod
    def from_tokens(cls, tokens: Iterable[str]) -> "Cursor":
        cursor = cls.__new__(cls)
        cursor._tokens = list(tokens)
        cursor._i = 0
        return cursor

    def __len__(self) -> int:
        return len(self._tokens)

    @property
    def position(self) -> int:
        return self._i

    def finished(self) -> bool:
        return self._i == len(self._tokens)

    def peek(self, offset: int = 0) -> str:
        index = self._i + offset
        if not 0 <= index < len(self._tokens):
            raise OutOfRange(index, len(self._tokens))
        return self._tokens[index]

    def current(self) -> str:
        return self.peek(0)

    def is_close(self) -> bool:
        return self.current() == CLOSE

    def advance(self, n: int = 1) -> None:
        self._i += n

    def expect(self, token: str) -> None:
        actual = self.current()
        if actual != token:
            raise UnexpectedToken(token, actual, self._i)
        self.advance()

    def consume(self) -> str:
        tok = self.current()
        self.advance()
        return tok

    def consume_group_of_symbols(self) -> list[str]:
        """Read a flat ``( sym ... )`` form.

        Every token up to the first CLOSE is taken as an opaque symbol,
        including a nested OPEN; use tree() for nested forms.
        """
        self.expect(OPEN)
        syms: list[str] = []
        while not self.is_close():
            syms.append(self.consume())
        self.expect(CLOSE)
        return syms

    def tree(self) -> Tree:
        """Parse one tree starting at the current position."""
        if self.finished():
            return Group(())
        if self.current() == OPEN:
            self.advance()
            children: list[Tree] = []
            while not self.is_close():
                children.append(self.tree())
            self.advance()
            return Group(tuple(children))
        return Symbol(self.consume())


def parse_tree(src: str) -> Tree:
    """Parse S-expression source text into a tree.

    Empty or all-whitespace input yields an empty Group. Only the first
    top-level form is read. Unbalanced input raises OutOfRange.
    """
    return Cursor(src).tree()


def dumps(tree: Tree) -> str:
    """Canonical source text for a tree: one space between children."""
    if isinstance(tree, Symbol):
        return tree.text
    return "(" + " ".join(dumps(child) for child in tree.children) + ")"
