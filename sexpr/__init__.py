from .tokenizer import DEFAULT_SYMBOLS, Tokenizer, tokenize
from .types import Group, Symbol, Tree
from .parser import Cursor, OutOfRange, ParseError, UnexpectedToken, dumps, parse_tree

__all__ = [
    "DEFAULT_SYMBOLS", "Tokenizer", "tokenize",
    "Group", "Symbol", "Tree",
    "Cursor", "OutOfRange", "ParseError", "UnexpectedToken", "dumps", "parse_tree",
]
