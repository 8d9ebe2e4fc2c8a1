"""Tokens produced by the sexpr lexer."""

from dataclasses import dataclass
from enum import Enum


class Type(Enum):
    """Token kinds. The value of each member is how it is described in error messages."""
    EOF = "end of input"
    UNKNOWN = "unknown"
    OPEN_PAREN = "open paren"
    CLOSE_PAREN = "close paren"
    PLUS = "plus"
    MINUS = "minus"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    LET = "let keyword"
    IDENTIFIER = "identifier"
    INT = "integer literal"
    FLOAT = "float literal"
    BOOL = "boolean literal"

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class Token:
    """A classified slice of one source line. offset counts characters, not bytes, so it only equals the byte
    offset for ASCII input; non-ASCII characters always end up in UNKNOWN tokens.
    """
    kind: Type
    text: str    # exact matched substring ("" for EOF)
    offset: int  # index in the source line where the match started

    @property
    def end(self):
        return self.offset + len(self.text)

    def __str__(self):
        return self.text
