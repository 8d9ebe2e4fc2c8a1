"""Abstract syntax tree for the sexpr language. Every node owns its children; nothing is shared between trees.

offset fields record where a node started in the source line. They are only used for error messages and are ignored
when comparing nodes.
"""

from dataclasses import dataclass, field
from typing import List

from sexpr.syntax.token import Token


class Expression:
    """Superclass of every AST node."""


@dataclass
class SExpr(Expression):
    """Parenthesized form (op args...). args keep the order they were parsed in."""
    op: Token
    args: List[Expression] = field(default_factory=list)
    offset: int = field(default=0, compare=False)


@dataclass
class IntegerLiteral(Expression):
    value: int
    offset: int = field(default=0, compare=False)


@dataclass
class FloatLiteral(Expression):
    value: float
    offset: int = field(default=0, compare=False)


@dataclass
class BooleanLiteral(Expression):
    value: bool
    offset: int = field(default=0, compare=False)


@dataclass
class Identifier(Expression):
    name: str
    offset: int = field(default=0, compare=False)


@dataclass
class Empty(Expression):
    """Result of parsing ()."""
    offset: int = field(default=0, compare=False)
