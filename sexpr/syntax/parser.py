"""Recursive descent parser for the sexpr language, using one token of lookahead.

```
<program>     ::= <expr>*
<expr>        ::= <sexpr> | <int> | <float> | <bool> | <identifier>
<sexpr>       ::= "(" ")"                           ; Empty
                | "(" <operator> <expr>* ")"        ; operator is any single token, checked during evaluation
```
"""

from sexpr.lang.error import LexError, ParseError
from sexpr.syntax import ast
from sexpr.syntax.lexer import Lexer
from sexpr.syntax.token import Type


I64_MAX = 2 ** 63 - 1


class Parser:
    """Parses a single source line into a list of Expressions."""

    def __init__(self, source):
        self.source = source
        self.lexer = Lexer(source)

    def parse(self):
        """Returns every expression in the source line, in order. Raises a GenericException if the line is invalid."""
        exprs = []
        while True:
            expr = self.parse_expression()
            if expr is None:
                return exprs
            exprs.append(expr)

    def parse_expression(self):
        """Parses the next expression. Returns None at the end of input."""
        token = self.lexer.peek()

        if token.kind is Type.OPEN_PAREN:
            sexpr = self.parse_sexpr()
            return sexpr if sexpr is not None else ast.Empty(token.offset)

        elif token.kind is Type.INT:
            token = self.lexer.take()
            return ast.IntegerLiteral(self._integer(token), token.offset)

        elif token.kind is Type.FLOAT:
            token = self.lexer.take()
            return ast.FloatLiteral(self._float(token), token.offset)

        elif token.kind is Type.BOOL:
            token = self.lexer.take()
            if token.text not in ("true", "false"):
                raise ParseError("'{}' is not a valid boolean value", token.text, token.offset, internal=True)
            return ast.BooleanLiteral(token.text == "true", token.offset)

        elif token.kind is Type.IDENTIFIER:
            token = self.lexer.take()
            return ast.Identifier(token.text, token.offset)

        elif token.kind is Type.EOF:
            return None

        elif token.kind is Type.UNKNOWN:
            raise LexError("unrecognized token '{}'", token.text, token.offset)

        raise ParseError("unexpected '{}' ({}), expected an expression", (token.text, token.kind), token.offset)

    def parse_sexpr(self):
        """Parses (op args...). Returns None for the empty form ()."""
        open_paren = self.lexer.take()
        if open_paren.kind is not Type.OPEN_PAREN:
            raise ParseError("s-expression must start with '(', got '{}'", open_paren.text, open_paren.offset,
                             internal=True)

        op = self.lexer.take()
        if op.kind is Type.CLOSE_PAREN:
            return None

        args = []
        while self.lexer.peek().kind is not Type.CLOSE_PAREN:
            if self.lexer.peek().kind is Type.EOF:
                raise ParseError("unclosed s-expression starting at '{}', expected ')' before end of input",
                                 open_paren.text, open_paren.offset)

            expr = self.parse_expression()
            if expr is None:
                break
            args.append(expr)

        self.lexer.take()  # closing paren
        return ast.SExpr(op, args, open_paren.offset)

    @staticmethod
    def _digits(token):
        """Strips digit separators from a numeric literal."""
        return token.text.replace("_", "")

    def _integer(self, token):
        digits = self._digits(token)
        if not digits.isdigit():
            raise ParseError("'{}' is not a valid integer literal", token.text, token.offset)

        value = int(digits)
        if value > I64_MAX:
            raise ParseError("integer literal '{}' does not fit in 64 bits", token.text, token.offset)
        return value

    def _float(self, token):
        whole, __, fraction = self._digits(token).partition(".")
        if not whole or not fraction:
            raise ParseError("'{}' is not a valid float literal", token.text, token.offset)
        return float(f"{whole}.{fraction}")
