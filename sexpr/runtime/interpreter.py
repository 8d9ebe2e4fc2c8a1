"""Tree-walking evaluation of sexpr ASTs.

Arithmetic operators fold left to right over integer operands only:

- (+ a b ...) starts from 0, so (+ a) == a
- (- a b ...), (* a b ...) and (/ a b ...) start from their first argument, so a single argument is returned unchanged
  (no negation or reciprocal)
- any of them with no arguments evaluates to ()

Integers are signed 64-bit: results outside that range raise an EvalError, and division truncates toward zero.
"""

from sexpr.lang.error import EvalError, ParseError
from sexpr.runtime.value import Boolean, Float, Integer, NONE, NoneValue
from sexpr.syntax import ast
from sexpr.syntax.token import Type


I64_MIN = -2 ** 63
I64_MAX = 2 ** 63 - 1


def _divide(total, divisor):
    quotient = abs(total) // abs(divisor)
    return quotient if (total < 0) == (divisor < 0) else -quotient


class Interpreter:
    """Evaluates expressions against an environment that persists for the lifetime of the interpreter."""
    FOLDS = {
        Type.MINUS: lambda total, arg: total - arg,
        Type.MULTIPLY: lambda total, arg: total * arg,
        Type.DIVIDE: _divide,
    }

    def __init__(self):
        self.environment = {}  # identifier name: Value, filled by let

    def evaluate(self, exprs):
        """Evaluates every expression in order and returns the value of the last one (() if there are none)."""
        value = NONE
        for expr in exprs:
            value = self.evaluate_expression(expr)
        return value

    def evaluate_expression(self, expr):
        if isinstance(expr, ast.SExpr):
            return self.evaluate_sexpr(expr)
        elif isinstance(expr, ast.IntegerLiteral):
            return Integer(expr.value)
        elif isinstance(expr, ast.FloatLiteral):
            return Float(expr.value)
        elif isinstance(expr, ast.BooleanLiteral):
            return Boolean(expr.value)
        elif isinstance(expr, ast.Identifier):
            if expr.name not in self.environment:
                raise EvalError("unknown identifier '{}'", expr.name, expr.offset)
            return self.environment[expr.name]
        elif isinstance(expr, ast.Empty):
            return NONE

        raise EvalError("cannot evaluate '{}'", repr(expr), internal=True)

    def evaluate_sexpr(self, sexpr):
        op = sexpr.op

        if op.kind is Type.PLUS:
            if not sexpr.args:
                return NONE
            total = 0
            for arg in sexpr.args:
                total = self._checked(total + self._operand(op, arg), op)
            return Integer(total)

        elif op.kind in Interpreter.FOLDS:
            if not sexpr.args:
                return NONE
            fold = Interpreter.FOLDS[op.kind]

            first, *rest = sexpr.args
            total = self._operand(op, first)
            for arg in rest:
                operand = self._operand(op, arg)
                if op.kind is Type.DIVIDE and operand == 0:
                    raise EvalError("division by zero in '{}'", op.text, op.offset)
                total = self._checked(fold(total, operand), op)
            return Integer(total)

        elif op.kind is Type.LET:
            return self._let(sexpr)

        raise EvalError("unknown operator '{}' with kind '{}'", (op.text, op.kind), op.offset)

    def _operand(self, op, arg):
        """Evaluates arg and returns it as a python int, or raises an EvalError if it is not an Integer."""
        value = self.evaluate_expression(arg)
        if isinstance(value, NoneValue):
            raise EvalError("cannot operate on empty value with '{}'", op.text, op.offset)
        if not isinstance(value, Integer):
            raise EvalError("'{}' expects integer operands, got {} '{}'", (op.text, value.kind, value), op.offset)
        return value.value

    @staticmethod
    def _checked(result, op):
        if not I64_MIN <= result <= I64_MAX:
            raise EvalError("integer overflow in '{}'", op.text, op.offset)
        return result

    def _let(self, sexpr):
        """(let name value): binds name to the value of the second argument and evaluates to ()."""
        if not sexpr.args:
            raise ParseError("'{}' requires an identifier as its first argument", sexpr.op.text, sexpr.op.offset)

        name = sexpr.args[0]
        if not isinstance(name, ast.Identifier):
            raise ParseError("first argument of '{}' must be an identifier", sexpr.op.text, sexpr.op.offset)

        if len(sexpr.args) != 2:
            raise ParseError("'{}' takes exactly two arguments, got {}", (sexpr.op.text, len(sexpr.args)),
                             sexpr.op.offset)

        self.environment[name.name] = self.evaluate_expression(sexpr.args[1])
        return NONE
