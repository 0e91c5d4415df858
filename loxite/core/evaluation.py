"""Tree-walking evaluation of loxite expressions.

Runtime values are plain Python objects:

```
nil     -> None
boolean -> bool
number  -> float   ; IEEE-754 double, division by zero gives inf/nan rather than an error
string  -> str
```

Only `nil` and `false` are falsy; every number and string (including `0` and `""`) is truthy. Equality is defined
for every pair of values and never crosses kinds, so `0 == false` is false even though Python would say otherwise.
"""

import logging
import math

from loxite.core.syntax import ExprVisitor
from loxite.core.tokens import TokenKind, format_number
from loxite.lang.error import LoxRuntimeError, NUMBER_OPERANDS, NUMBER_OR_STRING_OPERANDS


logger = logging.getLogger("loxite.core.evaluation")


def is_number(value):
    return isinstance(value, float)


def is_truthy(value):
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return True


def is_equal(left, right):
    # bool vs float must never compare equal (True == 1.0 in Python)
    if type(left) is not type(right):
        return False
    return left == right


def stringify(value):
    """Display form of a runtime value."""
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if is_number(value):
        return format_number(value)
    return value


def check_number_operands(operator, *operands):
    if not all(is_number(operand) for operand in operands):
        raise LoxRuntimeError(operator, NUMBER_OPERANDS)


class Interpreter(ExprVisitor):
    """Evaluates expressions. Holds no state, so one instance can evaluate any number of trees."""

    def evaluate(self, expr):
        """Returns the runtime value of expr. Raises LoxRuntimeError on operands of the wrong kind."""
        return expr.accept(self)

    def visit_literal(self, expr):
        return expr.value

    def visit_grouping(self, expr):
        return self.evaluate(expr.expression)

    def visit_unary(self, expr):
        right = self.evaluate(expr.right)
        kind = expr.operator.kind

        if kind is TokenKind.MINUS:
            check_number_operands(expr.operator, right)
            return -right
        if kind is TokenKind.BANG:
            return not is_truthy(right)

        raise ValueError(f"unknown unary operator '{expr.operator.lexeme}'")

    def visit_binary(self, expr):
        left = self.evaluate(expr.left)
        right = self.evaluate(expr.right)
        operator = expr.operator
        kind = operator.kind

        if kind is TokenKind.PLUS:
            if is_number(left) and is_number(right):
                return left + right
            if isinstance(left, str) and isinstance(right, str):
                return left + right
            raise LoxRuntimeError(operator, NUMBER_OR_STRING_OPERANDS)

        if kind is TokenKind.BANG_EQUAL:
            return not is_equal(left, right)
        if kind is TokenKind.EQUAL_EQUAL:
            return is_equal(left, right)

        check_number_operands(operator, left, right)

        if kind is TokenKind.MINUS:
            return left - right
        if kind is TokenKind.STAR:
            return left * right
        if kind is TokenKind.SLASH:
            return divide(left, right)
        if kind is TokenKind.GREATER:
            return left > right
        if kind is TokenKind.GREATER_EQUAL:
            return left >= right
        if kind is TokenKind.LESS:
            return left < right
        if kind is TokenKind.LESS_EQUAL:
            return left <= right

        raise ValueError(f"unknown binary operator '{operator.lexeme}'")


def divide(left, right):
    """IEEE-754 division: x / 0 is +-inf, 0 / 0 is nan (Python would raise ZeroDivisionError)."""
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(1.0, left) * math.copysign(math.inf, right)
    return left / right


def evaluate(expr):
    """Returns the runtime value of expr. See Interpreter.evaluate."""
    value = Interpreter().evaluate(expr)
    logger.debug("evaluated to %r", value)
    return value
