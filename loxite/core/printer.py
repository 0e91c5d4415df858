"""Renders expression trees as fully parenthesized prefix text, e.g. `-123 * (45.67)` -> `(* (- 123) (group 45.67))`.
Used by the --ast debugging mode and by tests.
"""

from loxite.core.syntax import ExprVisitor
from loxite.core.tokens import display_literal


class AstPrinter(ExprVisitor):

    def print(self, expr):
        return expr.accept(self)

    def visit_literal(self, expr):
        if expr.value is None:
            return "nil"
        return display_literal(expr.value)

    def visit_grouping(self, expr):
        return self.parenthesize("group", expr.expression)

    def visit_unary(self, expr):
        return self.parenthesize(expr.operator.lexeme, expr.right)

    def visit_binary(self, expr):
        return self.parenthesize(expr.operator.lexeme, expr.left, expr.right)

    def parenthesize(self, name, *exprs):
        result = f"({name}"
        for expr in exprs:
            result += " " + expr.accept(self)
        return result + ")"


def print_tree(expr):
    return AstPrinter().print(expr)
