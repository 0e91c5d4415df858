"""Abstract syntax tree and recursive-descent parser for loxite expressions.

Grammar, from lowest to highest precedence (every binary level is left-associative):

```
expression ::= equality
equality   ::= comparison ( ( "!=" | "==" ) comparison )*
comparison ::= term ( ( ">" | ">=" | "<" | "<=" ) term )*
term       ::= factor ( ( "-" | "+" ) factor )*
factor     ::= unary ( ( "/" | "*" ) unary )*
unary      ::= ( "!" | "-" ) unary | primary
primary    ::= NUMBER | STRING | "true" | "false" | "nil" | "(" expression ")"
```

Expressions form a strict tree: each node owns its children and nodes are never shared or mutated. Stages that walk
the tree (printer, evaluator) subclass ExprVisitor, which declares one abstract method per node type, so a visitor
that forgets a node type cannot be instantiated.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from loxite.core.tokens import Token, TokenKind
from loxite.lang.error import ParseError, EXPECTED_EXPRESSION, EXPECTED_RIGHT_PAREN


logger = logging.getLogger("loxite.core.syntax")


class Expr(ABC):
    """Superclass of every expression node."""

    @abstractmethod
    def accept(self, visitor):
        """Dispatches to the visitor method for this node type and returns its result."""


@dataclass(frozen=True)
class Literal(Expr):
    value: object

    def accept(self, visitor):
        return visitor.visit_literal(self)


@dataclass(frozen=True)
class Grouping(Expr):
    expression: Expr

    def accept(self, visitor):
        return visitor.visit_grouping(self)


@dataclass(frozen=True)
class Unary(Expr):
    operator: Token
    right: Expr

    def accept(self, visitor):
        return visitor.visit_unary(self)


@dataclass(frozen=True)
class Binary(Expr):
    left: Expr
    operator: Token
    right: Expr

    def accept(self, visitor):
        return visitor.visit_binary(self)


class ExprVisitor(ABC):
    """Operation over the expression tree. Subclasses must handle every node type."""

    @abstractmethod
    def visit_literal(self, expr):
        ...

    @abstractmethod
    def visit_grouping(self, expr):
        ...

    @abstractmethod
    def visit_unary(self, expr):
        ...

    @abstractmethod
    def visit_binary(self, expr):
        ...


# binary precedence levels, lowest first
EQUALITY = (TokenKind.BANG_EQUAL, TokenKind.EQUAL_EQUAL)
COMPARISON = (TokenKind.GREATER, TokenKind.GREATER_EQUAL, TokenKind.LESS, TokenKind.LESS_EQUAL)
TERM = (TokenKind.MINUS, TokenKind.PLUS)
FACTOR = (TokenKind.SLASH, TokenKind.STAR)
UNARY = (TokenKind.BANG, TokenKind.MINUS)

STATEMENT_START = (TokenKind.CLASS, TokenKind.FUN, TokenKind.VAR, TokenKind.FOR,
                   TokenKind.IF, TokenKind.WHILE, TokenKind.PRINT, TokenKind.RETURN)


class Parser:
    """Parses a token list (as returned by the lexer, EOF-terminated) into a single Expr."""

    def __init__(self, tokens):
        self.tokens = tokens
        self.current = 0

    def parse(self):
        """Returns the parsed expression. Raises ParseError on the first syntax error; there is no recovery."""
        expr = self.expression()
        logger.debug("parsed expression ending before token %d of %d", self.current, len(self.tokens))
        return expr

    def expression(self):
        return self.equality()

    def equality(self):
        expr = self.comparison()
        while self.match(*EQUALITY):
            operator = self.previous()
            expr = Binary(expr, operator, self.comparison())
        return expr

    def comparison(self):
        expr = self.term()
        while self.match(*COMPARISON):
            operator = self.previous()
            expr = Binary(expr, operator, self.term())
        return expr

    def term(self):
        expr = self.factor()
        while self.match(*TERM):
            operator = self.previous()
            expr = Binary(expr, operator, self.factor())
        return expr

    def factor(self):
        expr = self.unary()
        while self.match(*FACTOR):
            operator = self.previous()
            expr = Binary(expr, operator, self.unary())
        return expr

    def unary(self):
        if self.match(*UNARY):
            operator = self.previous()
            return Unary(operator, self.unary())
        return self.primary()

    def primary(self):
        if self.match(TokenKind.FALSE):
            return Literal(False)
        if self.match(TokenKind.TRUE):
            return Literal(True)
        if self.match(TokenKind.NIL):
            return Literal(None)

        if self.match(TokenKind.NUMBER, TokenKind.STRING):
            return Literal(self.previous().literal)

        if self.match(TokenKind.LEFT_PAREN):
            expr = self.expression()
            self.consume(TokenKind.RIGHT_PAREN, EXPECTED_RIGHT_PAREN)
            return Grouping(expr)

        raise ParseError(self.peek(), EXPECTED_EXPRESSION)

    def consume(self, kind, message):
        """Advances past and returns the current token if it is of kind, otherwise raises ParseError at it."""
        if self.check(kind):
            return self.advance()
        raise ParseError(self.peek(), message)

    def synchronize(self):
        """Discards tokens until the probable start of the next statement. Unused while the grammar only has
        expressions.
        """
        self.advance()
        while not self.is_at_end():
            if self.previous().kind is TokenKind.SEMICOLON:
                return
            if self.peek().kind in STATEMENT_START:
                return
            self.advance()

    def match(self, *kinds):
        for kind in kinds:
            if self.check(kind):
                self.advance()
                return True
        return False

    def check(self, kind):
        if self.is_at_end():
            return False
        return self.peek().kind is kind

    def advance(self):
        if not self.is_at_end():
            self.current += 1
        return self.previous()

    def is_at_end(self):
        return self.peek().kind is TokenKind.EOF

    def peek(self):
        return self.tokens[self.current]

    def previous(self):
        return self.tokens[self.current - 1]


def parse(tokens):
    """Returns the Expr for tokens. See Parser.parse."""
    return Parser(tokens).parse()
