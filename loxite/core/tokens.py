"""Token vocabulary shared by the lexer, parser and evaluator.

A literal is carried on its token as the plain Python value it denotes:

```
"text"  -> str    ; String
123.5   -> float  ; Number
true    -> bool   ; Boolean
nil     -> None   ; Empty (also used by every non-literal token)
```
"""

import math
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum, auto


class TokenKind(Enum):
    """Every kind of token the lexer can produce."""

    # single-character punctuation
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    LEFT_BRACE = auto()
    RIGHT_BRACE = auto()
    COMMA = auto()
    DOT = auto()
    MINUS = auto()
    PLUS = auto()
    SEMICOLON = auto()
    SLASH = auto()
    STAR = auto()

    # one or two character operators
    BANG = auto()
    BANG_EQUAL = auto()
    EQUAL = auto()
    EQUAL_EQUAL = auto()
    GREATER = auto()
    GREATER_EQUAL = auto()
    LESS = auto()
    LESS_EQUAL = auto()

    # literals
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()

    # reserved words
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    EOF = auto()


RESERVED_WORDS = ("and", "class", "else", "false", "fun", "for", "if", "nil",
                  "or", "print", "return", "super", "this", "true", "var", "while")


def keyword_table():
    """Returns a fresh mapping of reserved word -> TokenKind."""
    return {word: TokenKind[word.upper()] for word in RESERVED_WORDS}


def format_number(number):
    """Numeric display form: the shortest digits that round-trip, written out without an exponent. Integral values
    lose their fractional part (123.0 -> '123', 1e21 -> '1000000000000000000000', 1e-7 -> '0.0000001').
    """
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "inf" if number > 0 else "-inf"
    digits = Decimal(repr(number))
    if number.is_integer():
        digits = digits.to_integral_value()
    return format(digits, "f")


def display_literal(literal):
    """Display form of a literal: its text, its numeric form, true/false, or empty string for no literal."""
    if literal is None:
        return ""
    if isinstance(literal, bool):  # before float/int checks: bool is an int subclass
        return "true" if literal else "false"
    if isinstance(literal, float):
        return format_number(literal)
    return str(literal)


@dataclass(frozen=True)
class Token:
    """A scanned chunk of source text.

    :param kind: TokenKind of this token
    :param lexeme: exact source substring the token was scanned from
    :param literal: eagerly parsed value for STRING/NUMBER tokens, otherwise None
    :param line: source line the token ends on
    """
    kind: TokenKind
    lexeme: str
    literal: object
    line: int

    def __str__(self):
        display = display_literal(self.literal)
        if not display:
            return f"{self.kind.name} {self.lexeme}".rstrip()
        return f"{self.kind.name} {self.lexeme} {display}"
