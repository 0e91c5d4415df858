"""Lexical analysis for loxite: turns source text into a list of Tokens.

The scanner walks the source once, left to right, keeping two cursors: `start` (first character of the lexeme being
scanned) and `current` (next character to consume). Lexemes are recognized by maximal munch with at most two
characters of lookahead:

```
<punct>      ::= "(" | ")" | "{" | "}" | "," | "." | "-" | "+" | ";" | "*"
<operator>   ::= "!" ["="] | "=" ["="] | "<" ["="] | ">" ["="] | "/"
<comment>    ::= "//" <char>*                       ; up to end of line, no token
<string>     ::= '"' <char>* '"'                    ; may span lines, no escapes
<number>     ::= <digit>+ ["." <digit>+]            ; "." only consumed if a digit follows it
<identifier> ::= (<alpha> | "_") (<alnum> | "_")*   ; reserved words become keyword tokens
```

Errors do not stop the scan: they are collected and returned next to the tokens.
"""

import logging

from loxite.core.tokens import Token, TokenKind, keyword_table
from loxite.lang.error import LexError, UNEXPECTED_CHARACTER, UNTERMINATED_STRING


logger = logging.getLogger("loxite.core.lexical")

SINGLE_CHAR = {
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    ",": TokenKind.COMMA,
    ".": TokenKind.DOT,
    "-": TokenKind.MINUS,
    "+": TokenKind.PLUS,
    ";": TokenKind.SEMICOLON,
    "*": TokenKind.STAR,
}

# char: (kind if followed by "=", kind otherwise)
ONE_OR_TWO_CHAR = {
    "!": (TokenKind.BANG_EQUAL, TokenKind.BANG),
    "=": (TokenKind.EQUAL_EQUAL, TokenKind.EQUAL),
    "<": (TokenKind.LESS_EQUAL, TokenKind.LESS),
    ">": (TokenKind.GREATER_EQUAL, TokenKind.GREATER),
}

WHITESPACE = " \r\t"


def is_digit(char):
    return "0" <= char <= "9"


def is_alpha(char):
    return "a" <= char <= "z" or "A" <= char <= "Z" or char == "_"


def is_alpha_numeric(char):
    return is_alpha(char) or is_digit(char)


class Lexer:
    """Single-use scanner over one source text. Call scan once and read the returned tokens/errors."""

    def __init__(self, source):
        self.source = source
        self.keywords = keyword_table()

        self.tokens = []
        self.errors = []

        self.start = 0
        self.current = 0
        self.line = 1

    def scan(self):
        """Scans the whole source. Returns (tokens, errors); tokens always ends with exactly one EOF token."""
        while not self.is_at_end():
            self.start = self.current
            self.scan_token()

        self.tokens.append(Token(TokenKind.EOF, "", None, self.line))
        logger.debug("scanned %d tokens with %d errors", len(self.tokens), len(self.errors))
        return self.tokens, self.errors

    def scan_token(self):
        char = self.advance()

        if char in SINGLE_CHAR:
            self.add_token(SINGLE_CHAR[char])
        elif char in ONE_OR_TWO_CHAR:
            two_char, one_char = ONE_OR_TWO_CHAR[char]
            self.add_token(two_char if self.match("=") else one_char)
        elif char == "/":
            if self.match("/"):
                while self.peek() != "\n" and not self.is_at_end():
                    self.advance()
            else:
                self.add_token(TokenKind.SLASH)
        elif char in WHITESPACE:
            pass
        elif char == "\n":
            self.line += 1
        elif char == '"':
            self.string()
        elif is_digit(char):
            self.number()
        elif is_alpha(char):
            self.identifier()
        else:
            self.error(UNEXPECTED_CHARACTER)

    def string(self):
        while self.peek() != '"' and not self.is_at_end():
            if self.peek() == "\n":
                self.line += 1
            self.advance()

        if self.is_at_end():
            self.error(UNTERMINATED_STRING)
            return

        self.advance()  # closing quote
        self.add_token(TokenKind.STRING, self.source[self.start + 1:self.current - 1])

    def number(self):
        while is_digit(self.peek()):
            self.advance()

        if self.peek() == "." and is_digit(self.peek_next()):
            self.advance()
            while is_digit(self.peek()):
                self.advance()

        self.add_token(TokenKind.NUMBER, float(self.source[self.start:self.current]))

    def identifier(self):
        while is_alpha_numeric(self.peek()):
            self.advance()

        text = self.source[self.start:self.current]
        self.add_token(self.keywords.get(text, TokenKind.IDENTIFIER))

    def add_token(self, kind, literal=None):
        token = Token(kind, self.source[self.start:self.current], literal, self.line)
        logger.debug("token %s", token)
        self.tokens.append(token)

    def error(self, message):
        logger.debug("lex error on line %d: %s", self.line, message)
        self.errors.append(LexError(self.line, message))

    def match(self, expected):
        """Consumes the next character only if it is expected."""
        if self.is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def advance(self):
        char = self.source[self.current]
        self.current += 1
        return char

    def peek(self):
        if self.is_at_end():
            return "\0"
        return self.source[self.current]

    def peek_next(self):
        if self.current + 1 >= len(self.source):
            return "\0"
        return self.source[self.current + 1]

    def is_at_end(self):
        return self.current >= len(self.source)


def scan(source):
    """Returns (tokens, errors) for source. See Lexer.scan."""
    return Lexer(source).scan()
