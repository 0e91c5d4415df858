import unittest

from loxite.core.lexical import Lexer, scan
from loxite.core.tokens import TokenKind
from loxite.lang.error import LexError, UNEXPECTED_CHARACTER, UNTERMINATED_STRING


def kinds(tokens):
    return [token.kind for token in tokens]


class LexerTestCase(unittest.TestCase):

    def test_blank(self):
        cases = {"": 1, "   ": 1, "\t\r ": 1, "// comment": 1, "  // a\n// b\n": 3, "\n\n": 3, "//\n\t\n": 3}
        for case, line in cases.items():
            tokens, errors = scan(case)
            self.assertEqual([TokenKind.EOF], kinds(tokens), repr(case))
            self.assertEqual(line, tokens[0].line, repr(case))
            self.assertEqual("", tokens[0].lexeme, repr(case))
            self.assertEqual([], errors, repr(case))

    def test_number(self):
        cases = {"0": 0.0, "7": 7.0, "123": 123.0, "45.67": 45.67, "007": 7.0, "1.5": 1.5, "10.01": 10.01}
        for case, expected in cases.items():
            tokens, errors = scan(case)
            self.assertEqual([TokenKind.NUMBER, TokenKind.EOF], kinds(tokens), case)
            self.assertEqual(expected, tokens[0].literal, case)
            self.assertEqual(case, tokens[0].lexeme, case)
            self.assertFalse(errors, case)

    def test_number_dot(self):
        cases = {
            "123.": [TokenKind.NUMBER, TokenKind.DOT, TokenKind.EOF],
            ".5": [TokenKind.DOT, TokenKind.NUMBER, TokenKind.EOF],
            "1.2.3": [TokenKind.NUMBER, TokenKind.DOT, TokenKind.NUMBER, TokenKind.EOF],
            "1..2": [TokenKind.NUMBER, TokenKind.DOT, TokenKind.DOT, TokenKind.NUMBER, TokenKind.EOF],
        }
        for case, expected in cases.items():
            tokens, __ = scan(case)
            self.assertEqual(expected, kinds(tokens), case)

        tokens, __ = scan("1.2.3")
        self.assertEqual([1.2, None, 3.0], [token.literal for token in tokens[:3]])

    def test_string(self):
        tokens, errors = scan('"hi there"')
        self.assertEqual([TokenKind.STRING, TokenKind.EOF], kinds(tokens))
        self.assertEqual("hi there", tokens[0].literal)
        self.assertEqual('"hi there"', tokens[0].lexeme)
        self.assertFalse(errors)

        tokens, errors = scan('"a\\n"')
        self.assertEqual("a\\n", tokens[0].literal)  # no escape processing

        tokens, errors = scan('"a\nb"')
        self.assertEqual("a\nb", tokens[0].literal)
        self.assertEqual(2, tokens[0].line)
        self.assertEqual(2, tokens[1].line)

        tokens, errors = scan('""')
        self.assertEqual("", tokens[0].literal)

    def test_unterminated_string(self):
        cases = {'"abc': 1, '"': 1, '1 + "a\nb': 2, '"\n\n': 3}
        for case, line in cases.items():
            tokens, errors = scan(case)
            self.assertNotIn(TokenKind.STRING, kinds(tokens), repr(case))
            self.assertEqual(TokenKind.EOF, tokens[-1].kind, repr(case))
            self.assertEqual(1, len(errors), repr(case))
            self.assertIsInstance(errors[0], LexError)
            self.assertEqual(UNTERMINATED_STRING, errors[0].message, repr(case))
            self.assertEqual(line, errors[0].line, repr(case))
            self.assertEqual(line, tokens[-1].line, repr(case))

    def test_operators(self):
        cases = {
            "(){},.-+;*/": [TokenKind.LEFT_PAREN, TokenKind.RIGHT_PAREN, TokenKind.LEFT_BRACE, TokenKind.RIGHT_BRACE,
                            TokenKind.COMMA, TokenKind.DOT, TokenKind.MINUS, TokenKind.PLUS, TokenKind.SEMICOLON,
                            TokenKind.STAR, TokenKind.SLASH],
            "! != = == < <= > >=": [TokenKind.BANG, TokenKind.BANG_EQUAL, TokenKind.EQUAL, TokenKind.EQUAL_EQUAL,
                                    TokenKind.LESS, TokenKind.LESS_EQUAL, TokenKind.GREATER,
                                    TokenKind.GREATER_EQUAL],
            "!==": [TokenKind.BANG_EQUAL, TokenKind.EQUAL],
            "===": [TokenKind.EQUAL_EQUAL, TokenKind.EQUAL],
            "<>": [TokenKind.LESS, TokenKind.GREATER],
            "1/2//3": [TokenKind.NUMBER, TokenKind.SLASH, TokenKind.NUMBER],
            ")": [TokenKind.RIGHT_PAREN],
        }
        for case, expected in cases.items():
            tokens, errors = scan(case)
            self.assertEqual(expected + [TokenKind.EOF], kinds(tokens), case)
            self.assertFalse(errors, case)

        tokens, __ = scan("<=")
        self.assertEqual("<=", tokens[0].lexeme)
        self.assertIsNone(tokens[0].literal)

    def test_identifiers(self):
        words = ["and", "class", "else", "false", "fun", "for", "if", "nil",
                 "or", "print", "return", "super", "this", "true", "var", "while"]
        for word in words:
            tokens, __ = scan(word)
            self.assertEqual(word.upper(), tokens[0].kind.name, word)

        should_be_identifier = ["orchid", "_x1", "nil_", "True", "x", "__", "v4r"]
        for case in should_be_identifier:
            tokens, __ = scan(case)
            self.assertEqual([TokenKind.IDENTIFIER, TokenKind.EOF], kinds(tokens), case)
            self.assertEqual(case, tokens[0].lexeme, case)

    def test_unexpected_character(self):
        tokens, errors = scan("@ 1 # 2\n$")
        self.assertEqual([TokenKind.NUMBER, TokenKind.NUMBER, TokenKind.EOF], kinds(tokens))
        self.assertEqual([UNEXPECTED_CHARACTER] * 3, [error.message for error in errors])
        self.assertEqual([1, 1, 2], [error.line for error in errors])
        self.assertEqual("[line 1] Error: Unexpected character.", errors[0].render())

    def test_lines(self):
        tokens, __ = scan("1\n2 // two\n\n3\n")
        self.assertEqual([1, 2, 4, 5], [token.line for token in tokens])

    def test_keywords_per_instance(self):
        self.assertIsNot(Lexer("").keywords, Lexer("").keywords)


if __name__ == '__main__':
    unittest.main()
