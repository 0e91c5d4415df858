import math
import unittest

from loxite.core.tokens import Token, TokenKind, RESERVED_WORDS, display_literal, format_number, keyword_table


class TokensTestCase(unittest.TestCase):

    def test_format_number(self):
        cases = [
            (123.0, "123"),
            (0.0, "0"),
            (-0.0, "-0"),
            (45.67, "45.67"),
            (-2.5, "-2.5"),
            (math.inf, "inf"),
            (-math.inf, "-inf"),
            (math.nan, "NaN"),
            (0.1, "0.1"),
            (1e21, "1" + "0" * 21),
            (1e300, "1" + "0" * 300),
            (123456789012345678901.0, "123456789012345680000"),
            (1e-7, "0.0000001"),
            (-1.5e-10, "-0.00000000015"),
        ]
        for case, expected in cases:
            self.assertEqual(expected, format_number(case), case)

    def test_display_literal(self):
        cases = [("text", "text"), (1.0, "1"), (True, "true"), (False, "false"), (None, "")]
        for case, expected in cases:
            self.assertEqual(expected, display_literal(case), case)

    def test_keyword_table(self):
        table = keyword_table()
        self.assertEqual(16, len(table))
        for word in RESERVED_WORDS:
            self.assertEqual(word, table[word].name.lower(), word)

        self.assertIsNot(table, keyword_table())

    def test_str(self):
        cases = {
            Token(TokenKind.NUMBER, "1.50", 1.5, 1): "NUMBER 1.50 1.5",
            Token(TokenKind.STRING, '"hi"', "hi", 2): 'STRING "hi" hi',
            Token(TokenKind.STRING, '"a "', "a ", 1): 'STRING "a " a ',
            Token(TokenKind.STRING, '""', "", 1): 'STRING ""',
            Token(TokenKind.PLUS, "+", None, 1): "PLUS +",
            Token(TokenKind.EOF, "", None, 3): "EOF",
        }
        for case, expected in cases.items():
            self.assertEqual(expected, str(case), case)


if __name__ == '__main__':
    unittest.main()
