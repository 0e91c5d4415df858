"""Lox expression interpreter.

Basic program flow, one stage at a time (each stage finishes before the next one starts):
    1. Lexer (core/lexical.py): source text -> list of Tokens plus any lex errors
        - Token vocabulary lives in core/tokens.py
    2. Parser (core/syntax.py): Tokens -> a single expression tree, or the first ParseError
    3. Evaluator (core/evaluation.py): expression tree -> runtime value, or a LoxRuntimeError

The `lang` directory wraps the pipeline into a usable program: diagnostics and their reporting (lang/error.py),
per-input pipeline runs (lang/session.py) and the interactive shell (lang/shell.py).
"""

__version__ = "0.1.0"
