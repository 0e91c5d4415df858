"""Core language: tokens, lexer, parser, tree printer and evaluator."""
