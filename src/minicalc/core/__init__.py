"""Core pipeline: syntax types, lexer, parser, evaluator."""
