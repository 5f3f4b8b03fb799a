"""Infix calculator building blocks: operators, tokens, evaluation and variables."""

__version__ = "0.1.0"

__all__ = ["calculations", "evaluator", "operators", "support", "tokens", "variables"]