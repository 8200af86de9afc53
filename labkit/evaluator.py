"""One-call evaluation of arithmetic expressions."""

from __future__ import annotations

from labkit.parser import Parser
from labkit.tokenizer import Tokenizer


def evaluate(expr: str) -> float:
    """Tokenize and evaluate ``expr``, returning its value."""
    return Parser(Tokenizer(expr).tokenize()).parse_expression()