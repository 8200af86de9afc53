"""Recursive-descent evaluation of arithmetic tokens."""

from __future__ import annotations

import operator
from collections.abc import Iterable

from labkit.tokenizer import Token, TokenType

_END = Token(TokenType.END, "")

_ADDITIVE = {TokenType.PLUS: operator.add, TokenType.MINUS: operator.sub}


class Parser:
    """Evaluates a token sequence using the usual precedence rules.

    Grammar::

        expression := term (("+" | "-") term)*
        term       := factor (("*" | "/") factor)*
        factor     := NUMBER | "(" expression ")"

    Tokens left over after a complete expression are ignored.
    """

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens = tuple(tokens)
        self._pos = 0

    def parse_expression(self) -> float:
        """Parse an expression from the current position and return its value."""
        result = self._parse_term()
        while (apply := _ADDITIVE.get(self._peek().type)) is not None:
            self._next()
            result = apply(result, self._parse_term())
        return result

    def _parse_term(self) -> float:
        result = self._parse_factor()
        while True:
            kind = self._peek().type
            if kind is TokenType.MULTIPLY:
                self._next()
                result *= self._parse_factor()
            elif kind is TokenType.DIVIDE:
                self._next()
                divisor = self._parse_factor()
                if divisor == 0:
                    raise ZeroDivisionError("Division by zero")
                result /= divisor
            else:
                return result

    def _parse_factor(self) -> float:
        token = self._next()
        if token.type is TokenType.NUMBER:
            return float(token.value)
        if token.type is TokenType.LPAREN:
            result = self.parse_expression()
            if self._next().type is not TokenType.RPAREN:
                raise ValueError("Expected closing parenthesis")
            return result
        raise ValueError(f"Unexpected token: {token.value}")

    def _peek(self) -> Token:
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return _END

    def _next(self) -> Token:
        token = self._peek()
        if self._pos < len(self._tokens):
            self._pos += 1
        return token