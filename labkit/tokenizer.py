"""Lexical analysis of arithmetic expressions."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Kinds of token an expression is split into."""

    NUMBER = auto()
    PLUS = auto()
    MINUS = auto()
    MULTIPLY = auto()
    DIVIDE = auto()
    LPAREN = auto()
    RPAREN = auto()
    END = auto()


@dataclass(frozen=True)
class Token:
    """A single lexical unit: its kind and the text it was read from."""

    type: TokenType
    value: str = ""


_SYMBOLS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}

_TOKEN_RE = re.compile(
    r"[ \t\n\r\f\v]*(?:(?P<number>[0-9]+)|(?P<symbol>.))?", re.DOTALL
)

_END = Token(TokenType.END, "")


class Tokenizer:
    """Splits an expression into tokens.

    Whitespace is skipped; numbers are runs of decimal digits. Scanning stops
    at the end of the text or at the first character that is not recognised,
    and the token list always finishes with a single END token.
    """

    def __init__(self, expression: str) -> None:
        self._expression = expression

    def tokenize(self) -> list[Token]:
        """Return every token of the expression, ending with END."""
        return list(self._scan())

    def _scan(self) -> Iterator[Token]:
        text = self._expression
        pos = 0
        while True:
            match = _TOKEN_RE.match(text, pos)
            pos = match.end()
            number = match.group("number")
            if number is not None:
                yield Token(TokenType.NUMBER, number)
                continue
            symbol = match.group("symbol")
            kind = _SYMBOLS.get(symbol) if symbol is not None else None
            if kind is None:
                yield _END
                return
            yield Token(kind, symbol)