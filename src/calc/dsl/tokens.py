from __future__ import annotations

from dataclasses import dataclass

OP_SYMBOLS = ("+", "-", "*", "/")
PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2}
LEFT_ASSOC = {"+": True, "-": True, "*": True, "/": True}

DIGITS = "0123456789"
ALLOWED_CHARS = frozenset(DIGITS + ".()+-*/ ")


def validate_operator(symbol: str) -> None:
    if symbol not in OP_SYMBOLS:
        raise ValueError(f"Unknown operator: {symbol}")


@dataclass(frozen=True)
class Number:
    value: float

    def __str__(self) -> str:
        return repr(self.value)


@dataclass(frozen=True)
class Operator:
    symbol: str

    def __post_init__(self) -> None:
        validate_operator(self.symbol)

    @property
    def precedence(self) -> int:
        return PRECEDENCE[self.symbol]

    @property
    def left_assoc(self) -> bool:
        return LEFT_ASSOC[self.symbol]

    def __str__(self) -> str:
        return self.symbol


@dataclass(frozen=True)
class LeftParen:
    def __str__(self) -> str:
        return "("


@dataclass(frozen=True)
class RightParen:
    def __str__(self) -> str:
        return ")"


Token = Number | Operator | LeftParen | RightParen


def render_tokens(tokens: list[Token]) -> str:
    return " ".join(str(tok) for tok in tokens)
