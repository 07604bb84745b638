from __future__ import annotations

import math

from calc.dsl.tokens import ALLOWED_CHARS, DIGITS, LeftParen, Number, Operator, RightParen, Token
from calc.errors import InvalidCharacter


def _scan_literal(text: str, start: int) -> int:
    """Return the end index of the numeric literal beginning at ``start``."""
    j = start
    saw_dot = False
    while j < len(text):
        nxt = text[j]
        if nxt in DIGITS:
            j += 1
            continue
        if nxt == "." and not saw_dot:
            saw_dot = True
            j += 1
            continue
        break
    return j


def _parse_literal(text: str, start: int, end: int) -> float:
    literal = text[start:end]
    if not any(ch in DIGITS for ch in literal):
        raise InvalidCharacter(".", start + literal.index("."))
    value = float(literal)
    if not math.isfinite(value):
        raise InvalidCharacter(text[start], start)
    return value


def _sign_position(tokens: list[Token]) -> bool:
    # A '-' is a sign at the start, after an operator or after '('.
    if not tokens:
        return True
    return isinstance(tokens[-1], (Operator, LeftParen))


def tokenize(text: str) -> list[Token]:
    tokens: list[Token] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch not in ALLOWED_CHARS:
            raise InvalidCharacter(ch, i)
        if ch == " ":
            i += 1
            continue
        if ch == "-" and _sign_position(tokens):
            j = _scan_literal(text, i + 1)
            if j == i + 1:
                tokens.append(Operator("-"))
                i += 1
                continue
            tokens.append(Number(-_parse_literal(text, i + 1, j)))
            i = j
            continue
        if ch == "(":
            tokens.append(LeftParen())
            i += 1
            continue
        if ch == ")":
            tokens.append(RightParen())
            i += 1
            continue
        if ch in "+-*/":
            tokens.append(Operator(ch))
            i += 1
            continue
        j = _scan_literal(text, i)
        tokens.append(Number(_parse_literal(text, i, j)))
        i = j
    return tokens
