from __future__ import annotations

_PRETTY = str.maketrans({"*": "×", "/": "÷"})


def pretty_expression(expr: str) -> str:
    return expr.translate(_PRETTY)
