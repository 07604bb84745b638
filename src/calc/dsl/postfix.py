from __future__ import annotations

from calc.dsl.tokens import LeftParen, Number, Operator, RightParen, Token
from calc.errors import InvalidToken, MismatchedParentheses


def _should_pop(top: Operator | LeftParen, op: Operator) -> bool:
    if not isinstance(top, Operator):
        return False
    if top.precedence > op.precedence:
        return True
    return top.precedence == op.precedence and op.left_assoc


def to_postfix(tokens: list[Token]) -> list[Token]:
    """Reorder infix tokens into postfix with the shunting-yard algorithm.

    Parentheses are consumed here; the returned sequence holds only numbers
    and operators.
    """
    out: list[Token] = []
    ops: list[Operator | LeftParen] = []
    for tok in tokens:
        if isinstance(tok, Number):
            out.append(tok)
        elif isinstance(tok, Operator):
            while ops and _should_pop(ops[-1], tok):
                out.append(ops.pop())
            ops.append(tok)
        elif isinstance(tok, LeftParen):
            ops.append(tok)
        elif isinstance(tok, RightParen):
            while ops and not isinstance(ops[-1], LeftParen):
                out.append(ops.pop())
            if not ops:
                raise MismatchedParentheses("Unmatched ')'")
            ops.pop()
        else:
            raise InvalidToken(f"Invalid token: {tok!r}")
    while ops:
        top = ops.pop()
        if isinstance(top, LeftParen):
            raise MismatchedParentheses("Unmatched '('")
        out.append(top)
    return out
