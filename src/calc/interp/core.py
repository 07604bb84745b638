from __future__ import annotations

import math
import operator
from typing import Callable

from pydantic import BaseModel

from calc.dsl.lexer import tokenize
from calc.dsl.postfix import to_postfix
from calc.dsl.tokens import Number, Operator, Token, render_tokens
from calc.errors import EvalError, InvalidToken, MalformedExpression
from calc.util.logging import get_logger

logger = get_logger(__name__)


def _divide(a: float, b: float) -> float:
    if b == 0:
        return math.nan
    return a / b


_BIN_OPS: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
}


class EvalOutcome(BaseModel):
    value: float | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def eval_postfix(rpn: list[Token]) -> float:
    stack: list[float] = []
    for tok in rpn:
        if isinstance(tok, Number):
            stack.append(tok.value)
        elif isinstance(tok, Operator):
            if len(stack) < 2:
                raise MalformedExpression(f"Missing operand for {tok.symbol!r}")
            b = stack.pop()
            a = stack.pop()
            stack.append(_BIN_OPS[tok.symbol](a, b))
        else:
            raise InvalidToken(f"Invalid postfix token: {tok!r}")
    if len(stack) != 1:
        raise MalformedExpression(f"Expected one value on the stack, found {len(stack)}")
    return stack[0]


def evaluate(text: str) -> float:
    tokens = tokenize(text)
    rpn = to_postfix(tokens)
    logger.debug("eval text=%r rpn=%r", text, render_tokens(rpn))
    return eval_postfix(rpn)


def try_evaluate(text: str) -> EvalOutcome:
    try:
        return EvalOutcome(value=evaluate(text))
    except EvalError as exc:
        logger.debug("eval failed text=%r kind=%s detail=%s", text, exc.kind, exc)
        return EvalOutcome(error=exc.kind)
