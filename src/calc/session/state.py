from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Any

from calc.dsl.tokens import DIGITS, OP_SYMBOLS
from calc.errors import EvalError
from calc.interp.core import evaluate
from calc.util.config import DEFAULT_MAX_LEN
from calc.util.logging import get_logger
from calc.util.numfmt import ERROR_TEXT, ZERO_TEXT, format_number, plain_number

logger = get_logger(__name__)

_TRAILING_NUMBER_RE = re.compile(r"[0-9]*\.?[0-9]*$")
# Last numeric run with no digit anywhere after it.
_LAST_NUMBER_RE = re.compile(r"([0-9]*\.?[0-9]+)(?!.*[0-9])")

_FRESH_START = frozenset(DIGITS + ".(")


@dataclass(frozen=True)
class Session:
    """Editing state threaded through every input operation."""

    expr: str = ""
    result: str = ZERO_TEXT
    just_evaluated: bool = False


def _clamp(text: str, max_len: int) -> str:
    return text[:max_len]


def _is_operator(ch: str) -> bool:
    return ch in OP_SYMBOLS


def handle_input(session: Session, ch: str, *, max_len: int = DEFAULT_MAX_LEN) -> Session:
    if len(ch) != 1:
        return session
    if session.just_evaluated and ch in _FRESH_START:
        session = replace(session, expr="", result=ZERO_TEXT)
    session = replace(session, just_evaluated=False)
    expr = session.expr

    if ch in DIGITS:
        return replace(session, expr=_clamp(expr + ch, max_len))
    if ch == ".":
        current = _TRAILING_NUMBER_RE.search(expr).group(0)
        if "." in current:
            return session
        suffix = "0." if current == "" else "."
        return replace(session, expr=_clamp(expr + suffix, max_len))
    if _is_operator(ch):
        if not expr and ch != "-":
            return session
        if expr and _is_operator(expr[-1]):
            return replace(session, expr=expr[:-1] + ch)
        return replace(session, expr=_clamp(expr + ch, max_len))
    if ch in "()":
        return replace(session, expr=_clamp(expr + ch, max_len))
    return session


def apply_percent(session: Session, *, max_len: int = DEFAULT_MAX_LEN) -> Session:
    match = _LAST_NUMBER_RE.search(session.expr)
    if match is None:
        return session
    value = float(match.group(1)) / 100
    expr = session.expr[: match.start()] + plain_number(value) + session.expr[match.end() :]
    return replace(session, expr=_clamp(expr, max_len))


def delete_last(session: Session) -> Session:
    if not session.expr:
        return session
    return replace(session, expr=session.expr[:-1])


def clear(session: Session) -> Session:
    return Session()


def evaluate_and_commit(session: Session, *, format_kwargs: dict[str, Any] | None = None) -> Session:
    if not session.expr:
        return session
    try:
        result = format_number(evaluate(session.expr), **(format_kwargs or {}))
    except EvalError as exc:
        logger.debug("session eval failed expr=%r kind=%s", session.expr, exc.kind)
        result = ERROR_TEXT
    return replace(session, result=result, just_evaluated=True)
