from __future__ import annotations

from functools import partial
from typing import Any, Callable

from calc.session.state import (
    Session,
    apply_percent,
    clear,
    delete_last,
    evaluate_and_commit,
    handle_input,
)
from calc.util.config import DEFAULT_MAX_LEN

INPUT_KEYS = frozenset("0123456789.+-*/()")

KEY_ALIASES = {
    "Enter": "equals",
    "=": "equals",
    "Backspace": "delete",
    "Escape": "clear",
    "%": "percent",
}


def action_for_key(key: str) -> str | None:
    """Map a keyboard key or button action name to a session action name."""
    if key in INPUT_KEYS:
        return "input"
    if key in KEY_ALIASES:
        return KEY_ALIASES[key]
    if key in ("equals", "delete", "clear", "percent"):
        return key
    return None


def apply_key(
    session: Session,
    key: str,
    *,
    max_len: int = DEFAULT_MAX_LEN,
    format_kwargs: dict[str, Any] | None = None,
) -> Session:
    action = action_for_key(key)
    handlers: dict[str, Callable[[Session], Session]] = {
        "input": partial(handle_input, ch=key, max_len=max_len),
        "equals": partial(evaluate_and_commit, format_kwargs=format_kwargs),
        "delete": delete_last,
        "clear": clear,
        "percent": partial(apply_percent, max_len=max_len),
    }
    if action is None:
        return session
    return handlers[action](session)


def apply_keys(session: Session, keys: list[str], **kwargs: Any) -> Session:
    for key in keys:
        session = apply_key(session, key, **kwargs)
    return session
