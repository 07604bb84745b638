from __future__ import annotations

import math

import numpy as np

ERROR_TEXT = "Error"
ZERO_TEXT = "0"
DEFAULT_DECIMALS = 10


def _group_digits(whole: str, sep: str) -> str:
    if not sep:
        return whole
    return f"{int(whole):,}".replace(",", sep)


def _positional(n: float) -> str:
    # Shortest round-trip digits, never in exponent form.
    return np.format_float_positional(float(n), unique=True, trim="-")


def format_number(
    n: float,
    *,
    decimals: int = DEFAULT_DECIMALS,
    group_sep: str = ",",
    decimal_sep: str = ".",
) -> str:
    """Render a result for display.

    Rounds to ``decimals`` places to hide binary floating-point noise, groups
    the integer digits in thousands and strips trailing fractional zeros.
    Output is always fixed-point; non-finite input yields ``"Error"``.
    """
    if not math.isfinite(n):
        return ERROR_TEXT
    rounded = round(float(n), decimals)
    if rounded == 0:
        rounded = 0.0  # drops the sign of negative zero
    text = _positional(rounded)
    sign = ""
    if text.startswith("-"):
        sign, text = "-", text[1:]
    whole, _, frac = text.partition(".")
    frac = frac.rstrip("0")
    out = sign + _group_digits(whole, group_sep)
    if frac:
        out += decimal_sep + frac
    return out


def plain_number(n: float) -> str:
    """Unrounded, ungrouped rendering that the tokenizer accepts back as a literal."""
    return _positional(n)
