from __future__ import annotations

import pytest

from calc.dsl.lexer import tokenize
from calc.dsl.postfix import to_postfix
from calc.dsl.tokens import Number, render_tokens
from calc.errors import InvalidToken, MismatchedParentheses


def _rpn(text: str) -> str:
    return render_tokens(to_postfix(tokenize(text)))


def test_precedence_orders_multiplication_first() -> None:
    assert _rpn("2+3*4") == "2.0 3.0 4.0 * +"


def test_parentheses_override_precedence() -> None:
    assert _rpn("(2+3)*4") == "2.0 3.0 + 4.0 *"


def test_equal_precedence_is_left_associative() -> None:
    assert _rpn("8-3-2") == "8.0 3.0 - 2.0 -"
    assert _rpn("8/4/2") == "8.0 4.0 / 2.0 /"
    assert _rpn("6/2*3") == "6.0 2.0 / 3.0 *"


def test_nested_parentheses() -> None:
    assert _rpn("((1+2))*(3-(4/5))") == "1.0 2.0 + 3.0 4.0 5.0 / - *"


def test_output_contains_no_parentheses() -> None:
    out = to_postfix(tokenize("(1+(2))"))
    assert [str(t) for t in out] == ["1.0", "2.0", "+"]


@pytest.mark.parametrize("text", ["(1+2", "1+2)", ")(", "((1)", "1)+(2"])
def test_mismatched_parentheses(text: str) -> None:
    with pytest.raises(MismatchedParentheses):
        to_postfix(tokenize(text))


def test_unknown_token_type_is_rejected() -> None:
    with pytest.raises(InvalidToken):
        to_postfix([Number(1.0), "+", Number(2.0)])  # type: ignore[list-item]
