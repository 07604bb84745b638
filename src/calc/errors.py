from __future__ import annotations


class EvalError(ValueError):
    """Base class for every failure raised by the evaluation pipeline."""

    kind = "EvalError"


class InvalidCharacter(EvalError):
    kind = "InvalidCharacter"

    def __init__(self, char: str, pos: int) -> None:
        self.char = char
        self.pos = pos
        super().__init__(f"Invalid character {char!r} at position {pos}")


class MismatchedParentheses(EvalError):
    kind = "MismatchedParentheses"


class InvalidToken(EvalError):
    kind = "InvalidToken"


class MalformedExpression(EvalError):
    kind = "MalformedExpression"
