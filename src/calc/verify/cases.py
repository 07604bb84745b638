from __future__ import annotations

import math
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from calc.errors import EvalError
from calc.interp.core import evaluate
from calc.util.jsonl import read_jsonl, write_jsonl
from calc.util.logging import get_logger
from calc.util.numfmt import ERROR_TEXT, format_number
from calc.verify.base import VerifierResult

logger = get_logger(__name__)

_ABS_TOL = 1e-9
_REL_TOL = 1e-12


class Case(BaseModel):
    id: str
    expr: str
    expected: str | float
    tags: list[str] = Field(default_factory=list)


def load_cases(path: str | Path) -> list[Case]:
    return [Case.model_validate(row) for row in read_jsonl(path)]


def save_cases(path: str | Path, cases: list[Case]) -> None:
    write_jsonl(path, [case.model_dump() for case in cases])


class CaseVerifier:
    """Checks an expression against an expected display string or value.

    A string expectation is compared with the formatted display text, so
    ``"Error"`` and grouped numbers such as ``"1,234.5"`` are both valid.
    A numeric expectation is compared within a small tolerance.
    """

    name = "cases"

    def __init__(self, format_kwargs: dict[str, Any] | None = None) -> None:
        self.format_kwargs = dict(format_kwargs or {})

    def _run(self, expr: str) -> tuple[float | None, str, str | None]:
        try:
            value = evaluate(expr)
        except EvalError as exc:
            return None, ERROR_TEXT, exc.kind
        return value, format_number(value, **self.format_kwargs), None

    def verify(self, expr: str, expected: Any) -> VerifierResult:
        value, text, error = self._run(expr)
        violations: dict[str, float] = {}
        meta: dict[str, Any] = {"got": text}
        if error is not None:
            meta["error"] = error
        if isinstance(expected, str):
            if text != expected:
                violations["display"] = 1.0
        elif isinstance(expected, (int, float)) and not isinstance(expected, bool):
            if value is None or not math.isfinite(value):
                violations["eval"] = 1.0
            elif not math.isclose(value, float(expected), rel_tol=_REL_TOL, abs_tol=_ABS_TOL):
                violations["value"] = 1.0
        else:
            violations["expected_type"] = 1.0
        if violations:
            meta["expected"] = expected
        return VerifierResult(valid=not violations, violations=violations, meta=meta)

    def verify_batch(self, cases: list[Case]) -> list[VerifierResult]:
        results: list[VerifierResult] = []
        for case in cases:
            res = self.verify(case.expr, case.expected)
            if not res.valid:
                logger.debug("case failed id=%s expr=%r meta=%s", case.id, case.expr, res.meta)
            results.append(res)
        return results
