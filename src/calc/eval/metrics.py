from __future__ import annotations

from collections import Counter
from typing import Any, Iterable

import numpy as np

from calc.verify.base import VerifierResult


def pass_rate(valid: Iterable[bool]) -> float:
    vals = list(valid)
    return float(np.mean(vals)) if vals else 0.0


def violation_counts(results: Iterable[VerifierResult]) -> dict[str, int]:
    counts: Counter[str] = Counter()
    for res in results:
        counts.update(res.violations.keys())
    return dict(sorted(counts.items()))


def summarize(results: list[VerifierResult]) -> dict[str, Any]:
    return {
        "total": len(results),
        "passed": sum(1 for r in results if r.valid),
        "pass_rate": pass_rate(r.valid for r in results),
        "violations": violation_counts(results),
    }
