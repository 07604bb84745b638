from __future__ import annotations

from pathlib import Path

import pytest

from calc.eval.metrics import pass_rate, summarize, violation_counts
from calc.verify.cases import Case, CaseVerifier, load_cases, save_cases


def test_display_expectations() -> None:
    verifier = CaseVerifier()
    assert verifier.verify("2+3*4", "14").valid
    assert verifier.verify("5/0", "Error").valid
    assert verifier.verify("(1+2", "Error").valid
    assert verifier.verify("1234*1000+567", "1,234,567").valid
    bad = verifier.verify("2+3*4", "20")
    assert not bad.valid
    assert bad.violations == {"display": 1.0}
    assert bad.meta["got"] == "14"
    assert bad.meta["expected"] == "20"


def test_numeric_expectations() -> None:
    verifier = CaseVerifier()
    assert verifier.verify("0.1+0.2", 0.3).valid
    assert verifier.verify("10/4", 2.5).valid
    assert verifier.verify("10/4", 3).violations == {"value": 1.0}
    assert verifier.verify("1/0", 0.0).violations == {"eval": 1.0}
    res = verifier.verify("1+", 1.0)
    assert res.violations == {"eval": 1.0}
    assert res.meta["error"] == "MalformedExpression"


def test_format_options_apply_to_display() -> None:
    verifier = CaseVerifier(format_kwargs={"group_sep": ".", "decimal_sep": ","})
    assert verifier.verify("1000.5*1", "1.000,5").valid


def test_cases_roundtrip_and_batch(tmp_path: Path) -> None:
    cases = [
        Case(id="a", expr="2+2", expected="4"),
        Case(id="b", expr="2*2", expected=5.0),
        Case(id="c", expr="1/0", expected="Error", tags=["div0"]),
    ]
    path = tmp_path / "cases.jsonl"
    save_cases(path, cases)
    loaded = load_cases(path)
    assert [c.id for c in loaded] == ["a", "b", "c"]
    assert loaded[2].tags == ["div0"]
    results = CaseVerifier().verify_batch(loaded)
    assert [r.valid for r in results] == [True, False, True]
    summary = summarize(results)
    assert summary["total"] == 3
    assert summary["passed"] == 2
    assert summary["pass_rate"] == pytest.approx(2 / 3)
    assert summary["violations"] == {"value": 1}


def test_bundled_cases_all_pass() -> None:
    path = Path(__file__).resolve().parents[1] / "data" / "cases.jsonl"
    results = CaseVerifier().verify_batch(load_cases(path))
    assert results
    assert all(r.valid for r in results)


def test_metrics_on_empty_input() -> None:
    assert pass_rate([]) == 0.0
    assert violation_counts([]) == {}


def test_invalid_jsonl_reports_line(tmp_path: Path) -> None:
    path = tmp_path / "bad.jsonl"
    path.write_text('{"id": "a", "expr": "1", "expected": "1"}\n{oops\n', encoding="utf-8")
    with pytest.raises(ValueError, match=":2:"):
        load_cases(path)
