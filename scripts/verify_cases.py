from __future__ import annotations

import json
from pathlib import Path

import typer

from calc.eval.metrics import summarize
from calc.util.config import load_config
from calc.util.logging import configure_logging, get_logger
from calc.verify.cases import CaseVerifier, load_cases

app = typer.Typer(add_completion=False)


@app.command()
def main(
    cases: str = typer.Option(..., "--cases", help="JSONL file of {id, expr, expected} rows."),
    out_path: str = typer.Option("out/cases_report.json", "--out", "--out-path"),
    config: str = typer.Option("", "--config"),
    min_pass_rate: float = typer.Option(1.0, "--min-pass-rate"),
) -> None:
    configure_logging()
    logger = get_logger(__name__)
    cfg = load_config(config or None)
    rows = load_cases(cases)
    verifier = CaseVerifier(format_kwargs=cfg.format_kwargs())
    results = verifier.verify_batch(rows)
    summary = summarize(results)
    report = {
        "summary": summary,
        "cases": [
            {"id": case.id, "expr": case.expr, **res.model_dump()} for case, res in zip(rows, results)
        ],
    }
    Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    Path(out_path).write_text(json.dumps(report, indent=2))
    logger.info(
        "verify_cases complete total=%d passed=%d pass_rate=%.4f out=%s",
        summary["total"],
        summary["passed"],
        summary["pass_rate"],
        out_path,
    )
    print(f"pass_rate={summary['pass_rate']:.4f} ({summary['passed']}/{summary['total']})")
    if summary["pass_rate"] < min_pass_rate:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
