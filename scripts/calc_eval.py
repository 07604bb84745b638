from __future__ import annotations

import typer

from calc.errors import EvalError
from calc.interp.core import evaluate
from calc.util.config import load_config
from calc.util.logging import configure_logging, get_logger
from calc.util.numfmt import ERROR_TEXT, format_number

app = typer.Typer(add_completion=False)


@app.command()
def main(
    exprs: list[str] = typer.Argument(..., help="Expressions to evaluate."),
    config: str = typer.Option("", "--config", help="YAML config path."),
    decimals: int | None = typer.Option(None, "--decimals"),
    group_sep: str | None = typer.Option(None, "--group-sep"),
    log_level: str | None = typer.Option(None, "--log-level"),
    strict: bool = typer.Option(False, "--strict/--no-strict", help="Exit 1 if any result is Error."),
) -> None:
    cfg = load_config(
        config or None,
        {"format.decimals": decimals, "format.group_sep": group_sep, "log_level": log_level},
    )
    configure_logging(cfg.log_level)
    logger = get_logger(__name__)
    failures = 0
    for expr in exprs:
        try:
            text = format_number(evaluate(expr), **cfg.format_kwargs())
        except EvalError as exc:
            logger.warning("eval failed expr=%r kind=%s", expr, exc.kind)
            text = ERROR_TEXT
        if text == ERROR_TEXT:
            failures += 1
        print(text)
    logger.debug("calc_eval complete exprs=%d errors=%d", len(exprs), failures)
    if strict and failures:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
