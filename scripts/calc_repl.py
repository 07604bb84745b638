from __future__ import annotations

import typer
from rich.console import Console

from calc.session.display import pretty_expression
from calc.session.keys import KEY_ALIASES, apply_key
from calc.session.state import Session
from calc.util.config import load_config
from calc.util.logging import configure_logging, get_logger

app = typer.Typer(add_completion=False)

_WORD_KEYS = {alias for alias in KEY_ALIASES if len(alias) > 1} | {"equals", "delete", "clear", "percent"}
_QUIT = {"quit", "exit", "q"}


def split_keys(line: str) -> list[str]:
    """Split an input line into keys; named keys are whole words, the rest is per character."""
    keys: list[str] = []
    for word in line.split():
        if word in _WORD_KEYS:
            keys.append(word)
        else:
            keys.extend(word)
    return keys


def _render(console: Console, session: Session) -> None:
    console.print(f"[dim]{pretty_expression(session.expr) or ' '}[/dim]")
    console.print(f"[bold]{session.result}[/bold]")


@app.command()
def main(
    config: str = typer.Option("", "--config", help="YAML config path."),
    max_len: int | None = typer.Option(None, "--max-len"),
    keys: str | None = typer.Option(None, "--keys", help="Replay a key line instead of reading stdin."),
    log_level: str | None = typer.Option(None, "--log-level"),
) -> None:
    cfg = load_config(config or None, {"session.max_len": max_len, "log_level": log_level})
    configure_logging(cfg.log_level)
    logger = get_logger(__name__)
    console = Console(highlight=False)
    session = Session()
    opts = {"max_len": cfg.session.max_len, "format_kwargs": cfg.format_kwargs()}

    if keys is not None:
        for key in split_keys(keys):
            session = apply_key(session, key, **opts)
        _render(console, session)
        return

    logger.info("calc_repl ready max_len=%d", cfg.session.max_len)
    while True:
        try:
            line = console.input("> ")
        except EOFError:
            break
        if line.strip() in _QUIT:
            break
        for key in split_keys(line):
            session = apply_key(session, key, **opts)
        _render(console, session)


if __name__ == "__main__":
    app()
