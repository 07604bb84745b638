from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

DEFAULT_MAX_LEN = 64


class SessionConfig(BaseModel):
    max_len: int = Field(DEFAULT_MAX_LEN, ge=1)


class FormatConfig(BaseModel):
    decimals: int = Field(10, ge=0, le=15)
    group_sep: str = ","
    decimal_sep: str = "."


class CalcConfig(BaseModel):
    session: SessionConfig = Field(default_factory=SessionConfig)
    format: FormatConfig = Field(default_factory=FormatConfig)
    log_level: str = "INFO"

    def format_kwargs(self) -> dict[str, Any]:
        return self.format.model_dump()


def read_config(path: str | Path | None) -> dict[str, Any]:
    if not path:
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config root must be a mapping: {path}")
    return data


def merge_config(cfg: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """Overlay non-None overrides onto ``cfg``.

    Dotted keys (``"session.max_len"``) address nested sections.
    """
    merged: dict[str, Any] = {k: (dict(v) if isinstance(v, dict) else v) for k, v in cfg.items()}
    for key, value in overrides.items():
        if value is None:
            continue
        section, _, leaf = key.rpartition(".")
        if not section:
            merged[key] = value
            continue
        target = merged.setdefault(section, {})
        if not isinstance(target, dict):
            raise ValueError(f"Config section {section!r} is not a mapping")
        target[leaf] = value
    return merged


def resolve_max_len(
    cli_value: int | None,
    cfg: dict[str, Any] | None,
    *,
    default: int = DEFAULT_MAX_LEN,
) -> int:
    if cli_value is not None:
        return int(cli_value)
    if cfg:
        session_cfg = cfg.get("session")
        if isinstance(session_cfg, dict) and "max_len" in session_cfg:
            return int(session_cfg["max_len"])
        if "max_len" in cfg:
            return int(cfg["max_len"])
    return int(default)


def load_config(path: str | Path | None = None, overrides: dict[str, Any] | None = None) -> CalcConfig:
    raw = merge_config(read_config(path), overrides or {})
    raw.setdefault("session", {})
    if isinstance(raw["session"], dict):
        raw["session"]["max_len"] = resolve_max_len(None, raw)
    raw.pop("max_len", None)
    return CalcConfig.model_validate(raw)
