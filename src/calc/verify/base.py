from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class VerifierResult(BaseModel):
    valid: bool
    violations: dict[str, float] = Field(default_factory=dict)
    meta: dict[str, Any] = Field(default_factory=dict)
