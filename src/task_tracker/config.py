"""Settings loaded from TRACKER_* environment variables."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, List, Mapping, Optional

from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "TRACKER"


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


class Settings(BaseModel):
    log_level: str = "INFO"
    log_dir: Optional[Path] = None
    active_users: List[int] = Field(default_factory=list)

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {v}")
        return v

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        raw: Dict[str, object] = {}

        level = env.get(_k("LOG_LEVEL"), "").strip()
        if level:
            raw["log_level"] = level

        log_dir = env.get(_k("LOG_DIR"), "").strip()
        if log_dir:
            raw["log_dir"] = Path(log_dir).expanduser()

        users = env.get(_k("ACTIVE_USERS"), "")
        parts = [p for p in users.replace(",", " ").split() if p]
        if parts:
            raw["active_users"] = parts

        return cls.model_validate(raw)
