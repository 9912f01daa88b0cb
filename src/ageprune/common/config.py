from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field


class LoggingCfg(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    dir: Path | None = None  # no file log unless set
    max_bytes: int = 1_000_000
    backups: int = 3


class AppCfg(BaseModel):
    logging: LoggingCfg = Field(default_factory=LoggingCfg)


def load_config(path: Path | None) -> AppCfg:
    data: dict[str, Any] = {}
    if path is not None and path.exists():
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return AppCfg.model_validate(data)
