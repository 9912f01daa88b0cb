from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Callable

import pytest

from fsutil import set_mtime


@pytest.fixture
def now() -> datetime:
    return datetime(2026, 10, 19, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def make_entry(tmp_path: Path) -> Callable[..., Path]:
    def _make(name: str, age: timedelta, *, now: datetime, is_dir: bool = False) -> Path:
        p = tmp_path / name
        if is_dir:
            p.mkdir()
            (p / "inner.txt").write_text("x", encoding="utf-8")
        else:
            p.write_text("x", encoding="utf-8")
        set_mtime(p, now - age)
        return p

    return _make


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    root = logging.getLogger()
    for h in list(root.handlers):
        if getattr(h, "_ageprune_handler", False):
            root.removeHandler(h)
            h.close()
