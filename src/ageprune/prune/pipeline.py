from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from .confirm import ReadLine, confirm
from .deleter import delete_old_entries, require_clean
from .duration import parse_duration
from .scanner import scan_directory
from .threshold import compute_threshold

log = logging.getLogger("ageprune.pipeline")


def run(
    path: Path,
    duration_text: str,
    read_line: ReadLine = input,
    now: datetime | None = None,
) -> int:
    """
    parse -> threshold -> confirm -> scan -> delete.

    Returns the number of entries removed. The first PruneError from any
    stage propagates and later stages are not run.
    """
    duration = parse_duration(duration_text)
    threshold = compute_threshold(duration, now=now)
    log.info("run: path=%s duration=%ss threshold=%s", path, duration.seconds, threshold.isoformat())

    confirm(threshold, path, read_line=read_line)

    entries = scan_directory(path, threshold)
    report = delete_old_entries(entries, threshold)
    return require_clean(report)
