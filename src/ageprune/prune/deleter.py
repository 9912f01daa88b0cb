from __future__ import annotations

import logging
import os
import shutil
import stat
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable

from ageprune.common.errors import DeleteFailed

from .scanner import ScannedEntry, is_older

log = logging.getLogger("ageprune.delete")


@dataclass
class DeletionReport:
    removed: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)


def _remove(entry: ScannedEntry, threshold: datetime) -> bool:
    """
    Remove one old entry. Returns False when the entry changed since the
    scan and was left in place; raises OSError on failure.
    """
    st = os.lstat(entry.path)
    if not is_older(st, threshold):
        return False

    if stat.S_ISLNK(st.st_mode):
        if not os.path.exists(entry.path):
            raise OSError(f"dangling symlink: {entry.path}")
        os.unlink(entry.path)
    elif stat.S_ISREG(st.st_mode):
        os.unlink(entry.path)
    elif stat.S_ISDIR(st.st_mode):
        shutil.rmtree(entry.path)
    else:
        raise OSError(f"neither file nor directory: {entry.path}")
    return True


def delete_old_entries(entries: Iterable[ScannedEntry], threshold: datetime) -> DeletionReport:
    """Attempt every old entry; one failure does not stop the rest."""
    report = DeletionReport()
    for entry in entries:
        if not entry.is_old:
            continue
        try:
            removed = _remove(entry, threshold)
        except OSError as e:
            log.info("delete failed: %s (%s)", entry.name, e)
            report.failed.append(entry.name)
            continue

        if removed:
            log.info("deleted: %s", entry.name)
            report.removed.append(entry.name)
        else:
            log.info("skipped: %s was modified after the scan", entry.name)
            report.skipped.append(entry.name)

    log.info(
        "delete done: removed=%d skipped=%d failed=%d",
        len(report.removed),
        len(report.skipped),
        len(report.failed),
    )
    return report


def require_clean(report: DeletionReport) -> int:
    if report.failed:
        raise DeleteFailed(report.failed, removed=len(report.removed))
    return len(report.removed)
