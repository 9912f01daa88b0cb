from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from pathlib import Path

from ageprune.common.errors import ReadDirEntryError, ReadDirError, ReadFileError

log = logging.getLogger("ageprune.scan")


@dataclass(frozen=True)
class ScannedEntry:
    name: str
    path: Path
    modified: datetime
    is_old: bool


EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def to_ns(when: datetime) -> int:
    return (when - EPOCH) // timedelta(microseconds=1) * 1000


def modified_at(st: os.stat_result) -> datetime:
    return EPOCH + timedelta(microseconds=st.st_mtime_ns // 1000)


def is_older(st: os.stat_result, threshold: datetime) -> bool:
    # compared in whole nanoseconds; datetime only carries microseconds
    return st.st_mtime_ns < to_ns(threshold)


def scan_directory(path: Path, threshold: datetime) -> list[ScannedEntry]:
    """
    Classify every immediate child of ``path`` against ``threshold``.

    The listing is read in full before anything is returned; any error
    aborts the scan so callers never act on a partial classification.
    Symlinks are judged by their own mtime, never their target's.
    """
    try:
        it = os.scandir(path)
    except OSError as e:
        raise ReadDirError(str(path)) from e

    entries: list[ScannedEntry] = []
    with it:
        while True:
            try:
                entry = next(it)
            except StopIteration:
                break
            except OSError as e:
                raise ReadDirEntryError() from e

            try:
                st = entry.stat(follow_symlinks=False)
                modified = modified_at(st)
            except (OSError, OverflowError, ValueError) as e:
                raise ReadFileError() from e

            is_old = is_older(st, threshold)
            log.debug("scan: %s modified=%s old=%s", entry.name, modified.isoformat(), is_old)
            entries.append(
                ScannedEntry(name=entry.name, path=Path(entry.path), modified=modified, is_old=is_old)
            )

    log.info("scan done: path=%s entries=%d old=%d", path, len(entries), sum(e.is_old for e in entries))
    return entries
