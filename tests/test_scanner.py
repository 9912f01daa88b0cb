from __future__ import annotations

import os
from datetime import datetime, timedelta
from pathlib import Path

import pytest

from ageprune.common.errors import ReadDirEntryError, ReadDirError, ReadFileError
from ageprune.prune.scanner import scan_directory, to_ns
from fsutil import DAY, FakeEntry, FakeListing, set_mtime


def test_classifies_old_and_recent(tmp_path: Path, make_entry, now: datetime) -> None:
    make_entry("a.txt", 40 * DAY, now=now)
    make_entry("b.txt", 1 * DAY, now=now)
    make_entry("olddir", 90 * DAY, now=now, is_dir=True)

    threshold = now - 30 * DAY
    result = {e.name: e.is_old for e in scan_directory(tmp_path, threshold)}
    assert result == {"a.txt": True, "b.txt": False, "olddir": True}


def test_is_not_recursive(tmp_path: Path, make_entry, now: datetime) -> None:
    make_entry("recent_dir", 1 * DAY, now=now, is_dir=True)
    set_mtime(tmp_path / "recent_dir" / "inner.txt", now - 100 * DAY)
    set_mtime(tmp_path / "recent_dir", now - 1 * DAY)

    names = [e.name for e in scan_directory(tmp_path, now - 30 * DAY)]
    assert names == ["recent_dir"]


def test_modified_exactly_at_threshold_is_not_old(tmp_path: Path, now: datetime) -> None:
    p = tmp_path / "edge.txt"
    p.write_text("x", encoding="utf-8")
    threshold = now - 30 * DAY
    set_mtime(p, threshold)

    (entry,) = scan_directory(tmp_path, threshold)
    assert entry.modified == threshold
    assert entry.is_old is False


def test_one_second_before_threshold_is_old(tmp_path: Path, now: datetime) -> None:
    p = tmp_path / "edge.txt"
    p.write_text("x", encoding="utf-8")
    threshold = now - 30 * DAY
    set_mtime(p, threshold - timedelta(seconds=1))

    (entry,) = scan_directory(tmp_path, threshold)
    assert entry.is_old is True


def test_empty_directory(tmp_path: Path, now: datetime) -> None:
    assert scan_directory(tmp_path, now) == []


def test_missing_directory_is_read_dir_error(tmp_path: Path, now: datetime) -> None:
    missing = tmp_path / "nope"
    with pytest.raises(ReadDirError) as exc:
        scan_directory(missing, now)
    assert exc.value.dirname == str(missing)


def test_file_path_is_read_dir_error(tmp_path: Path, now: datetime) -> None:
    f = tmp_path / "file.txt"
    f.write_text("x", encoding="utf-8")
    with pytest.raises(ReadDirError):
        scan_directory(f, now)


def test_sub_microsecond_difference_is_old(tmp_path: Path, now: datetime) -> None:
    p = tmp_path / "edge.txt"
    p.write_text("x", encoding="utf-8")
    threshold = now + timedelta(microseconds=1)
    mtime_ns = to_ns(threshold) - 400
    os.utime(p, ns=(mtime_ns, mtime_ns))

    (entry,) = scan_directory(tmp_path, threshold)
    assert entry.is_old is True


def test_entry_read_error_aborts_scan(tmp_path: Path, make_entry, now: datetime, monkeypatch) -> None:
    first = make_entry("a.txt", 40 * DAY, now=now)
    listing = FakeListing([FakeEntry(first), OSError("listing broke")])
    monkeypatch.setattr("ageprune.prune.scanner.os.scandir", lambda path: listing)

    result = None
    with pytest.raises(ReadDirEntryError):
        result = scan_directory(tmp_path, now - 30 * DAY)
    assert result is None


def test_metadata_error_aborts_scan(tmp_path: Path, make_entry, now: datetime, monkeypatch) -> None:
    first = make_entry("a.txt", 40 * DAY, now=now)
    second = make_entry("b.txt", 40 * DAY, now=now)
    listing = FakeListing([FakeEntry(first), FakeEntry(second, error=PermissionError("denied"))])
    monkeypatch.setattr("ageprune.prune.scanner.os.scandir", lambda path: listing)

    result = None
    with pytest.raises(ReadFileError):
        result = scan_directory(tmp_path, now - 30 * DAY)
    assert result is None
