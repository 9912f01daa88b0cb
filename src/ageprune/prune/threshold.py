from __future__ import annotations

from datetime import datetime, timedelta, timezone

from ageprune.common.errors import TimeSubtractionError

from .duration import Duration

DISPLAY_FORMAT = "%d/%m/%Y %H:%M:%S"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def compute_threshold(duration: Duration, now: datetime | None = None) -> datetime:
    """Return now - duration, or raise TimeSubtractionError if it underflows."""
    if now is None:
        now = utc_now()
    try:
        return now - timedelta(seconds=duration.seconds)
    except OverflowError as e:
        raise TimeSubtractionError() from e


def format_threshold(threshold: datetime) -> str:
    try:
        local = threshold.astimezone()
    except (OverflowError, ValueError, OSError):
        # instants near datetime.min cannot always be shifted to local time
        return threshold.astimezone(timezone.utc).strftime(DISPLAY_FORMAT) + " UTC"
    return local.strftime(DISPLAY_FORMAT)
