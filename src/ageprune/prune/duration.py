from __future__ import annotations

import re
from dataclasses import dataclass

from ageprune.common.errors import InvalidArgument

SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24
DAYS_PER_WEEK = 7

SECONDS_PER_DAY = SECONDS_PER_MINUTE * MINUTES_PER_HOUR * HOURS_PER_DAY
SECONDS_PER_WEEK = SECONDS_PER_DAY * DAYS_PER_WEEK

UNIT_SECONDS: dict[str, int] = {
    "d": SECONDS_PER_DAY,
    "w": SECONDS_PER_WEEK,
}

MAX_SECONDS = 2**64 - 1

_MAGNITUDE = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class Duration:
    seconds: int


def parse_duration(text: str, *, name: str = "duration") -> Duration:
    """
    Parse "<n>d" or "<n>w" into a Duration.

    The magnitude must be a plain non-negative decimal integer: no sign,
    whitespace, underscores or fraction.
    """
    if not text or text[-1] not in UNIT_SECONDS:
        raise InvalidArgument(name)

    magnitude, unit = text[:-1], text[-1]
    # re.fullmatch with [0-9] rejects unicode digits that int() would accept
    if not _MAGNITUDE.fullmatch(magnitude):
        raise InvalidArgument(name)

    seconds = int(magnitude) * UNIT_SECONDS[unit]
    if seconds > MAX_SECONDS:
        raise InvalidArgument(name)
    return Duration(seconds=seconds)
