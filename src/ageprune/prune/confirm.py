from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable

from ageprune.common.errors import Cancelled

from .threshold import format_threshold

log = logging.getLogger("ageprune.confirm")

CONFIRM_ANSWER = "y"

ReadLine = Callable[[str], str]


def confirmation_prompt(threshold: datetime, path: Path) -> str:
    return (
        f"Removing all files older than {format_threshold(threshold)} in {str(path)!r}. "
        f'Enter "{CONFIRM_ANSWER}" to confirm. '
    )


def confirm(threshold: datetime, path: Path, read_line: ReadLine = input) -> None:
    # exact match only: "Y", "yes" and "" all cancel
    try:
        answer = read_line(confirmation_prompt(threshold, path))
    except EOFError as e:
        raise Cancelled() from e
    if answer != CONFIRM_ANSWER:
        log.info("confirm: declined answer=%r", answer)
        raise Cancelled()
