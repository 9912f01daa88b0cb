from __future__ import annotations

from typing import Sequence


class PruneError(Exception):
    """Base for every failure the prune pipeline reports to the user."""

    exit_code: int = 1
    message: str = "Prune failed"

    def __str__(self) -> str:
        return self.message


class InvalidArgument(PruneError):
    exit_code = 3

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Invalid argument provided for argument {self.name}"


class TimeSubtractionError(PruneError):
    exit_code = 4
    message = "Failed to subtract time"


class Cancelled(PruneError):
    exit_code = 5
    message = "Cancelled by user."


class ReadDirError(PruneError):
    exit_code = 6

    def __init__(self, dirname: str) -> None:
        super().__init__(dirname)
        self.dirname = dirname

    def __str__(self) -> str:
        return f"Failed to read directory {self.dirname!r}"


class ReadDirEntryError(PruneError):
    exit_code = 7
    message = "Failed to read dir entry"


class ReadFileError(PruneError):
    exit_code = 8
    message = "Failed to read file"


class DeleteFailed(PruneError):
    exit_code = 9

    def __init__(self, filenames: Sequence[str], removed: int = 0) -> None:
        super().__init__(*filenames)
        self.filenames = list(filenames)
        self.removed = removed

    def __str__(self) -> str:
        names = ", ".join(repr(n) for n in self.filenames)
        return f"Failed to delete {names} (removed {self.removed})"
