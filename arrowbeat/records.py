"""Best scores kept on disk, one small text file per difficulty."""

from __future__ import annotations

import os
import re
from pathlib import Path

from arrowbeat.music import Difficulty

RECORD_PREFIX = "arrowbeat_record_"
_READ_LIMIT = 16
_LEADING_INT = re.compile(rb"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def record_filename(difficulty: Difficulty) -> str:
    """Return the file name holding the record for a difficulty."""
    return f"{RECORD_PREFIX}{Difficulty(difficulty).name.lower()}.txt"


def _leading_int(data: bytes) -> int:
    match = _LEADING_INT.match(data)
    return int(match.group(1)) if match else 0


class RecordStore:
    """Reads and writes per-difficulty records inside one directory."""

    def __init__(self, directory: str | os.PathLike[str]) -> None:
        self.directory = Path(directory)

    def path(self, difficulty: Difficulty) -> Path:
        """Return the full path of the record file for a difficulty."""
        return self.directory / record_filename(difficulty)

    def load(self, difficulty: Difficulty) -> int:
        """Return the stored record, or 0 when there is none or it cannot be read."""
        try:
            with self.path(difficulty).open("rb") as handle:
                data = handle.read(_READ_LIMIT)
        except OSError:
            return 0
        return _leading_int(data)

    def save(self, difficulty: Difficulty, record: int) -> None:
        """Store a record as decimal text."""
        self.directory.mkdir(parents=True, exist_ok=True)
        self.path(difficulty).write_text(str(int(record)), encoding="ascii")