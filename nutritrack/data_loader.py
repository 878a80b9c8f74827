from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Iterator, Optional, Tuple

import pandas as pd

logger = logging.getLogger(__name__)

PHONE_COLUMN = 0
USER_ID_COLUMN = 1
SEX_HEADER = "Sex"


class DatasetUnavailableError(FileNotFoundError):
    """The bundled user dataset is missing or unreadable (a packaging defect)."""


Row = Tuple[str, ...]


@dataclass(frozen=True)
class UserTable:
    """Parsed roster CSV: header + raw rows, split naively on commas."""

    header: Row
    rows: Tuple[Row, ...]

    def column_index(self, name: str) -> int:
        try:
            return self.header.index(name)
        except ValueError:
            return -1

    def iter_records(self) -> Iterator[Row]:
        """Rows with at least a phone and an id column; shorter rows are skipped."""
        for row in self.rows:
            if len(row) > USER_ID_COLUMN:
                yield row

    def find_row(self, user_id: str) -> Optional[Row]:
        # First match wins; duplicate ids further down are ignored.
        for row in self.iter_records():
            if row[USER_ID_COLUMN].strip() == user_id:
                return row
        return None

    def sex_of(self, row: Row) -> str:
        idx = self.column_index(SEX_HEADER)
        if idx < 0 or idx >= len(row):
            return ""
        return row[idx].strip()


def parse_table(text: str) -> UserTable:
    lines = text.splitlines()
    if not lines:
        return UserTable(header=(), rows=())
    header = tuple(lines[0].split(","))
    rows = tuple(tuple(line.split(",")) for line in lines[1:])
    return UserTable(header=header, rows=rows)


@lru_cache(maxsize=4)
def _parse_cached(raw: bytes) -> UserTable:
    # Keyed on the file's bytes, so any rewrite is picked up regardless of timestamps.
    logger.debug("Parsing user dataset (%d bytes)", len(raw))
    return parse_table(raw.decode("utf-8-sig"))


def load_user_table(data_file: Path) -> UserTable:
    """Load the roster, re-parsing only when the file's content changes."""
    path = Path(data_file).expanduser()
    if not path.exists():
        raise DatasetUnavailableError(f"User dataset not found: {path}")
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise DatasetUnavailableError(f"User dataset not readable: {path}") from exc
    try:
        return _parse_cached(raw)
    except UnicodeDecodeError as exc:
        raise DatasetUnavailableError(f"User dataset is not valid UTF-8: {path}") from exc


def sum_score_cells(cells: Iterable[str]) -> float:
    """Sum raw score cells; blanks and non-numeric text count as zero."""
    values = pd.Series([c.strip() for c in cells], dtype=object)
    if values.empty:
        return 0.0
    return float(pd.to_numeric(values, errors="coerce").fillna(0.0).sum())
