from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Set

from .config import settings
from .data_loader import PHONE_COLUMN, USER_ID_COLUMN, UserTable, load_user_table


@dataclass(frozen=True)
class RosterEntry:
    user_id: str
    phone_number: str
    sex: str


class UserDirectory:
    """Read-only view of the pre-seeded user roster."""

    def __init__(self, data_file: Optional[Path] = None) -> None:
        self.data_file = Path(data_file) if data_file is not None else settings.data_file

    def _table(self) -> UserTable:
        return load_user_table(self.data_file)

    def list_user_ids(self) -> Set[str]:
        return {row[USER_ID_COLUMN].strip() for row in self._table().iter_records()}

    def validate(self, user_id: str, phone_number: str) -> bool:
        user_id = (user_id or "").strip()
        phone_number = (phone_number or "").strip()
        for row in self._table().iter_records():
            if row[PHONE_COLUMN].strip() == phone_number and row[USER_ID_COLUMN].strip() == user_id:
                return True
        return False

    def lookup(self, user_id: str) -> Optional[RosterEntry]:
        table = self._table()
        row = table.find_row((user_id or "").strip())
        if row is None:
            return None
        return RosterEntry(
            user_id=row[USER_ID_COLUMN].strip(),
            phone_number=row[PHONE_COLUMN].strip(),
            sex=table.sex_of(row),
        )
