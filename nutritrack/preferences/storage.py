# -*- coding: utf-8 -*-
"""Per-user session/profile key-value store (SQLite)."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional, Set

from ..app_db import db_conn, init_app_db
from ..config import settings

KEY_PHONE_NUMBER = "phone_number"
KEY_SEX = "sex"
KEY_SELECTED_CATEGORIES = "selected_categories"
KEY_PERSONA = "selected_persona"
KEY_MEAL_TIME = "meal_time"
KEY_SLEEP_TIME = "sleep_time"
KEY_WAKE_UP_TIME = "wake_up_time"
KEY_USER_NAME = "user_name"
KEY_TOTAL_SCORE = "total_score"
KEY_SCORE_HISTORY = "score_history"


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def _split_csv(raw: str) -> List[str]:
    return [part.strip() for part in raw.split(",") if part.strip()]


_initialised_dbs: Set[Path] = set()


def _ensure_db(db_path: Path) -> None:
    key = db_path.resolve()
    if key not in _initialised_dbs or not db_path.exists():
        init_app_db(db_path)
        _initialised_dbs.add(key)


class PreferenceStore:
    """Session state for one user, passed explicitly to whoever needs it.

    Values are plain strings with overwrite semantics; the properties below
    convert to and from the types callers work with.
    """

    def __init__(self, user_id: str, db_path: Optional[Path] = None) -> None:
        self.user_id = user_id
        self.db_path = Path(db_path) if db_path is not None else settings.app_db_path
        _ensure_db(self.db_path)

    # ---- raw access ----

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        with db_conn(self.db_path) as conn:
            row = conn.execute(
                "SELECT value FROM preferences WHERE user_id = ? AND key = ?",
                (self.user_id, key),
            ).fetchone()
        return row["value"] if row else default

    def set(self, key: str, value: str) -> None:
        with db_conn(self.db_path) as conn:
            conn.execute(
                """
                INSERT INTO preferences (user_id, key, value, updated_at) VALUES (?, ?, ?, ?)
                ON CONFLICT(user_id, key) DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at
                """,
                (self.user_id, key, value, _utc_now()),
            )

    def delete(self, key: str) -> None:
        with db_conn(self.db_path) as conn:
            conn.execute("DELETE FROM preferences WHERE user_id = ? AND key = ?", (self.user_id, key))

    def clear(self) -> None:
        with db_conn(self.db_path) as conn:
            conn.execute("DELETE FROM preferences WHERE user_id = ?", (self.user_id,))

    def as_dict(self) -> Dict[str, str]:
        with db_conn(self.db_path) as conn:
            rows = conn.execute(
                "SELECT key, value FROM preferences WHERE user_id = ? ORDER BY key",
                (self.user_id,),
            ).fetchall()
        return {r["key"]: r["value"] for r in rows}

    # ---- typed accessors ----

    @property
    def phone_number(self) -> str:
        return self.get(KEY_PHONE_NUMBER) or ""

    @phone_number.setter
    def phone_number(self, value: str) -> None:
        self.set(KEY_PHONE_NUMBER, value.strip())

    @property
    def sex(self) -> str:
        return self.get(KEY_SEX) or "Male"

    @sex.setter
    def sex(self, value: str) -> None:
        self.set(KEY_SEX, value.strip())

    @property
    def selected_categories(self) -> List[str]:
        return _split_csv(self.get(KEY_SELECTED_CATEGORIES) or "")

    @selected_categories.setter
    def selected_categories(self, values: List[str]) -> None:
        self.set(KEY_SELECTED_CATEGORIES, ",".join(v.strip() for v in values if v.strip()))

    @property
    def persona(self) -> str:
        return self.get(KEY_PERSONA) or ""

    @persona.setter
    def persona(self, value: str) -> None:
        self.set(KEY_PERSONA, value)

    @property
    def meal_time(self) -> str:
        return self.get(KEY_MEAL_TIME) or ""

    @meal_time.setter
    def meal_time(self, value: str) -> None:
        self.set(KEY_MEAL_TIME, value)

    @property
    def sleep_time(self) -> str:
        return self.get(KEY_SLEEP_TIME) or ""

    @sleep_time.setter
    def sleep_time(self, value: str) -> None:
        self.set(KEY_SLEEP_TIME, value)

    @property
    def wake_up_time(self) -> str:
        return self.get(KEY_WAKE_UP_TIME) or ""

    @wake_up_time.setter
    def wake_up_time(self, value: str) -> None:
        self.set(KEY_WAKE_UP_TIME, value)

    @property
    def user_name(self) -> str:
        return self.get(KEY_USER_NAME) or ""

    @user_name.setter
    def user_name(self, value: str) -> None:
        self.set(KEY_USER_NAME, value.strip())

    @property
    def total_score(self) -> float:
        raw = self.get(KEY_TOTAL_SCORE)
        try:
            return float(raw) if raw is not None else 0.0
        except ValueError:
            return 0.0

    @total_score.setter
    def total_score(self, value: float) -> None:
        self.set(KEY_TOTAL_SCORE, str(float(value)))

    @property
    def score_history(self) -> List[float]:
        scores: List[float] = []
        for part in (self.get(KEY_SCORE_HISTORY) or "").split(","):
            try:
                scores.append(float(part))
            except ValueError:
                continue
        return scores

    def append_score(self, score: float) -> List[float]:
        existing = self.get(KEY_SCORE_HISTORY) or ""
        entry = str(float(score))
        self.set(KEY_SCORE_HISTORY, f"{existing},{entry}" if existing else entry)
        return self.score_history
