from __future__ import annotations

import os
from pathlib import Path
from typing import List


class Settings:
    """Centralized configuration for the NutriTrack backend."""

    def __init__(self) -> None:
        base_dir = Path(__file__).resolve().parent
        repo_root = base_dir.parent
        data_root_default = repo_root / "data"
        default_data = base_dir / "data" / "user_data.csv"

        # Bundled roster + HEIFA sub-scores.
        self.data_file: Path = Path(
            os.environ.get("NUTRITRACK_DATA_FILE") or default_data
        ).expanduser()

        self.data_root: Path = Path(
            os.environ.get("NUTRITRACK_DATA_ROOT") or data_root_default
        ).expanduser()
        self.app_db_path: Path = Path(
            os.environ.get("NUTRITRACK_DB_PATH") or (self.data_root / "nutritrack.db")
        ).expanduser()
        # In production you MUST set NUTRITRACK_JWT_SECRET. The dev secret keeps local demos easy.
        self.jwt_secret: str = os.environ.get("NUTRITRACK_JWT_SECRET") or "dev-secret-change-me"
        self.token_ttl_days: int = int(os.environ.get("NUTRITRACK_TOKEN_TTL_DAYS") or "7")
        self.cookie_secure: bool = (os.environ.get("NUTRITRACK_COOKIE_SECURE") or "").strip() in {"1", "true", "True"}
        self.log_level: str = (os.environ.get("NUTRITRACK_LOG_LEVEL") or "INFO").upper()

        cors = os.environ.get("NUTRITRACK_CORS_ORIGINS", "*")
        if cors.strip() == "*":
            self.cors_origins: List[str] = ["*"]
        else:
            self.cors_origins = [
                origin.strip() for origin in cors.split(",") if origin.strip()
            ]


settings = Settings()
