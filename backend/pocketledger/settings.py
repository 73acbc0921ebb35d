from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    database_url: str | None = None

    @property
    def use_sql_store(self) -> bool:
        return self.database_url is not None


def get_settings() -> Settings:
    # 1) env var
    env = os.getenv("POCKETLEDGER_DATA_DIR")
    if env and env.strip():
        p = Path(env).expanduser()
    else:
        # 2) default: backend/data
        # pocketledger/settings.py -> pocketledger/ -> backend/
        p = Path(__file__).resolve().parents[1] / "data"

    # Le dossier data peut être créé automatiquement
    p.mkdir(parents=True, exist_ok=True)

    db_url = os.getenv("POCKETLEDGER_DATABASE_URL")
    return Settings(
        data_dir=p,
        database_url=db_url.strip() if db_url and db_url.strip() else None,
    )
