from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    database_url: str | None
    log_level: str


def get_settings() -> Settings:
    # 1) env var
    env = os.getenv("LEDGER_DATA_DIR")
    if env and env.strip():
        p = Path(env).expanduser()
    else:
        # 2) default: backend/data
        # ledger_api/settings.py -> ledger_api/ -> backend/
        p = Path(__file__).resolve().parents[1] / "data"

    p.mkdir(parents=True, exist_ok=True)

    db_url = os.getenv("LEDGER_DATABASE_URL")
    level = os.getenv("LEDGER_LOG_LEVEL", "INFO").strip().upper() or "INFO"

    return Settings(
        data_dir=p,
        database_url=db_url.strip() if db_url and db_url.strip() else None,
        log_level=level,
    )
