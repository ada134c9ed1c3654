from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# DB SQLite su file nella root del progetto
DEFAULT_DB_PATH = Path(__file__).resolve().parents[1] / "healthhub.sqlite"
DEFAULT_DATABASE_URL = f"sqlite+aiosqlite:///{DEFAULT_DB_PATH}"

_TRUE = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUE


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    sql_echo: bool = False
    # comodità di sviluppo: login automatico del paziente demo a ogni avvio
    seed_demo_session: bool = True
    log_level: str = "INFO"


def get_settings() -> Settings:
    """Legge la configurazione dalle variabili d'ambiente (anche da .env)."""
    return Settings(
        database_url=os.getenv("HEALTHHUB_DATABASE_URL", DEFAULT_DATABASE_URL),
        sql_echo=_env_flag("HEALTHHUB_SQL_ECHO", False),
        seed_demo_session=_env_flag("HEALTHHUB_SEED_DEMO_SESSION", True),
        log_level=os.getenv("HEALTHHUB_LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(settings: Settings | None = None) -> None:
    settings = settings or get_settings()
    logger = logging.getLogger("healthhub")
    logger.setLevel(settings.log_level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
