from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

def _resolve_project_root() -> Path:
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    return Path(__file__).resolve().parents[1]


PROJECT_ROOT = _resolve_project_root()


def load_env() -> None:
    env_name = os.getenv("APP_ENV", "development")
    candidates = [Path.cwd(), PROJECT_ROOT]
    for base in candidates:
        env_path = base / ".env"
        if env_path.exists():
            load_dotenv(env_path)
            break

    for base in candidates:
        env_specific = base / f".env.{env_name}"
        if env_specific.exists():
            load_dotenv(env_specific, override=True)
            break


def _default_database_url() -> str:
    return f"sqlite:///{(PROJECT_ROOT / 'data' / 'goalx.sqlite3').as_posix()}"


@dataclass(frozen=True)
class Settings:
    database_url: str
    log_level: str = "INFO"
    log_dir: str = "logs"
    remote_config_url: str | None = None
    remote_redirect_url: str = ""
    remote_fetch_timeout_ms: int = 10_000
    tracking_prompt_delay_ms: int = 500


load_env()

SETTINGS = Settings(
    database_url=os.getenv("DATABASE_URL", "").strip() or _default_database_url(),
    log_level=os.getenv("LOG_LEVEL", "INFO"),
    log_dir=os.getenv("LOG_DIR", "logs"),
    remote_config_url=os.getenv("REMOTE_CONFIG_URL", "").strip() or None,
    remote_redirect_url=os.getenv("REMOTE_REDIRECT_URL", "").strip(),
    remote_fetch_timeout_ms=int(os.getenv("REMOTE_FETCH_TIMEOUT_MS", "10000")),
    tracking_prompt_delay_ms=int(os.getenv("TRACKING_PROMPT_DELAY_MS", "500")),
)
