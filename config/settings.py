from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


DEFAULT_SOURCE_URL = (
    "https://raw.githubusercontent.com/Chy-Zaber-Bin-Zahid/Software-Companies-in-Bangladesh/main/README.adoc"
)


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()


@dataclass(frozen=True)
class Settings:
    source_url: str
    request_timeout_seconds: int
    user_agent: str

    page_size: int

    # Refresh thresholds (seconds)
    stale_after_seconds: int
    refetch_interval_seconds: int

    log_level: str
    run_env: str


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    page_size = int(os.getenv("PAGE_SIZE", "15"))
    if page_size < 1:
        raise RuntimeError("PAGE_SIZE must be a positive integer")
    return Settings(
        source_url=os.getenv("DIRECTORY_SOURCE_URL", DEFAULT_SOURCE_URL),
        request_timeout_seconds=int(os.getenv("REQUEST_TIMEOUT", "30")),
        user_agent=os.getenv("USER_AGENT", "tech-company-directory/0.1"),
        page_size=page_size,
        stale_after_seconds=int(os.getenv("STALE_AFTER_SECONDS", str(30 * 60))),
        refetch_interval_seconds=int(os.getenv("REFETCH_INTERVAL_SECONDS", str(60 * 60))),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        run_env=os.getenv("RUN_ENV", "local"),
    )
