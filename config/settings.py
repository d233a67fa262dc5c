"""Runtime settings read from the environment (and a local .env file)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import os

from dotenv import load_dotenv

from errors import ConfigurationError

from .urls import ABS_DATA_API_URL


@dataclass(frozen=True)
class Settings:
    abs_base_url: str = ABS_DATA_API_URL
    cache_file: Path = Path("data/abs-cache.json")
    cache_max_age_days: int = 90
    http_timeout: int = 30
    log_level: str = "INFO"


def _env_int(key: str, default: int) -> int:
    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{key} must be an integer, got {raw!r}") from exc


def load_settings(env_file: str | Path | None = None) -> Settings:
    load_dotenv(env_file)
    defaults = Settings()
    return Settings(
        abs_base_url=os.getenv("RENTBUY_ABS_BASE_URL") or defaults.abs_base_url,
        cache_file=Path(os.getenv("RENTBUY_CACHE_FILE") or defaults.cache_file),
        cache_max_age_days=_env_int("RENTBUY_CACHE_MAX_AGE_DAYS", defaults.cache_max_age_days),
        http_timeout=_env_int("RENTBUY_HTTP_TIMEOUT", defaults.http_timeout),
        log_level=(os.getenv("RENTBUY_LOG_LEVEL") or defaults.log_level).upper(),
    )
