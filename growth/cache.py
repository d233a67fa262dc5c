"""On-disk cache of regional growth rates with a stale fallback."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
import json
import logging
from pathlib import Path
from typing import Any, Callable

from errors import RentBuyError

from .models import RegionalGrowth

logger = logging.getLogger(__name__)

DEFAULT_MAX_AGE = timedelta(days=90)  # ABS publishes quarterly


@dataclass(frozen=True)
class GrowthLookup:
    data: RegionalGrowth
    cached: bool
    stale: bool = False
    error: str | None = None


@dataclass(frozen=True)
class CacheEntry:
    data: RegionalGrowth
    cached_at: datetime

    def age(self, now: datetime | None = None) -> timedelta:
        return (now or datetime.now(timezone.utc)) - self.cached_at


def read_cache(cache_path: Path) -> CacheEntry | None:
    """Load the cache regardless of its age; None when missing or unreadable."""
    if not cache_path.exists():
        return None
    try:
        with cache_path.open("r", encoding="utf-8") as handle:
            raw: dict[str, Any] = json.load(handle)
        cached_at = datetime.fromisoformat(raw["cached_at"])
        if cached_at.tzinfo is None:
            cached_at = cached_at.replace(tzinfo=timezone.utc)
        return CacheEntry(data=RegionalGrowth.from_dict(raw["data"]), cached_at=cached_at)
    except (OSError, ValueError, KeyError, TypeError) as exc:
        logger.error("Failed to read growth cache %s: %s", cache_path, exc)
        return None


def write_cache(cache_path: Path, data: RegionalGrowth, now: datetime | None = None) -> None:
    cached_at = (now or datetime.now(timezone.utc)).isoformat()
    try:
        cache_path.parent.mkdir(parents=True, exist_ok=True)
        with cache_path.open("w", encoding="utf-8") as handle:
            json.dump({"data": data.to_dict(), "cached_at": cached_at}, handle, indent=2)
        logger.info("Cached growth data at %s", cached_at)
    except OSError as exc:
        logger.error("Failed to write growth cache %s: %s", cache_path, exc)


def load_growth_rates(
    fetch: Callable[[], RegionalGrowth],
    *,
    cache_path: Path | str,
    max_age: timedelta = DEFAULT_MAX_AGE,
    force: bool = False,
    now: datetime | None = None,
) -> GrowthLookup:
    """
    Serve growth rates from the cache while it is fresh, otherwise fetch.

    When fetching fails, any cached copy is returned marked stale. Without a
    cached copy the fetch error propagates.
    """
    cache_path = Path(cache_path)
    now = now or datetime.now(timezone.utc)

    if not force:
        entry = read_cache(cache_path)
        if entry is not None and entry.age(now) < max_age:
            logger.info("Using cached growth data from %s", entry.cached_at.isoformat())
            return GrowthLookup(data=entry.data, cached=True)
        if entry is not None:
            logger.info("Growth cache expired, fetching fresh data")

    try:
        data = fetch()
    except RentBuyError as exc:
        logger.error("Growth data fetch failed: %s", exc)
        entry = read_cache(cache_path)
        if entry is None:
            raise
        logger.warning("Returning stale growth data cached at %s", entry.cached_at.isoformat())
        return GrowthLookup(
            data=entry.data,
            cached=True,
            stale=True,
            error=f"Failed to fetch fresh data, using cached version: {exc}",
        )

    write_cache(cache_path, data, now)
    return GrowthLookup(data=data, cached=False)
