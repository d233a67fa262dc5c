"""Suburb-level growth assumptions for Brisbane and South East Queensland.

Ten-year averages; estimates only, past growth does not guarantee future
results.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import json
from pathlib import Path

from config.jurisdiction import DATA_DIR
from errors import InvalidInput

SUBURBS_PATH = DATA_DIR / "brisbane_suburbs.json"
DWELLING_TYPES = ("house", "unit")


@dataclass(frozen=True)
class SuburbData:
    name: str
    median_house_price: float
    median_unit_price: float
    house_growth_rate: float
    unit_growth_rate: float
    ring: str  # inner, middle, outer, regional


def _load_suburb_data(path: Path = SUBURBS_PATH) -> dict:
    if not path.exists():
        raise FileNotFoundError(f"Suburb table not found: {path}")
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


@lru_cache(maxsize=1)
def list_suburbs() -> tuple[SuburbData, ...]:
    data = _load_suburb_data()
    return tuple(
        SuburbData(
            name=entry["name"],
            median_house_price=float(entry["median_house_price"]),
            median_unit_price=float(entry["median_unit_price"]),
            house_growth_rate=float(entry["house_growth_rate"]),
            unit_growth_rate=float(entry["unit_growth_rate"]),
            ring=entry.get("ring", "unknown"),
        )
        for entry in data.get("suburbs", [])
    )


@lru_cache(maxsize=1)
def ring_defaults() -> dict[str, dict[str, float]]:
    return dict(_load_suburb_data().get("ring_defaults", {}))


def get_suburb(name: str | None) -> SuburbData | None:
    if not name:
        return None
    wanted = name.strip().lower()
    return next((s for s in list_suburbs() if s.name.lower() == wanted), None)


def suburb_growth_rate(
    name: str | None,
    dwelling: str = "house",
    weights: tuple[float, float] = (0.6, 0.4),
) -> float:
    """
    Suburb growth rate, or the conservative unknown-area default.

    dwelling="all" blends the house and unit rates by `weights` (houses, units).
    """
    if dwelling == "all":
        houses, units = weights
        return houses * suburb_growth_rate(name, "house") + units * suburb_growth_rate(name, "unit")
    if dwelling not in DWELLING_TYPES:
        raise InvalidInput(f"dwelling must be one of {DWELLING_TYPES}, got {dwelling!r}")
    suburb = get_suburb(name)
    if suburb:
        return suburb.house_growth_rate if dwelling == "house" else suburb.unit_growth_rate
    return float(ring_defaults()["unknown"][dwelling])
