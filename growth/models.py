from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

import pandas as pd

from errors import DomainError


@dataclass(frozen=True)
class GrowthObservation:
    period: str  # e.g. "2024-Q3"
    value: float  # median price, in $'000 for ABS data


@dataclass(frozen=True)
class GrowthSeries:
    observations: tuple[GrowthObservation, ...]

    def __post_init__(self) -> None:
        for prev, cur in zip(self.observations, self.observations[1:]):
            if cur.period <= prev.period:
                raise DomainError(
                    f"Growth series periods must be strictly increasing ({prev.period} then {cur.period})"
                )

    @classmethod
    def from_points(cls, points: Iterable[tuple[str, float]]) -> GrowthSeries:
        return cls(tuple(GrowthObservation(period=str(p), value=float(v)) for p, v in points))

    def __len__(self) -> int:
        return len(self.observations)

    @property
    def values(self) -> list[float]:
        return [obs.value for obs in self.observations]

    @property
    def first_period(self) -> str | None:
        return self.observations[0].period if self.observations else None

    @property
    def latest_period(self) -> str | None:
        return self.observations[-1].period if self.observations else None

    def to_series(self) -> pd.Series:
        return pd.Series(
            self.values,
            index=[obs.period for obs in self.observations],
            name="value",
            dtype="float64",
        )

    def to_list(self) -> list[dict[str, Any]]:
        return [{"period": obs.period, "value": obs.value} for obs in self.observations]


@dataclass(frozen=True)
class GrowthScenarios:
    five_year: float  # recent trend
    ten_year: float  # full cycle
    fifteen_year: float  # longer view

    def to_dict(self) -> dict[str, float]:
        return {
            "five_year": self.five_year,
            "ten_year": self.ten_year,
            "fifteen_year": self.fifteen_year,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GrowthScenarios:
        return cls(
            five_year=float(data["five_year"]),
            ten_year=float(data["ten_year"]),
            fifteen_year=float(data["fifteen_year"]),
        )


@dataclass(frozen=True)
class RegionalGrowth:
    region: str
    houses: GrowthScenarios
    units: GrowthScenarios
    all_residential: GrowthScenarios
    house_series: GrowthSeries
    unit_series: GrowthSeries
    last_updated: str
    weights: tuple[float, float] = (0.6, 0.4)
    source: str = field(default="ABS_RES_DWELL")

    @property
    def first_period(self) -> str | None:
        return self.house_series.first_period

    @property
    def latest_period(self) -> str | None:
        return self.house_series.latest_period

    @property
    def total_quarters(self) -> int:
        return len(self.house_series)

    def to_dict(self) -> dict[str, Any]:
        return {
            "region": self.region,
            "houses": self.houses.to_dict(),
            "units": self.units.to_dict(),
            "all_residential": self.all_residential.to_dict(),
            "historical_data": {
                "houses": self.house_series.to_list(),
                "units": self.unit_series.to_list(),
            },
            "metadata": {
                "first_period": self.first_period,
                "latest_period": self.latest_period,
                "total_quarters": self.total_quarters,
                "last_updated": self.last_updated,
                "weights": list(self.weights),
            },
            "source": self.source,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RegionalGrowth:
        history = data.get("historical_data", {})
        metadata = data.get("metadata", {})
        weights = metadata.get("weights") or (0.6, 0.4)
        return cls(
            region=data["region"],
            houses=GrowthScenarios.from_dict(data["houses"]),
            units=GrowthScenarios.from_dict(data["units"]),
            all_residential=GrowthScenarios.from_dict(data["all_residential"]),
            house_series=GrowthSeries.from_points(
                (point["period"], point["value"]) for point in history.get("houses", [])
            ),
            unit_series=GrowthSeries.from_points(
                (point["period"], point["value"]) for point in history.get("units", [])
            ),
            last_updated=metadata.get("last_updated", ""),
            weights=(float(weights[0]), float(weights[1])),
            source=data.get("source", "ABS_RES_DWELL"),
        )
