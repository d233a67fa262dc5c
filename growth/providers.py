"""ABS RES_DWELL median price series.

Data API guide:
https://www.abs.gov.au/about/data-services/application-programming-interfaces-apis/data-api-user-guide
"""
from __future__ import annotations

from datetime import date
import logging
import time
from typing import Any

import requests

from config.urls import ABS_DATA_API_URL, ABS_SDMX_ACCEPT
from errors import ProviderError

from .logic import DEFAULT_DWELLING_WEIGHTS, summarize_region
from .models import GrowthSeries, RegionalGrowth

logger = logging.getLogger(__name__)

DATAFLOW_ID = "RES_DWELL"
DEFAULT_START_PERIOD = "2002-Q1"

ABS_REGIONS = {
    "brisbane": "3GBRI",
    "sydney": "1GSYD",
    "melbourne": "1GMEL",
    "adelaide": "2GADE",
    "perth": "5GPER",
    "hobart": "6GHOB",
    "darwin": "7GDAR",
    "canberra": "8ACTE",
}

# Median prices are reported in $'000
MEDIAN_PRICE_HOUSES = "3"
MEDIAN_PRICE_UNITS = "4"


def current_quarter(today: date | None = None) -> str:
    today = today or date.today()
    return f"{today.year}-Q{(today.month - 1) // 3 + 1}"


def _request_json(
    url: str,
    *,
    params: dict[str, Any],
    timeout: int = 30,
    headers: dict[str, str] | None = None,
) -> dict[str, Any]:
    backoffs = [1, 3]
    last_exc: Exception | None = None
    request_headers = {"User-Agent": "RentBuyProjection/1.0"}
    if headers:
        request_headers.update(headers)
    for attempt in range(len(backoffs) + 1):
        try:
            resp = requests.get(url, params=params, timeout=timeout, headers=request_headers)
            resp.raise_for_status()
            data = resp.json()
            if isinstance(data, dict):
                return data
            raise ProviderError(f"Unexpected JSON payload type: {type(data)}")
        except (requests.RequestException, ValueError) as exc:
            last_exc = exc
            if attempt >= len(backoffs):
                break
            logger.warning("ABS request attempt %s failed: %s", attempt + 1, exc)
            time.sleep(backoffs[attempt])
    message = f"Request failed for {url}"
    if last_exc:
        message = f"{message}: {last_exc}"
    raise ProviderError(message) from last_exc


def parse_sdmx_json(payload: dict[str, Any]) -> GrowthSeries:
    """Pull (period, value) pairs out of an SDMX-JSON data message."""
    data = payload.get("data") or {}
    data_sets = data.get("dataSets") or []
    series = data_sets[0].get("series") if data_sets else None
    dimensions = (data.get("structure") or {}).get("dimensions")
    if not series or not dimensions:
        raise ProviderError("Invalid SDMX-JSON structure")

    time_dimension = next(
        (dim for dim in dimensions.get("observation") or [] if dim.get("id") == "TIME_PERIOD"),
        None,
    )
    if time_dimension is None:
        raise ProviderError("TIME_PERIOD dimension not found")
    periods = time_dimension.get("values") or []

    # Series keys look like "0:0:0" (measure:region:frequency); take the first
    series_key = next(iter(series))
    observations = series[series_key].get("observations")
    if not observations:
        raise ProviderError("No observations found in series")

    points = []
    for time_index, value_array in observations.items():
        try:
            period = periods[int(time_index)]["id"]
        except (IndexError, KeyError, ValueError) as exc:
            raise ProviderError(f"Observation index {time_index!r} has no matching period") from exc
        if not value_array or value_array[0] is None:
            continue
        points.append((period, float(value_array[0])))

    points.sort(key=lambda item: item[0])
    return GrowthSeries.from_points(points)


def fetch_abs_series(
    region: str,
    measure: str = MEDIAN_PRICE_HOUSES,
    *,
    base_url: str = ABS_DATA_API_URL,
    start_period: str = DEFAULT_START_PERIOD,
    end_period: str | None = None,
    timeout: int = 30,
) -> GrowthSeries:
    url = f"{base_url}/ABS,{DATAFLOW_ID}/{measure}.{region}.Q"
    params = {
        "startPeriod": start_period,
        "endPeriod": end_period or current_quarter(),
        "detail": "dataonly",
    }
    logger.info("Fetching ABS %s measure %s for region %s", DATAFLOW_ID, measure, region)
    payload = _request_json(url, params=params, timeout=timeout, headers={"Accept": ABS_SDMX_ACCEPT})
    series = parse_sdmx_json(payload)
    logger.info(
        "Fetched %s quarters (%s to %s) for region %s",
        len(series),
        series.first_period,
        series.latest_period,
        region,
    )
    return series


def fetch_region_growth(
    region_name: str = "Brisbane",
    *,
    region_code: str | None = None,
    weights: tuple[float, float] = DEFAULT_DWELLING_WEIGHTS,
    base_url: str = ABS_DATA_API_URL,
    timeout: int = 30,
) -> RegionalGrowth:
    code = region_code or ABS_REGIONS.get(region_name.lower())
    if not code:
        raise ProviderError(f"Unknown ABS region '{region_name}'")
    houses = fetch_abs_series(code, MEDIAN_PRICE_HOUSES, base_url=base_url, timeout=timeout)
    units = fetch_abs_series(code, MEDIAN_PRICE_UNITS, base_url=base_url, timeout=timeout)
    return summarize_region(region_name, houses, units, weights)
