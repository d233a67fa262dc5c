"""Tests for the growth-rate disk cache and its stale fallback."""

from datetime import datetime, timedelta, timezone
import json
from unittest.mock import Mock

import pytest

from errors import ProviderError
from growth.cache import load_growth_rates, read_cache, write_cache
from growth.logic import summarize_region

NOW = datetime(2025, 6, 1, tzinfo=timezone.utc)


@pytest.fixture
def region(make_series):
    return summarize_region("Brisbane", make_series(40, 0.015), make_series(40, 0.01, start_value=300.0))


@pytest.fixture
def cache_path(tmp_path):
    return tmp_path / "data" / "abs-cache.json"


class TestLoadGrowthRates:
    def test_fetches_and_writes_when_empty(self, region, cache_path):
        fetch = Mock(return_value=region)
        lookup = load_growth_rates(fetch, cache_path=cache_path, now=NOW)
        assert fetch.call_count == 1
        assert lookup.cached is False
        assert lookup.stale is False
        assert cache_path.exists()
        assert json.loads(cache_path.read_text())["cached_at"] == NOW.isoformat()

    def test_fresh_cache_skips_fetch(self, region, cache_path):
        write_cache(cache_path, region, NOW - timedelta(days=10))
        fetch = Mock(side_effect=AssertionError("should not fetch"))
        lookup = load_growth_rates(fetch, cache_path=cache_path, now=NOW)
        assert lookup.cached is True
        assert lookup.data.houses == region.houses
        assert lookup.data.house_series == region.house_series

    def test_expired_cache_is_refreshed(self, region, cache_path):
        write_cache(cache_path, region, NOW - timedelta(days=91))
        fetch = Mock(return_value=region)
        lookup = load_growth_rates(fetch, cache_path=cache_path, now=NOW)
        assert fetch.call_count == 1
        assert lookup.cached is False
        assert read_cache(cache_path).cached_at == NOW

    def test_force_bypasses_fresh_cache(self, region, cache_path):
        write_cache(cache_path, region, NOW)
        fetch = Mock(return_value=region)
        load_growth_rates(fetch, cache_path=cache_path, force=True, now=NOW)
        assert fetch.call_count == 1

    def test_stale_fallback_on_fetch_failure(self, region, cache_path):
        write_cache(cache_path, region, NOW - timedelta(days=400))
        fetch = Mock(side_effect=ProviderError("ABS unavailable"))
        lookup = load_growth_rates(fetch, cache_path=cache_path, now=NOW)
        assert lookup.stale is True
        assert lookup.cached is True
        assert "ABS unavailable" in lookup.error
        assert lookup.data.units == region.units

    def test_failure_without_cache_propagates(self, cache_path):
        fetch = Mock(side_effect=ProviderError("ABS unavailable"))
        with pytest.raises(ProviderError):
            load_growth_rates(fetch, cache_path=cache_path, now=NOW)

    def test_custom_max_age(self, region, cache_path):
        write_cache(cache_path, region, NOW - timedelta(days=2))
        fetch = Mock(return_value=region)
        load_growth_rates(fetch, cache_path=cache_path, max_age=timedelta(days=1), now=NOW)
        assert fetch.call_count == 1


class TestReadCache:
    def test_missing_file(self, cache_path):
        assert read_cache(cache_path) is None

    def test_corrupt_file(self, cache_path):
        cache_path.parent.mkdir(parents=True)
        cache_path.write_text("{not json")
        assert read_cache(cache_path) is None

    def test_metadata_survives(self, region, cache_path):
        write_cache(cache_path, region, NOW)
        entry = read_cache(cache_path)
        assert entry.data.region == "Brisbane"
        assert entry.data.total_quarters == 40
        assert entry.data.weights == (0.6, 0.4)
        assert entry.age(NOW) == timedelta(0)
