"""Tests for the suburb growth-rate table."""

import pytest

from errors import InvalidInput
from growth.suburbs import get_suburb, list_suburbs, suburb_growth_rate


class TestSuburbLookup:
    def test_case_insensitive(self):
        suburb = get_suburb("  new farm ")
        assert suburb is not None
        assert suburb.name == "New Farm"
        assert suburb.ring == "inner"

    def test_unknown_suburb(self):
        assert get_suburb("Nowhere") is None
        assert get_suburb(None) is None

    def test_table_loaded(self):
        names = {s.name for s in list_suburbs()}
        assert {"Brisbane CBD", "Logan Central", "Sunshine Coast"} <= names


class TestSuburbGrowthRate:
    def test_house_and_unit(self):
        assert suburb_growth_rate("Logan Central", "house") == 0.08
        assert suburb_growth_rate("Logan Central", "unit") == 0.05

    def test_falls_back_to_conservative_default(self):
        assert suburb_growth_rate("Nowhere", "house") == 0.051
        assert suburb_growth_rate(None, "unit") == 0.035

    def test_unknown_dwelling(self):
        with pytest.raises(InvalidInput):
            suburb_growth_rate("New Farm", "castle")

    def test_all_dwellings_blends_by_weights(self):
        assert suburb_growth_rate("Logan Central", "all") == pytest.approx(0.6 * 0.08 + 0.4 * 0.05)
        assert suburb_growth_rate("Logan Central", "all", (0.5, 0.5)) == pytest.approx(0.065)
        assert suburb_growth_rate("Nowhere", "all", (1.0, 0.0)) == pytest.approx(0.051)
