"""Tests for jurisdiction tables and runtime settings."""

import json
from pathlib import Path

import pytest

from config.jurisdiction import DEFAULT_JURISDICTION_PATH, default_jurisdiction, load_jurisdiction
from config.settings import load_settings
from config.urls import ABS_DATA_API_URL
from errors import ConfigurationError, DomainError


def _bundled() -> dict:
    return json.loads(DEFAULT_JURISDICTION_PATH.read_text(encoding="utf-8"))


class TestJurisdiction:
    def test_default_tables(self):
        cfg = default_jurisdiction()
        assert cfg.name == "QLD 2024-25"
        assert cfg.first_home_concession_cap == 500_000
        assert cfg.transfer_duty_brackets[3].threshold == 540_000
        assert cfg.transfer_duty_brackets[3].base == 17_325
        assert cfg.flat_levy_rate == 0.02
        assert cfg.loan.lvr_no_lmi == 0.80
        assert cfg.deposit_scheme.property_cap == 1_000_000
        assert cfg.investment.alternative_investment_return == 0.08
        assert cfg.transaction_costs.inspections == 800
        assert cfg.dwelling_mix == (0.6, 0.4)

    def test_default_is_cached(self):
        assert default_jurisdiction() is default_jurisdiction()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_jurisdiction(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{")
        with pytest.raises(ConfigurationError):
            load_jurisdiction(path)

    def test_missing_section(self, tmp_path):
        data = _bundled()
        del data["loan"]
        path = tmp_path / "partial.json"
        path.write_text(json.dumps(data))
        with pytest.raises(ConfigurationError):
            load_jurisdiction(path)

    def test_degenerate_brackets(self, tmp_path):
        data = _bundled()
        data["transfer_duty"]["brackets"] = []
        path = tmp_path / "empty.json"
        path.write_text(json.dumps(data))
        with pytest.raises(DomainError):
            load_jurisdiction(path)

    def test_dwelling_mix_is_configurable(self, tmp_path):
        data = _bundled()
        data["dwelling_mix"] = {"houses": 0.7, "units": 0.3}
        path = tmp_path / "mix.json"
        path.write_text(json.dumps(data))
        assert load_jurisdiction(path).dwelling_mix == (0.7, 0.3)

    def test_bad_dwelling_mix(self, tmp_path):
        data = _bundled()
        data["dwelling_mix"] = {"houses": 0.7, "units": 0.7}
        path = tmp_path / "mix.json"
        path.write_text(json.dumps(data))
        with pytest.raises(DomainError):
            load_jurisdiction(path)


class TestSettings:
    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch, tmp_path):
        for key in (
            "RENTBUY_ABS_BASE_URL",
            "RENTBUY_CACHE_FILE",
            "RENTBUY_CACHE_MAX_AGE_DAYS",
            "RENTBUY_HTTP_TIMEOUT",
            "RENTBUY_LOG_LEVEL",
        ):
            # setenv first so teardown also removes anything load_dotenv adds
            monkeypatch.setenv(key, "")
            monkeypatch.delenv(key)
        self.env_file = tmp_path / ".env"

    def test_defaults(self):
        settings = load_settings(self.env_file)
        assert settings.abs_base_url == ABS_DATA_API_URL
        assert settings.cache_file == Path("data/abs-cache.json")
        assert settings.cache_max_age_days == 90
        assert settings.log_level == "INFO"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("RENTBUY_CACHE_MAX_AGE_DAYS", "30")
        monkeypatch.setenv("RENTBUY_LOG_LEVEL", "debug")
        settings = load_settings(self.env_file)
        assert settings.cache_max_age_days == 30
        assert settings.log_level == "DEBUG"

    def test_env_file(self):
        self.env_file.write_text("RENTBUY_HTTP_TIMEOUT=5\n")
        settings = load_settings(self.env_file)
        assert settings.http_timeout == 5

    def test_non_numeric_value(self, monkeypatch):
        monkeypatch.setenv("RENTBUY_HTTP_TIMEOUT", "soon")
        with pytest.raises(ConfigurationError):
            load_settings(self.env_file)
