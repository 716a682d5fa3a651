"""Tests for RuntimeSettings loading and validation."""

import pytest
from pydantic import ValidationError

from adservice.config.runtime import RuntimeSettings, Transport, get_settings
from adservice.models import AdRequest
from adservice.wiring import build_ad_service


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    for name in ("TRANSPORT", "PORT", "MAX_WORKERS", "MAX_ADS_TO_SERVE", "RANDOM_SEED", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    # keep a developer's .env out of the tests
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestDefaults:

    def test_defaults(self):
        s = RuntimeSettings()
        assert s.transport is Transport.grpc
        assert s.port == 9555
        assert s.max_workers == 10
        assert s.max_ads_to_serve == 3
        assert s.random_seed is None
        assert s.log_level == "INFO"

    def test_get_settings_cached(self):
        assert get_settings() is get_settings()


class TestEnvironment:

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("TRANSPORT", "mcp")
        monkeypatch.setenv("PORT", "0")
        monkeypatch.setenv("MAX_ADS_TO_SERVE", "2")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        s = RuntimeSettings()
        assert s.transport is Transport.mcp
        assert s.port == 0
        assert s.max_ads_to_serve == 2
        assert s.log_level == "DEBUG"

    def test_bad_port_rejected(self, monkeypatch):
        monkeypatch.setenv("PORT", "70000")
        with pytest.raises(ValidationError):
            RuntimeSettings()

    def test_negative_cap_rejected(self):
        with pytest.raises(ValidationError):
            RuntimeSettings(max_ads_to_serve=-1)

    def test_cap_above_default_rejected(self, monkeypatch):
        monkeypatch.setenv("MAX_ADS_TO_SERVE", "10")
        with pytest.raises(ValidationError):
            RuntimeSettings()

    def test_unknown_transport_rejected(self):
        with pytest.raises(ValidationError):
            RuntimeSettings(transport="http")

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError):
            RuntimeSettings(log_level="chatty")


class TestWiring:

    def test_build_ad_service_uses_settings(self):
        svc = build_ad_service(RuntimeSettings(max_ads_to_serve=1, random_seed=3))
        assert svc.max_ads_to_serve == 1
        assert len(svc.get_ads(AdRequest()).ads) == 1
