"""Tests for application settings."""

from __future__ import annotations

import pytest

from daylight_planner.config import Settings, get_settings


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
        monkeypatch.chdir(tmp_path)  # no stray .env
        settings = Settings()
        assert settings.app_name == "Daylight Planner"
        assert settings.sunrise_api_base_url == "https://api.sunrise-sunset.org"
        assert settings.sunrise_api_timeout == 15.0
        assert settings.geocoding_api_base_url == "https://nominatim.openstreetmap.org"
        assert settings.batch_size == 10
        assert settings.request_delay == 0.05
        assert settings.batch_delay == 0.2

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DAYLIGHT_BATCH_SIZE", "25")
        monkeypatch.setenv("daylight_database_url", "sqlite+pysqlite:///:memory:")
        settings = Settings()
        assert settings.batch_size == 25
        assert settings.database_url == "sqlite+pysqlite:///:memory:"

    def test_env_file(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
        (tmp_path / ".env").write_text("DAYLIGHT_APP_ENV=production\n")
        monkeypatch.chdir(tmp_path)
        assert Settings().app_env == "production"

    def test_rejects_bad_batch_size(self) -> None:
        with pytest.raises(ValueError):
            Settings(batch_size=0)

    def test_get_settings_cached(self) -> None:
        assert get_settings() is get_settings()
