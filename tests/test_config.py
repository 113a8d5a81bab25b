"""Tests for environment-driven settings."""

from __future__ import annotations

from pitchdeck.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch) -> None:
        for var in ("BRANDING_REQUEST_TIMEOUT", "BRANDING_USER_AGENT", "BRANDING_MAX_BODY_BYTES", "BRANDING_DEFAULT_FONT"):
            monkeypatch.delenv(var, raising=False)
        s = Settings()
        assert s.request_timeout == 10.0
        assert s.user_agent == "Mozilla/5.0 (compatible; PitchDeckBot/1.0; +https://pitchdeck.app)"
        assert s.max_body_bytes == 5 * 1024 * 1024
        assert s.default_font == "Inter"

    def test_env_overrides(self, monkeypatch) -> None:
        monkeypatch.setenv("BRANDING_REQUEST_TIMEOUT", "3.5")
        monkeypatch.setenv("BRANDING_MAX_BODY_BYTES", "1024")
        s = Settings()
        assert s.request_timeout == 3.5
        assert s.max_body_bytes == 1024

    def test_cors_origin_list(self, monkeypatch) -> None:
        monkeypatch.setenv("CORS_ORIGINS", "https://a.app, https://b.app,")
        assert Settings().cors_origin_list == ["https://a.app", "https://b.app"]
