"""Tests for runtime settings."""

from reviewdesk.config import Settings


def test_defaults_listen_on_all_interfaces(monkeypatch):
    for name in ("REVIEWDESK_HOST", "REVIEWDESK_PORT", "REVIEWDESK_STRICT_NOT_FOUND"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.host == "0.0.0.0"
    assert settings.port == 8080
    assert settings.strict_not_found is False


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("REVIEWDESK_STRICT_NOT_FOUND", "true")
    monkeypatch.setenv("REVIEWDESK_PORT", "9000")
    settings = Settings(_env_file=None)
    assert settings.strict_not_found is True
    assert settings.port == 9000
