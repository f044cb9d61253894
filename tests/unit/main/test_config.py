from __future__ import annotations

from umpire.main.config import AppSettings, get_settings
from umpire.shared.consts import EnumEnvironment


def test_get_settings_loads_defaults(monkeypatch) -> None:
    for key in (
        "API_KEY",
        "UMPIRE_API_KEY",
        "GRAPHITE_URL",
        "ENVIRONMENT",
        "FORWARDED_ALLOW_IPS",
    ):
        monkeypatch.delenv(key, raising=False)

    settings = get_settings()

    assert settings.environment == EnumEnvironment.DEVELOPMENT
    assert settings.umpire.api_key is None
    assert settings.umpire.force_https is False
    assert settings.umpire.forwarded_allow_ips == "127.0.0.1"
    assert settings.graphite.url.startswith("http")
    assert settings.librato.url == "https://metrics-api.librato.com"


def test_settings_respect_environment_variables(monkeypatch) -> None:
    monkeypatch.setenv("API_KEY", "s3cret")
    monkeypatch.setenv("FORCE_HTTPS", "true")
    monkeypatch.setenv("FORWARDED_ALLOW_IPS", "10.0.0.0/8")
    monkeypatch.setenv("GRAPHITE_URL", "https://graphite.internal")
    monkeypatch.setenv("GRAPHITE_TIMEOUT", "2.5")
    monkeypatch.setenv("LIBRATO_EMAIL", "ops@example.com")
    monkeypatch.setenv("LIBRATO_KEY", "token")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("LOG_JSON", "true")

    settings = AppSettings()

    assert settings.umpire.api_key == "s3cret"
    assert settings.umpire.force_https is True
    assert settings.umpire.forwarded_allow_ips == "10.0.0.0/8"
    assert settings.graphite.url == "https://graphite.internal"
    assert settings.graphite.timeout == 2.5
    assert settings.librato.email == "ops@example.com"
    assert settings.librato.key == "token"
    assert settings.logging.level.value == "DEBUG"
    assert settings.logging.json_output is True


def test_prefixed_api_key_is_accepted(monkeypatch) -> None:
    monkeypatch.delenv("API_KEY", raising=False)
    monkeypatch.setenv("UMPIRE_API_KEY", "prefixed")

    assert AppSettings().umpire.api_key == "prefixed"
