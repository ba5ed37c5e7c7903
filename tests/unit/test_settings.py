"""Testes unitários para config/settings.py."""

from __future__ import annotations

import pytest

from mb_conversations.config.settings import (
    CONVERSATIONS_API_BASE_URL,
    Settings,
    get_settings,
)


class TestSettingsDefaults:
    """Testes para valores padrão de Settings."""

    def test_default_base_url(self) -> None:
        s = Settings()
        assert s.conversations_api_base_url == CONVERSATIONS_API_BASE_URL
        assert CONVERSATIONS_API_BASE_URL == "https://conversations.messagebird.com/v1"

    def test_default_environment_is_development(self) -> None:
        s = Settings()
        assert s.is_development is True
        assert s.is_production is False

    def test_user_agent(self) -> None:
        s = Settings(service_name="svc", version="1.2.3")
        assert s.user_agent == "svc/1.2.3"


class TestSettingsFromEnv:
    """Leitura de variáveis de ambiente."""

    def test_access_key_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MESSAGEBIRD_ACCESS_KEY", "live_abc")
        monkeypatch.setenv("REQUEST_TIMEOUT_SECONDS", "12.5")

        s = get_settings()

        assert s.messagebird_access_key == "live_abc"
        assert s.request_timeout_seconds == 12.5

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()


class TestValidateApiConfig:
    """Testes para validate_api_config."""

    def test_valid_config(self) -> None:
        s = Settings(messagebird_access_key="k")
        assert s.validate_api_config() == []

    def test_missing_access_key(self) -> None:
        errors = Settings(messagebird_access_key=None).validate_api_config()
        assert any("MESSAGEBIRD_ACCESS_KEY" in e for e in errors)

    def test_http_forbidden_in_production(self) -> None:
        s = Settings(
            messagebird_access_key="k",
            environment="production",
            conversations_api_base_url="http://conversations.messagebird.com/v1",
        )
        assert any("https" in e for e in s.validate_api_config())

    def test_invalid_timeout_and_format(self) -> None:
        s = Settings(messagebird_access_key="k", request_timeout_seconds=0, log_format="xml")
        errors = s.validate_api_config()
        assert len(errors) == 2
