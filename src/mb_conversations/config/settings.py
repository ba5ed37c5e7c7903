"""Configurações do cliente via variáveis de ambiente.

Nunca hardcode a access key: use MESSAGEBIRD_ACCESS_KEY.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

# -----------------------------------------------------------------------------
# Constantes da API de Conversations
# -----------------------------------------------------------------------------
CONVERSATIONS_API_BASE_URL: str = "https://conversations.messagebird.com/v1"
ACCESS_KEY_SCHEME: str = "AccessKey"


class Settings(BaseSettings):
    """Configurações lidas do ambiente."""

    model_config = SettingsConfigDict(
        env_prefix="",
        case_sensitive=False,
    )

    # Aplicação
    service_name: str = "mb_conversations"
    version: str = "0.1.0"
    environment: str = "development"
    log_level: str = "INFO"
    log_format: str = "json"  # json | text

    # API de Conversations
    messagebird_access_key: str | None = None  # Nunca logar
    conversations_api_base_url: str = CONVERSATIONS_API_BASE_URL
    request_timeout_seconds: float = 30.0  # Timeout HTTP (delegado ao httpx)
    correlation_id_header: str = "X-Correlation-ID"

    def validate_api_config(self) -> list[str]:
        """Valida configuração de acesso à API.

        Retorna lista de erros (vazia = OK).
        """
        errors: list[str] = []
        if not self.messagebird_access_key:
            errors.append("MESSAGEBIRD_ACCESS_KEY não configurado")
        if not self.conversations_api_base_url.startswith(("http://", "https://")):
            errors.append("CONVERSATIONS_API_BASE_URL deve começar com http:// ou https://")
        elif self.is_production and self.conversations_api_base_url.startswith("http://"):
            errors.append("CONVERSATIONS_API_BASE_URL deve usar https em production")
        if self.request_timeout_seconds <= 0:
            errors.append("REQUEST_TIMEOUT_SECONDS deve ser > 0")
        if self.log_format.lower() not in {"json", "text"}:
            errors.append("LOG_FORMAT inválido: use json | text")
        return errors

    @property
    def is_production(self) -> bool:
        """Retorna True se ambiente é produção."""
        return self.environment.lower() in ("production", "prod")

    @property
    def is_development(self) -> bool:
        """Retorna True se ambiente é desenvolvimento."""
        return self.environment.lower() in ("development", "dev", "local")

    @property
    def user_agent(self) -> str:
        return f"{self.service_name}/{self.version}"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Retorna uma instância cacheada de Settings."""
    return Settings()
