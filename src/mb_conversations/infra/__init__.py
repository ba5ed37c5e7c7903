"""Camada de infraestrutura: adapters para serviços externos.

- HTTP: HttpClient (implementa o Requester de domínio), create_http_client

Uso típico:
    from mb_conversations.infra import create_http_client
"""

from mb_conversations.infra.http import (
    ApiError,
    ApiErrorDetail,
    HttpClient,
    HttpClientConfig,
    HttpError,
    create_http_client,
)

__all__ = [
    "ApiError",
    "ApiErrorDetail",
    "HttpClient",
    "HttpClientConfig",
    "HttpError",
    "create_http_client",
]
