"""Cliente HTTP da API de Conversations (implementa `Requester`).

Adapter fino sobre httpx com:
- Header de autenticação AccessKey e User-Agent
- Propagação do correlation_id corrente
- Tradução de status não-2xx em ApiError
- Decodificação JSON direto no modelo alvo
- Logging estruturado sem corpo de mensagem nem access key

Sem retry: cada chamada é exatamente uma requisição.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from mb_conversations.config.settings import ACCESS_KEY_SCHEME, CONVERSATIONS_API_BASE_URL
from mb_conversations.domain.requests import RequestModel
from mb_conversations.observability.context import get_correlation_id
from mb_conversations.observability.logging import get_logger

if TYPE_CHECKING:
    from mb_conversations.config.settings import Settings

logger: logging.Logger = get_logger(__name__)

T = TypeVar("T", bound=BaseModel)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    access_key: str
    base_url: str = CONVERSATIONS_API_BASE_URL
    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    correlation_id_header: str = "X-Correlation-ID"
    verify_ssl: bool = True


class HttpError(Exception):
    """Erro de requisição HTTP sem expor informações sensíveis."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True)
class ApiErrorDetail:
    """Item da lista `errors` devolvida pela API."""

    code: int
    description: str
    parameter: str | None = None


class ApiError(HttpError):
    """Resposta não-2xx da API, com os erros reportados pelo servidor."""

    def __init__(self, status_code: int, errors: list[ApiErrorDetail]) -> None:
        summary = "; ".join(e.description for e in errors) or "sem descrição"
        super().__init__(f"HTTP {status_code}: {summary}", status_code=status_code)
        self.errors = errors


def _error_code(raw: Any) -> int:
    """Converte o código de erro; valores nulos ou não numéricos viram 0."""
    try:
        return int(raw)
    except (TypeError, ValueError):
        return 0


def _parse_api_errors(response: httpx.Response) -> list[ApiErrorDetail]:
    """Extrai `errors` do corpo; corpo ausente ou mal-formado gera lista vazia."""
    try:
        data = response.json()
    except ValueError:
        return []

    raw_errors = data.get("errors") if isinstance(data, dict) else None
    if not isinstance(raw_errors, list):
        return []

    details: list[ApiErrorDetail] = []
    for item in raw_errors:
        if not isinstance(item, dict):
            continue
        details.append(
            ApiErrorDetail(
                code=_error_code(item.get("code")),
                description=str(item.get("description", "")),
                parameter=item.get("parameter"),
            )
        )
    return details


def _log_request_success(method: str, path: str, status_code: int) -> None:
    logger.debug(
        "Requisição HTTP bem-sucedida",
        extra={"method": method, "path": path, "status_code": status_code},
    )


def _log_api_error(method: str, path: str, error: ApiError) -> None:
    logger.warning(
        "API devolveu erro",
        extra={
            "method": method,
            "path": path,
            "status_code": error.status_code,
            "error_codes": [e.code for e in error.errors],
        },
    )


def _log_transport_error(method: str, path: str, exc: Exception) -> None:
    logger.warning(
        "Falha de transporte HTTP",
        extra={"method": method, "path": path, "error_type": type(exc).__name__},
    )


class HttpClient:
    """Cliente HTTP assíncrono para a API de Conversations.

    Uso típico:
        async with HttpClient(config) as client:
            conv = await conversations.read(client, "conv-id")
    """

    def __init__(
        self,
        config: HttpClientConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Inicializa cliente com configuração.

        Args:
            config: Configuração HTTP
            transport: Transport httpx alternativo (ex.: MockTransport em testes)
        """
        self._config = config
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def _get_client(self) -> httpx.AsyncClient:
        """Retorna cliente httpx (lazy loading)."""
        if self._client is None or self._client.is_closed:
            headers = {
                "Accept": "application/json",
                "Authorization": f"{ACCESS_KEY_SCHEME} {self._config.access_key}",
                **self._config.default_headers,
            }
            self._client = httpx.AsyncClient(
                base_url=self._config.base_url,
                timeout=httpx.Timeout(self._config.timeout_seconds),
                headers=headers,
                verify=self._config.verify_ssl,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Fecha o cliente e libera recursos."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> HttpClient:
        """Suporte a async context manager."""
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Fecha cliente ao sair do context."""
        await self.close()

    def _build_headers(self, body: RequestModel | None) -> dict[str, str]:
        headers: dict[str, str] = {}
        if body is not None:
            headers["Content-Type"] = "application/json"
        correlation_id = get_correlation_id()
        if correlation_id:
            headers[self._config.correlation_id_header] = correlation_id
        return headers

    async def request(
        self,
        target: type[T],
        method: str,
        path: str,
        body: RequestModel | None = None,
    ) -> T:
        """Envia a requisição e decodifica a resposta em `target`.

        Raises:
            ApiError: Status não-2xx
            HttpError: Falha de transporte ou corpo não decodificável
        """
        client = self._get_client()
        payload = body.to_payload() if body is not None else None

        try:
            response = await client.request(
                method,
                path,
                json=payload,
                headers=self._build_headers(body),
            )
        except httpx.TimeoutException as exc:
            _log_transport_error(method, path, exc)
            raise HttpError("Timeout") from exc
        except httpx.HTTPError as exc:
            _log_transport_error(method, path, exc)
            raise HttpError(f"Erro de transporte: {type(exc).__name__}") from exc

        if not response.is_success:
            error = ApiError(response.status_code, _parse_api_errors(response))
            _log_api_error(method, path, error)
            raise error

        _log_request_success(method, path, response.status_code)
        return self._decode(target, response, method, path)

    def _decode(self, target: type[T], response: httpx.Response, method: str, path: str) -> T:
        """Valida o JSON da resposta contra o modelo alvo."""
        try:
            return target.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            logger.error(
                "Response JSON inválido",
                extra={"method": method, "path": path, "target": target.__name__},
            )
            raise HttpError("Response JSON inválido", status_code=response.status_code) from exc


def create_http_client(settings: Settings | None = None) -> HttpClient:
    """Factory para criar cliente HTTP configurado.

    Args:
        settings: Configurações. Se None, usa get_settings()

    Raises:
        ValueError: Se a access key não estiver configurada
    """
    if settings is None:
        from mb_conversations.config.settings import get_settings

        settings = get_settings()

    if not settings.messagebird_access_key:
        raise ValueError("MESSAGEBIRD_ACCESS_KEY é obrigatório")

    config = HttpClientConfig(
        access_key=settings.messagebird_access_key,
        base_url=settings.conversations_api_base_url,
        timeout_seconds=float(settings.request_timeout_seconds),
        default_headers={"User-Agent": settings.user_agent},
        correlation_id_header=settings.correlation_id_header,
    )

    logger.info(
        "Cliente HTTP criado",
        extra={"base_url": config.base_url, "timeout_seconds": config.timeout_seconds},
    )

    return HttpClient(config)
