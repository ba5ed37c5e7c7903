"""Porta para o cliente REST genérico (envio + decodificação)."""

from __future__ import annotations

from typing import Protocol, TypeVar

from pydantic import BaseModel

from mb_conversations.domain.requests import RequestModel

T = TypeVar("T", bound=BaseModel)


class Requester(Protocol):
    """Contrato mínimo do colaborador HTTP.

    Implementações são responsáveis por transporte, autenticação,
    tradução de status HTTP em erro e (de)codificação JSON.
    """

    async def request(
        self,
        target: type[T],
        method: str,
        path: str,
        body: RequestModel | None = None,
    ) -> T:
        """Envia a requisição e decodifica a resposta em `target`.

        Args:
            target: Modelo pydantic da resposta
            method: Método HTTP (GET, POST, PATCH)
            path: Caminho relativo à URL base, com query string
            body: Corpo opcional

        Returns:
            Instância de `target` preenchida com a resposta
        """
        ...
