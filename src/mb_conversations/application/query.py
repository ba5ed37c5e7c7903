"""Codificação de query strings de paginação e filtros.

Regras:
- Opções ausentes (None) geram query vazia: o servidor usa seus padrões
- Opções presentes sempre emitem limit e offset, mesmo zerados
- Filtros vazios (string vazia ou None) são omitidos
- Ordem estável: limit, offset e filtros na ordem de declaração
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar
from urllib.parse import urlencode

from mb_conversations.domain.enums import ConversationStatus


@dataclass(frozen=True)
class PaginationRequest:
    """Par limit/offset de uma listagem."""

    limit: int = 0
    offset: int = 0

    # Quando False, limit/offset zerados são omitidos
    always_paginate: ClassVar[bool] = True

    def filters(self) -> list[tuple[str, str | None]]:
        """Filtros opcionais, na ordem em que devem aparecer na query."""
        return []

    def get_params(self) -> str:
        """Retorna a query string codificada (sem o `?`)."""
        params: list[tuple[str, str]] = []
        if self.always_paginate or self.limit:
            params.append(("limit", str(self.limit)))
        if self.always_paginate or self.offset:
            params.append(("offset", str(self.offset)))
        params.extend((name, value) for name, value in self.filters() if value)
        return urlencode(params)


@dataclass(frozen=True)
class ListRequest(PaginationRequest):
    """Listagem de conversas, ordenada por lastReceivedDatetime.

    `ids` aceita vários IDs separados por vírgula.
    """

    ids: str | None = None
    status: ConversationStatus | None = None

    def filters(self) -> list[tuple[str, str | None]]:
        return [("ids", self.ids), ("status", _status_param(self.status))]


@dataclass(frozen=True)
class ListByContactRequest(PaginationRequest):
    """Listagem das conversas de um contato."""

    id: str | None = None
    status: ConversationStatus | None = None

    def filters(self) -> list[tuple[str, str | None]]:
        return [("id", self.id), ("status", _status_param(self.status))]


@dataclass(frozen=True)
class ListMessagesRequest(PaginationRequest):
    """Listagem das mensagens de uma conversa."""

    ids: str | None = None

    always_paginate: ClassVar[bool] = False

    def filters(self) -> list[tuple[str, str | None]]:
        return [("ids", self.ids)]


def _status_param(status: ConversationStatus | None) -> str | None:
    return None if status is None else str(status)


def encode_query(options: PaginationRequest | None) -> str:
    """Codifica as opções de listagem; None resulta em string vazia."""
    if options is None:
        return ""
    return options.get_params()


def with_query(path: str, options: PaginationRequest | None) -> str:
    """Anexa a query ao caminho no formato `{path}?{query}`."""
    return f"{path}?{encode_query(options)}"
