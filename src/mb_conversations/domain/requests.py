"""Corpos de requisição enviados à API (start, reply, update, send).

Campos opcionais valem None por padrão e são omitidos do JSON.
A ordem de declaração dos campos é a ordem das chaves no payload.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from mb_conversations.domain.enums import ConversationStatus, MessageTag, MessageType
from mb_conversations.domain.models import Fallback, MessageContent


class RequestModel(BaseModel):
    """Base para corpos de requisição."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_payload(self) -> dict[str, Any]:
        """Serializa para o dict JSON enviado ao servidor.

        Campos opcionais (padrão None) com valor vazio ("" ou {}) também
        são omitidos.
        """
        payload = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        for name, info in type(self).model_fields.items():
            key = info.alias or name
            if info.default is None and key in payload and payload[key] in ("", {}):
                del payload[key]
        return payload


class StartRequest(RequestModel):
    """Dados do endpoint Start.

    `channel_id` é sempre enviado, mesmo vazio.
    """

    channel_id: str = ""
    content: MessageContent
    to: str
    type: MessageType
    source: dict[str, Any] | None = None
    report_url: str | None = None
    tag: MessageTag | None = None
    track_id: str | None = None
    event_type: str | None = None
    ttl: str | None = None


class ReplyRequest(RequestModel):
    """Dados do endpoint Reply."""

    type: MessageType
    content: MessageContent
    channel_id: str | None = None
    fallback: Fallback | None = None
    source: dict[str, Any] | None = None
    event_type: str | None = None
    report_url: str | None = None
    tag: MessageTag | None = None
    track_id: str | None = None
    ttl: str | None = None


class UpdateRequest(RequestModel):
    """Dados do endpoint Update (arquivar/desarquivar)."""

    status: ConversationStatus


class SendMessageRequest(RequestModel):
    """Dados do endpoint Send (mensagem sem conversa explícita)."""

    to: str
    from_: str = Field(alias="from")
    type: MessageType
    content: MessageContent
    report_url: str | None = None
    source: dict[str, Any] | None = None
    fallback: Fallback | None = None
    tag: MessageTag | None = None
    track_id: str | None = None
    ttl: str | None = None
