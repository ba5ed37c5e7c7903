"""Entidades decodificadas das respostas da API de Conversations.

Responsabilidade:
- Mapear payloads JSON (camelCase) para modelos tipados
- Distinguir timestamp ausente (None) de timestamp zero
- Ignorar campos desconhecidos (o servidor pode adicionar campos novos)
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from mb_conversations.domain.enums import (
    ConversationStatus,
    MessageDirection,
    MessageStatus,
    MessageType,
)


class ApiModel(BaseModel):
    """Base para modelos de resposta.

    Aceita tanto o nome do campo em Python quanto o alias camelCase.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class Media(ApiModel):
    """Anexo de mídia (image, video, audio, file)."""

    url: str
    caption: str | None = None


class Location(ApiModel):
    """Coordenadas de uma mensagem do tipo location."""

    latitude: float
    longitude: float


class MessageContent(ApiModel):
    """Conteúdo da mensagem; apenas o campo do tipo enviado é preenchido."""

    text: str | None = None
    image: Media | None = None
    video: Media | None = None
    audio: Media | None = None
    file: Media | None = None
    location: Location | None = None
    hsm: dict[str, Any] | None = None
    interactive: dict[str, Any] | None = None


class Fallback(ApiModel):
    """Canal alternativo usado quando a entrega falha no canal original."""

    from_: str = Field(alias="from")
    after: str | None = None


class Contact(ApiModel):
    """Contato dono da conversa (resolvido pelo servidor)."""

    id: str
    href: str | None = None
    msisdn: str | None = None
    display_name: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    custom_details: dict[str, Any] | None = None
    attributes: dict[str, Any] | None = None
    created_datetime: datetime | None = None
    updated_datetime: datetime | None = None

    @field_validator("msisdn", mode="before")
    @classmethod
    def _msisdn_as_str(cls, value: Any) -> Any:
        # A API devolve o número como inteiro
        if isinstance(value, int):
            return str(value)
        return value


class Channel(ApiModel):
    """Canal (endpoint de plataforma) usado numa conversa."""

    id: str
    name: str | None = None
    platform_id: str | None = None
    status: str | None = None
    created_datetime: datetime | None = None
    updated_datetime: datetime | None = None


class MessagesCount(ApiModel):
    """Resumo das mensagens de uma conversa."""

    href: str = ""
    total_count: int = 0
    last_message_id: str = ""


class Conversation(ApiModel):
    """Conversa entre a conta e um contato."""

    id: str
    contact_id: str = ""
    contact: Contact | None = None
    channels: list[Channel] = Field(default_factory=list)
    status: ConversationStatus
    created_datetime: datetime | None = None
    updated_datetime: datetime | None = None
    last_received_datetime: datetime | None = None
    last_used_channel_id: str = ""
    last_used_platform_id: str = ""
    messages: MessagesCount = Field(default_factory=MessagesCount)

    @field_validator("messages", mode="before")
    @classmethod
    def _null_messages_as_empty(cls, value: Any) -> Any:
        # Resumo nulo equivale a conversa sem mensagens
        if value is None:
            return MessagesCount()
        return value


class ConversationList(ApiModel):
    """Página de conversas completas."""

    offset: int = 0
    limit: int = 0
    count: int = 0
    total_count: int = 0
    items: list[Conversation] = Field(default_factory=list)


class ConversationByContactList(ApiModel):
    """Página de conversas de um contato.

    Os itens são apenas IDs; use `read` para obter a conversa completa.
    """

    offset: int = 0
    limit: int = 0
    count: int = 0
    total_count: int = 0
    items: list[str] = Field(default_factory=list)


class Message(ApiModel):
    """Mensagem enviada ou recebida numa conversa."""

    id: str
    conversation_id: str = ""
    platform: str = ""
    to: str = ""
    from_: str = Field(default="", alias="from")
    channel_id: str = ""
    type: MessageType | None = None
    content: MessageContent | None = None
    direction: MessageDirection | None = None
    status: MessageStatus | None = None
    source: dict[str, Any] | None = None
    tag: str | None = None
    fallback: Fallback | None = None
    created_datetime: datetime | None = None
    updated_datetime: datetime | None = None


class MessageList(ApiModel):
    """Página de mensagens."""

    offset: int = 0
    limit: int = 0
    count: int = 0
    total_count: int = 0
    items: list[Message] = Field(default_factory=list)
