"""Enums de domínio da API de Conversations (status, tipos e tags)."""

from __future__ import annotations

from enum import StrEnum


class ConversationStatus(StrEnum):
    """Status de uma conversa.

    - active: somente uma conversa ativa pode existir por contato
    - archived: uma nova mensagem do contato cria uma conversa nova
    """

    ACTIVE = "active"
    ARCHIVED = "archived"


class MessageType(StrEnum):
    """Tipos de conteúdo aceitos pela API."""

    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    FILE = "file"
    LOCATION = "location"
    EVENT = "event"
    HSM = "hsm"
    INTERACTIVE = "interactive"


class MessageDirection(StrEnum):
    """Direção da mensagem relativa à conta."""

    RECEIVED = "received"
    SENT = "sent"


class MessageStatus(StrEnum):
    """Status de entrega reportado pelo servidor."""

    ACCEPTED = "accepted"
    PENDING = "pending"
    SENT = "sent"
    DELIVERED = "delivered"
    READ = "read"
    RECEIVED = "received"
    REJECTED = "rejected"
    FAILED = "failed"
    DELETED = "deleted"
    TRANSMITTED = "transmitted"
    UNKNOWN = "unknown"


class MessageTag(StrEnum):
    """Tags de mensagem (usadas fora da janela de 24h em alguns canais)."""

    CONFIRMED_EVENT_UPDATE = "CONFIRMED_EVENT_UPDATE"
    POST_PURCHASE_UPDATE = "POST_PURCHASE_UPDATE"
    ACCOUNT_UPDATE = "ACCOUNT_UPDATE"
    HUMAN_AGENT = "HUMAN_AGENT"


class Platform(StrEnum):
    """Plataformas conhecidas.

    Campos de plataforma nos modelos são `str`: o servidor pode devolver
    plataformas novas que não estão listadas aqui.
    """

    SMS = "sms"
    WHATSAPP = "whatsapp"
    FACEBOOK = "facebook"
    TELEGRAM = "telegram"
    LINE = "line"
    WECHAT = "wechat"
    EMAIL = "email"
    INSTAGRAM = "instagram"
