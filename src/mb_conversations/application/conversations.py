"""Operações de conversas: list, list_by_contact, read, start, reply, update.

Cada operação resolve método, caminho e corpo, e delega ao `Requester`
injetado. Erros do colaborador propagam sem tradução e sem retry.
"""

from __future__ import annotations

import logging

from mb_conversations.application.query import ListByContactRequest, ListRequest, with_query
from mb_conversations.domain.models import (
    Conversation,
    ConversationByContactList,
    ConversationList,
    Message,
)
from mb_conversations.domain.protocols import Requester
from mb_conversations.domain.requests import ReplyRequest, StartRequest, UpdateRequest
from mb_conversations.observability.logging import get_logger

logger: logging.Logger = get_logger(__name__)

CONVERSATIONS_PATH = "/conversations"
CONTACT_CONVERSATION_PATH = "conversation"
START_PATH = "start"
MESSAGES_PATH = "messages"


async def list_conversations(
    requester: Requester,
    options: ListRequest | None = None,
) -> ConversationList:
    """Lista conversas; a paginação é definida em `options`."""
    path = with_query(CONVERSATIONS_PATH, options)
    logger.debug("Listando conversas", extra={"operation": "list"})
    return await requester.request(ConversationList, "GET", path)


async def list_by_contact(
    requester: Requester,
    contact_id: str,
    options: ListByContactRequest | None = None,
) -> ConversationByContactList:
    """Lista os IDs das conversas de um contato."""
    base = f"{CONVERSATIONS_PATH}/{contact_id}/{CONTACT_CONVERSATION_PATH}"
    logger.debug("Listando conversas do contato", extra={"operation": "list_by_contact"})
    return await requester.request(ConversationByContactList, "GET", with_query(base, options))


async def read(requester: Requester, conversation_id: str) -> Conversation:
    """Busca uma conversa pelo ID."""
    return await requester.request(Conversation, "GET", f"{CONVERSATIONS_PATH}/{conversation_id}")


async def start(requester: Requester, request: StartRequest) -> Conversation:
    """Inicia uma conversa enviando a primeira mensagem.

    Se já existir conversa ativa para o destinatário, ela é retomada.
    """
    logger.debug("Iniciando conversa", extra={"operation": "start", "type": request.type})
    return await requester.request(
        Conversation, "POST", f"{CONVERSATIONS_PATH}/{START_PATH}", request
    )


async def reply(
    requester: Requester,
    conversation_id: str,
    request: ReplyRequest,
) -> Message:
    """Envia mensagem numa conversa existente.

    Se a conversa estiver arquivada, o servidor cria uma nova.
    """
    path = f"{CONVERSATIONS_PATH}/{conversation_id}/{MESSAGES_PATH}"
    logger.debug("Respondendo conversa", extra={"operation": "reply", "type": request.type})
    return await requester.request(Message, "POST", path, request)


async def update(
    requester: Requester,
    conversation_id: str,
    request: UpdateRequest,
) -> Conversation:
    """Altera o status da conversa (arquivar/desarquivar)."""
    logger.debug("Atualizando conversa", extra={"operation": "update", "status": request.status})
    return await requester.request(
        Conversation, "PATCH", f"{CONVERSATIONS_PATH}/{conversation_id}", request
    )
