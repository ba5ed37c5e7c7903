"""Operações de mensagens: send, list, list por conversa e read."""

from __future__ import annotations

from mb_conversations.application.conversations import CONVERSATIONS_PATH, MESSAGES_PATH
from mb_conversations.application.query import ListMessagesRequest, PaginationRequest, with_query
from mb_conversations.domain.models import Message, MessageList
from mb_conversations.domain.protocols import Requester
from mb_conversations.domain.requests import SendMessageRequest

SEND_PATH = "/send"
MESSAGE_PATH = "/messages"


async def send_message(requester: Requester, request: SendMessageRequest) -> Message:
    """Envia mensagem sem referenciar conversa; o servidor resolve a conversa."""
    return await requester.request(Message, "POST", SEND_PATH, request)


async def list_messages(
    requester: Requester,
    options: ListMessagesRequest | None = None,
) -> MessageList:
    """Lista mensagens da conta, opcionalmente filtradas por `ids`."""
    return await requester.request(MessageList, "GET", with_query(MESSAGE_PATH, options))


async def list_conversation_messages(
    requester: Requester,
    conversation_id: str,
    options: PaginationRequest | None = None,
) -> MessageList:
    """Lista as mensagens de uma conversa."""
    base = f"{CONVERSATIONS_PATH}/{conversation_id}/{MESSAGES_PATH}"
    return await requester.request(MessageList, "GET", with_query(base, options))


async def read_message(requester: Requester, message_id: str) -> Message:
    return await requester.request(Message, "GET", f"{MESSAGE_PATH}/{message_id}")
