"""Testes de decodificação dos modelos de resposta."""

from __future__ import annotations

from datetime import UTC, datetime

from mb_conversations.domain.enums import (
    ConversationStatus,
    MessageDirection,
    MessageStatus,
    MessageType,
)
from mb_conversations.domain.models import (
    Conversation,
    ConversationByContactList,
    ConversationList,
    Message,
)


class TestConversationDecoding:
    """Testes para Conversation.model_validate."""

    def test_full_payload(self, conversation_payload) -> None:
        conv = Conversation.model_validate(conversation_payload)

        assert conv.id == "2e15efafec384e1c82e9842075e87beb"
        assert conv.status is ConversationStatus.ACTIVE
        assert conv.contact is not None
        assert conv.contact.msisdn == "316123456789"
        assert conv.contact.first_name == "Jen"
        assert conv.channels[0].platform_id == "sms"
        assert conv.last_used_platform_id == "sms"
        assert conv.messages.total_count == 10
        assert conv.messages.last_message_id == "6a8ba4ea52a54c6fa4bbdb5ab5bbd4a1"
        assert conv.created_datetime == datetime(2018, 6, 3, 20, 6, 3, tzinfo=UTC)

    def test_absent_updated_datetime_is_none(self, conversation_payload) -> None:
        """Timestamp ausente vira None, nunca epoch."""
        assert "updatedDatetime" not in conversation_payload

        conv = Conversation.model_validate(conversation_payload)

        assert conv.updated_datetime is None
        assert conv.last_received_datetime is not None

    def test_null_timestamp_is_none(self, conversation_payload) -> None:
        conversation_payload["lastReceivedDatetime"] = None

        conv = Conversation.model_validate(conversation_payload)

        assert conv.last_received_datetime is None

    def test_unknown_fields_are_ignored(self, conversation_payload) -> None:
        conversation_payload["someNewField"] = {"nested": True}

        conv = Conversation.model_validate(conversation_payload)

        assert not hasattr(conv, "someNewField")

    def test_empty_messages_count(self) -> None:
        """MessagesCount com campos zerados quando não há mensagens."""
        conv = Conversation.model_validate(
            {"id": "c1", "status": "archived", "messages": {"href": "", "totalCount": 0}}
        )

        assert conv.status is ConversationStatus.ARCHIVED
        assert conv.messages.total_count == 0
        assert conv.messages.last_message_id == ""
        assert conv.contact is None
        assert conv.channels == []

    def test_null_messages_count_is_empty(self) -> None:
        """Resumo nulo vira MessagesCount zerado."""
        conv = Conversation.model_validate({"id": "c2", "status": "active", "messages": None})

        assert conv.messages.total_count == 0
        assert conv.messages.href == ""


class TestListDecoding:
    """Testes para listas paginadas."""

    def test_conversation_list(self, conversation_payload) -> None:
        page = ConversationList.model_validate(
            {
                "offset": 0,
                "limit": 10,
                "count": 1,
                "totalCount": 1,
                "items": [conversation_payload],
            }
        )

        assert page.total_count == 1
        assert page.items[0].id == conversation_payload["id"]

    def test_by_contact_items_are_plain_ids(self) -> None:
        """Itens por contato são strings, não objetos."""
        page = ConversationByContactList.model_validate(
            {
                "offset": 0,
                "limit": 20,
                "count": 2,
                "totalCount": 2,
                "items": ["fbbdde79129f45e3a179458a91e2ead6", "2e15efafec384e1c82e9842075e87beb"],
            }
        )

        assert page.items == [
            "fbbdde79129f45e3a179458a91e2ead6",
            "2e15efafec384e1c82e9842075e87beb",
        ]
        assert all(isinstance(item, str) for item in page.items)


class TestMessageDecoding:
    """Testes para Message."""

    def test_message_fields(self, message_payload) -> None:
        message = Message.model_validate(message_payload)

        assert message.id == "mesid"
        assert message.from_ == "MessageBird"
        assert message.type is MessageType.TEXT
        assert message.content is not None
        assert message.content.text == "Hello world"
        assert message.direction is MessageDirection.RECEIVED
        assert message.status is MessageStatus.FAILED

    def test_media_content(self) -> None:
        message = Message.model_validate(
            {
                "id": "m2",
                "type": "image",
                "content": {"image": {"url": "https://example.test/a.png"}},
            }
        )

        assert message.content is not None
        assert message.content.image is not None
        assert message.content.image.url == "https://example.test/a.png"
        assert message.content.image.caption is None
        assert message.content.text is None
