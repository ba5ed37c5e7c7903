from __future__ import annotations

from typing import Any

import pytest

from mb_conversations.config.settings import get_settings
from tests.helpers.fake_requester import FakeRequester


@pytest.fixture()
def requester() -> FakeRequester:
    return FakeRequester()


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def conversation_payload() -> dict[str, Any]:
    return {
        "id": "2e15efafec384e1c82e9842075e87beb",
        "contactId": "a621095fa44947a28b441cfdf85cb802",
        "contact": {
            "id": "a621095fa44947a28b441cfdf85cb802",
            "href": "https://rest.messagebird.com/1/contacts/a621095fa44947a28b441cfdf85cb802",
            "msisdn": 316123456789,
            "firstName": "Jen",
            "lastName": "Smith",
            "customDetails": {"custom1": None},
            "createdDatetime": "2018-06-03T20:06:03Z",
            "updatedDatetime": None,
        },
        "channels": [
            {
                "id": "853eeb5348e541a595da93b48c61a1ae",
                "name": "SMS",
                "platformId": "sms",
                "status": "active",
                "createdDatetime": "2018-06-03T20:06:03Z",
                "updatedDatetime": "2018-06-05T20:06:03Z",
            }
        ],
        "status": "active",
        "createdDatetime": "2018-06-03T20:06:03Z",
        "lastReceivedDatetime": "2018-06-03T20:06:03Z",
        "lastUsedChannelId": "853eeb5348e541a595da93b48c61a1ae",
        "lastUsedPlatformId": "sms",
        "messages": {
            "totalCount": 10,
            "href": "https://conversations.messagebird.com/v1/conversations/2e15efafec384e1c82e9842075e87beb/messages",
            "lastMessageId": "6a8ba4ea52a54c6fa4bbdb5ab5bbd4a1",
        },
    }


@pytest.fixture()
def message_payload() -> dict[str, Any]:
    return {
        "id": "mesid",
        "conversationId": "convid",
        "platform": "sms",
        "to": "+31624971134",
        "from": "MessageBird",
        "channelId": "chid",
        "type": "text",
        "content": {"text": "Hello world"},
        "direction": "received",
        "status": "failed",
        "createdDatetime": "2019-03-11T13:15:32Z",
        "updatedDatetime": "2019-03-11T13:15:33Z",
    }
