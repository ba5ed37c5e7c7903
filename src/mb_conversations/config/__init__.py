"""Configurações centralizadas do mb_conversations.

Uso típico:
    from mb_conversations.config import get_settings
"""

from mb_conversations.config.settings import (
    ACCESS_KEY_SCHEME,
    CONVERSATIONS_API_BASE_URL,
    Settings,
    get_settings,
)

__all__ = [
    "Settings",
    "get_settings",
    "ACCESS_KEY_SCHEME",
    "CONVERSATIONS_API_BASE_URL",
]
