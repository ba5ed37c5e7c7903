"""Re-exports dos Protocolos de domínio."""

from __future__ import annotations

from mb_conversations.domain.protocols.requester import Requester

__all__ = ["Requester"]
