"""
Outbound messaging contract of the conversation engine.
"""

from typing import Optional, Protocol

from orderbot.core.conversation.messages import Menu


class Transport(Protocol):
    """Delivers messages to chat users. Delivery failures stay inside the transport."""

    async def send_to_user(self, user_id: int, text: str, menu: Optional[Menu] = None) -> None:
        ...

    async def send_to_dispatcher(self, chat_id: int, text: str) -> None:
        ...
