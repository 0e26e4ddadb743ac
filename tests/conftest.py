"""
Shared fixtures for order bot tests.
"""

from dataclasses import dataclass, field
from typing import Optional

import pytest

from orderbot.core.conversation import ConversationEngine, ConversationFlow, SessionStore, UserIdentity
from orderbot.core.conversation.messages import Menu
from orderbot.core.orders import OrderLedger


@dataclass
class SentMessage:
    chat_id: int
    text: str
    menu: Optional[Menu] = None


@dataclass
class RecordingTransport:
    """Transport that keeps everything it was asked to send."""
    to_users: list[SentMessage] = field(default_factory=list)
    to_dispatcher: list[SentMessage] = field(default_factory=list)

    async def send_to_user(self, user_id: int, text: str, menu: Optional[Menu] = None) -> None:
        self.to_users.append(SentMessage(user_id, text, menu))

    async def send_to_dispatcher(self, chat_id: int, text: str) -> None:
        self.to_dispatcher.append(SentMessage(chat_id, text))

    def last_to(self, user_id: int) -> SentMessage:
        return [m for m in self.to_users if m.chat_id == user_id][-1]


DISPATCHER_ID = 7728044697


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def ledger() -> OrderLedger:
    return OrderLedger()


@pytest.fixture
def identity() -> UserIdentity:
    return UserIdentity(username="ivan_petrov", first_name="Иван", last_name="Петров")


@pytest.fixture
def make_engine(ledger, transport):
    def factory(
        collect_quantity: bool = False,
        dispatcher_chat_id: Optional[int] = DISPATCHER_ID,
        sessions: Optional[SessionStore] = None,
    ) -> ConversationEngine:
        return ConversationEngine(
            ledger=ledger,
            transport=transport,
            sessions=sessions,
            flow=ConversationFlow(collect_quantity=collect_quantity),
            dispatcher_chat_id=dispatcher_chat_id,
        )
    return factory


@pytest.fixture
def engine(make_engine) -> ConversationEngine:
    return make_engine()
