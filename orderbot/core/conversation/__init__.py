"""
Conversation module for the order bot.
Handles per-user sessions and the order collection flow.
"""

from orderbot.core.conversation.engine import ConversationEngine, UserIdentity
from orderbot.core.conversation.flow import (
    ConversationFlow,
    Reply,
    Submission,
    Transition,
    advance,
)
from orderbot.core.conversation.sessions import Session, SessionStore
from orderbot.core.conversation.states import (
    AwaitingAddress,
    AwaitingPhone,
    AwaitingProduct,
    AwaitingQuantity,
    ConversationState,
    Idle,
    Stage,
)

__all__ = [
    # Engine
    "ConversationEngine",
    "UserIdentity",
    # Flow
    "ConversationFlow",
    "Reply",
    "Submission",
    "Transition",
    "advance",
    # Sessions
    "Session",
    "SessionStore",
    # States
    "Stage",
    "ConversationState",
    "Idle",
    "AwaitingProduct",
    "AwaitingQuantity",
    "AwaitingAddress",
    "AwaitingPhone",
]
