"""
Conversation engine: routes incoming messages through the order flow.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from orderbot.core.conversation.flow import ConversationFlow, Reply, Submission, advance
from orderbot.core.conversation.messages import MAIN_MENU
from orderbot.core.conversation.sessions import SessionStore
from orderbot.core.orders import Order, OrderLedger, derive_display_name

if TYPE_CHECKING:
    from orderbot.core.transport import Transport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UserIdentity:
    """Whatever the chat platform tells us about the sender."""
    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    @property
    def display_name(self) -> str:
        return derive_display_name(self.username, self.first_name, self.last_name)


class ConversationEngine:
    """Drives every user through the order conversation."""

    def __init__(
        self,
        ledger: OrderLedger,
        transport: Transport,
        sessions: Optional[SessionStore] = None,
        flow: ConversationFlow = ConversationFlow(),
        dispatcher_chat_id: Optional[int] = None,
    ):
        self.ledger = ledger
        self.transport = transport
        self.sessions = sessions if sessions is not None else SessionStore()
        self.flow = flow
        self.dispatcher_chat_id = dispatcher_chat_id

    async def on_message(
        self,
        user_id: int,
        identity: UserIdentity,
        text: str,
    ) -> Optional[Order]:
        """
        Handle one incoming text message.

        Returns the order created by this message, if the message completed
        a conversation.
        """
        async with self.sessions.lock(user_id):
            session = self.sessions.get_or_create(user_id)
            previous_stage = session.stage

            step = advance(session.state, text, self.flow)
            replies = list(step.replies)
            order = None
            dispatcher_notice = None

            if step.submission is not None:
                order = self._create_order(user_id, identity, step.submission)
                if self.dispatcher_chat_id:
                    dispatcher_notice = order.format_dispatcher_notice()
                else:
                    logger.debug(f"No dispatcher configured, order {order.id} not forwarded")
                replies.append(Reply(order.format_confirmation(), menu=MAIN_MENU))
                self.sessions.reset(user_id)
            else:
                self.sessions.update(user_id, step.state)

            if step.state.stage is not previous_stage:
                logger.debug(
                    f"User {user_id}: {previous_stage.value} -> {step.state.stage.value}"
                )

        if dispatcher_notice is not None:
            await self.transport.send_to_dispatcher(self.dispatcher_chat_id, dispatcher_notice)
        for reply in replies:
            await self.transport.send_to_user(user_id, reply.text, reply.menu)

        return order

    def _create_order(self, user_id: int, identity: UserIdentity, submission: Submission) -> Order:
        return self.ledger.create(
            user_id=user_id,
            display_name=identity.display_name,
            product=submission.product,
            address=submission.address,
            phone=submission.phone,
            quantity=submission.quantity,
        )
