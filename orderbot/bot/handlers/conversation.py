"""
Order conversation handlers.
Every text message is passed to the conversation engine.
"""

import logging

from aiogram import F, Router
from aiogram.types import Message

from orderbot.core.conversation import ConversationEngine, UserIdentity

logger = logging.getLogger(__name__)

router = Router(name="conversation")


def identity_from_message(message: Message) -> UserIdentity:
    """Collect what Telegram tells us about the sender."""
    user = message.from_user
    if user is None:
        return UserIdentity()
    return UserIdentity(
        username=user.username,
        first_name=user.first_name,
        last_name=user.last_name,
    )


@router.message(F.text)
async def handle_text(message: Message, engine: ConversationEngine) -> None:
    """Advance the sender's conversation."""
    await engine.on_message(
        user_id=message.chat.id,
        identity=identity_from_message(message),
        text=message.text,
    )


@router.message()
async def handle_non_text(message: Message) -> None:
    """Stickers, photos, voice etc. do not move the conversation."""
    logger.debug(f"Ignoring non-text message from chat {message.chat.id}")
    await message.answer("Пожалуйста, отправьте ответ текстовым сообщением.")
