"""
Telegram delivery of conversation messages.
"""

import logging
from typing import Optional

from aiogram import Bot
from aiogram.exceptions import TelegramAPIError

from orderbot.bot.keyboards.menu import build_reply_keyboard
from orderbot.core.conversation.messages import Menu

logger = logging.getLogger(__name__)


class TelegramTransport:
    """Send messages through the Bot API, logging delivery failures."""

    def __init__(self, bot: Bot):
        self.bot = bot

    async def send_to_user(self, user_id: int, text: str, menu: Optional[Menu] = None) -> None:
        reply_markup = build_reply_keyboard(menu) if menu else None
        try:
            await self.bot.send_message(chat_id=user_id, text=text, reply_markup=reply_markup)
        except TelegramAPIError as e:
            logger.error(f"Failed to send message to user {user_id}: {e}", exc_info=True)

    async def send_to_dispatcher(self, chat_id: int, text: str) -> None:
        try:
            await self.bot.send_message(chat_id=chat_id, text=text)
            logger.info(f"Order notification sent to dispatcher {chat_id}")
        except TelegramAPIError as e:
            logger.error(f"Failed to notify dispatcher {chat_id}: {e}", exc_info=True)
