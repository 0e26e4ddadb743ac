"""
Reply keyboards built from conversation menus.
"""

from aiogram.types import KeyboardButton, ReplyKeyboardMarkup

from orderbot.core.conversation.messages import Menu


def build_reply_keyboard(menu: Menu) -> ReplyKeyboardMarkup:
    """Turn rows of button captions into a Telegram reply keyboard."""
    return ReplyKeyboardMarkup(
        keyboard=[[KeyboardButton(text=caption) for caption in row] for row in menu],
        resize_keyboard=True,
        input_field_placeholder="Выберите действие...",
    )
