"""
Bot handlers registration.
"""

from aiogram import Dispatcher

from orderbot.bot.handlers.conversation import router as conversation_router


def register_handlers(dp: Dispatcher) -> None:
    """Register all handlers to dispatcher."""
    dp.include_router(conversation_router)
