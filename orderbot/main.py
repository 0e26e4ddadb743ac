"""
Order bot - Main entry point.
"""

import asyncio
import logging
import sys

from aiogram import Bot, Dispatcher

from orderbot.bot.bot import get_bot, get_dispatcher
from orderbot.bot.handlers import register_handlers
from orderbot.bot.transport import TelegramTransport
from orderbot.config import Settings, settings
from orderbot.core.conversation import ConversationEngine, ConversationFlow, SessionStore
from orderbot.core.orders import OrderLedger


# Fix for Windows asyncio
if sys.platform == "win32":
    asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())


logger = logging.getLogger(__name__)


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def build_engine(bot: Bot, config: Settings) -> ConversationEngine:
    """Wire the conversation engine to Telegram."""
    return ConversationEngine(
        ledger=OrderLedger(),
        transport=TelegramTransport(bot),
        sessions=SessionStore(idle_timeout=config.session_idle_timeout),
        flow=ConversationFlow(collect_quantity=config.collect_quantity),
        dispatcher_chat_id=config.dispatcher_chat_id,
    )


async def on_startup(bot: Bot, engine: ConversationEngine) -> None:
    """Log bot identity on startup."""
    me = await bot.get_me()
    logger.info(f"Authorized on account {me.username}")
    if engine.dispatcher_chat_id is None:
        logger.warning("DISPATCHER_CHAT_ID not set, orders will not be forwarded")


async def on_shutdown(engine: ConversationEngine) -> None:
    """Cleanup on shutdown."""
    logger.info(f"Shutting down, {len(engine.ledger)} orders taken in this run")


async def main() -> None:
    """Main function to run the bot."""
    bot = get_bot()
    dp: Dispatcher = get_dispatcher()

    # Handlers receive the engine through workflow data
    dp["engine"] = build_engine(bot, settings)

    register_handlers(dp)

    dp.startup.register(on_startup)
    dp.shutdown.register(on_shutdown)

    logger.info("Bot is starting...")
    try:
        await dp.start_polling(bot, allowed_updates=dp.resolve_used_update_types())
    finally:
        await bot.session.close()


def run() -> None:
    configure_logging(settings.debug)

    if not settings.telegram_bot_token:
        logger.error("TELEGRAM_BOT_TOKEN environment variable is required")
        sys.exit(1)

    asyncio.run(main())


if __name__ == "__main__":
    run()
