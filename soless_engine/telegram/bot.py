"""
Telegram bot transport (aiogram 3).

Thin async layer: every handler hands the real work to TelegramBridge in a
worker thread and sends back whatever text it returns.
"""

# Python Packages
import asyncio
import logging

from aiogram import Bot, Dispatcher, Router, F, types
from aiogram.enums import ChatAction, ParseMode
from aiogram.filters import Command, CommandStart

# Services
from .services.chat_identity_map import ChatIdentityMap
from .services.telegram_bridge import TelegramBridge, split_message

# Config
from .config import bot_messages


logger = logging.getLogger(__name__)





def build_router(bridge: TelegramBridge) -> Router:
    router = Router(name = "soless")

    @router.message(CommandStart())
    async def cmd_start(message: types.Message):
        text = await asyncio.to_thread(bridge.start_chat, message.chat.id)
        await message.answer(text, parse_mode = ParseMode.MARKDOWN)

    @router.message(Command("help"))
    async def cmd_help(message: types.Message):
        await message.answer(bot_messages.HELP_MESSAGE, parse_mode = ParseMode.MARKDOWN)

    @router.message(Command("about"))
    async def cmd_about(message: types.Message):
        await message.answer(bot_messages.ABOUT_MESSAGE, parse_mode = ParseMode.MARKDOWN)

    @router.message(F.text & ~F.text.startswith("/"))
    async def any_text(message: types.Message):
        chat_id = message.chat.id

        try:
            await message.bot.send_chat_action(chat_id, ChatAction.TYPING)
        except Exception as error:
            logger.debug(f"typing indicator failed for {chat_id}: {error}")

        reply = await asyncio.to_thread(bridge.reply_to, chat_id, message.text)

        for chunk in split_message(reply):
            if chunk.strip():
                await message.answer(chunk)

    return router


def build_bridge(container) -> TelegramBridge:
    return TelegramBridge(
        turn_service = container.turn_service,
        identity_map = ChatIdentityMap(container.conversation_store)
    )


async def run_polling(container, token: str) -> None:
    """
    Long-poll Telegram until cancelled.
    """

    bot = Bot(token = token)
    dp  = Dispatcher()
    dp.include_router(build_router(build_bridge(container)))

    logger.info("Starting SOLess Project Bot...")
    try:
        await dp.start_polling(bot, handle_signals = False)
    finally:
        await bot.session.close()
