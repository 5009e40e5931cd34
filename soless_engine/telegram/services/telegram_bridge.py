"""
Service: TelegramBridge
========================
Channel adapter between Telegram chats and the turn pipeline.

Synchronous on purpose: the aiogram handlers in telegram/bot.py run these
methods in a worker thread (asyncio.to_thread), so PDF extraction and the
completion call never block the event loop.

Every failure is turned into a short apology for the chat; the detail goes
to the log. A failed completion is retried once through TurnService.retry()
(timeouts are not retried), which finishes the pending turn without
re-appending the user message.
"""

# Python Packages
from typing import List
import logging

# Exceptions
from ...util.exceptions import AppException, UpstreamException

# Services
from .chat_identity_map import ChatIdentityMap

# Config
from ..config import bot_messages


logger = logging.getLogger(__name__)


class TelegramBridge:

    def __init__(self, turn_service, identity_map: ChatIdentityMap, completion_retries: int = 1):
        self.turn_service       = turn_service
        self.identity_map       = identity_map
        self.completion_retries = completion_retries


    def start_chat(self, chat_id: int) -> str:
        """ /start: make sure the chat has a conversation, return the welcome text. """

        try:
            self.identity_map.lookup_or_create(chat_id)
            return bot_messages.WELCOME_MESSAGE

        except Exception as error:
            logger.error(f"Error starting conversation for chat {chat_id}: {error}")
            return bot_messages.CONNECTION_APOLOGY


    def reply_to(self, chat_id: int, text: str) -> str:
        """
        Run one turn for the chat and return the text to send back.
        Never raises.
        """

        try:
            conversation_id = self.identity_map.lookup_or_create(chat_id)
        except Exception as error:
            logger.error(f"Error creating conversation for chat {chat_id}: {error}")
            return bot_messages.CONNECTION_APOLOGY

        try:
            reply = self._run_turn(conversation_id, text)
            logger.info(f"Message processed for {chat_id}")
            return reply

        except UpstreamException as error:
            logger.error(f"Completion failed for chat {chat_id}: {error.error_code} {error.details}")
            if error.error_code == "COMPLETION_TIMEOUT":
                return bot_messages.TIMEOUT_APOLOGY
            return bot_messages.PROCESSING_APOLOGY

        except AppException as error:
            logger.error(f"Error processing message for chat {chat_id}: {error.error_code} {error.message}")
            return bot_messages.PROCESSING_APOLOGY

        except Exception:
            logger.exception(f"Unexpected error processing message for chat {chat_id}")
            return bot_messages.PROCESSING_APOLOGY



    # ── Private ────────────────────────────────────────────────────────────────
    def _run_turn(self, conversation_id: str, text: str) -> str:
        try:
            return self.turn_service.send_message(conversation_id, text)["message"]

        except UpstreamException as error:
            if error.error_code == "COMPLETION_TIMEOUT" or self.completion_retries < 1:
                raise
            last_error = error

        for attempt in range(1, self.completion_retries + 1):
            logger.warning(f"🔁 Retrying completion for {conversation_id} (attempt {attempt})")
            try:
                return self.turn_service.retry(conversation_id)["message"]
            except UpstreamException as error:
                last_error = error

        raise last_error


def split_message(text: str, limit: int = bot_messages.MAX_MESSAGE_LENGTH) -> List[str]:
    """
    Split a reply into Telegram-sized chunks, preferring paragraph and
    line breaks over hard cuts.
    """

    text = text or ""
    chunks = []

    while len(text) > limit:
        cut = text.rfind("\n\n", 0, limit)
        if cut <= 0:
            cut = text.rfind("\n", 0, limit)
        if cut <= 0:
            cut = limit

        chunks.append(text[:cut].rstrip())
        text = text[cut:].lstrip("\n")

    if text or not chunks:
        chunks.append(text)

    return chunks
