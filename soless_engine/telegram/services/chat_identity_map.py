"""
Service: ChatIdentityMap

Maps a Telegram chat id to a ConversationStore id. Owned by the Telegram
bridge only; the web channel never sees it.

lookup_or_create() is idempotent: one conversation per chat, created on
first contact. If the mapped conversation has since been evicted from the
store, a replacement is created and remembered.
"""

# Python Packages
from typing import Dict, Optional
import logging
import threading


logger = logging.getLogger(__name__)


class ChatIdentityMap:

    def __init__(self, conversation_store):
        self.conversation_store = conversation_store
        self._lock     = threading.Lock()
        self._mapping: Dict[int, str] = {}


    def lookup(self, chat_id: int) -> Optional[str]:
        with self._lock:
            return self._mapping.get(chat_id)


    def lookup_or_create(self, chat_id: int) -> str:
        with self._lock:
            conversation_id = self._mapping.get(chat_id)

            if conversation_id and self.conversation_store.exists(conversation_id):
                return conversation_id

            if conversation_id:
                logger.info(f"♻️ Conversation {conversation_id} for chat {chat_id} expired, starting a new one")

            conversation_id = self.conversation_store.create()
            self._mapping[chat_id] = conversation_id

        logger.info(f"New conversation started: {chat_id} -> {conversation_id}")
        return conversation_id


    def __len__(self) -> int:
        with self._lock:
            return len(self._mapping)
