"""
Service: ConversationStore

Creates, reads, and appends to conversation sessions held in memory.

Design:
  - create() hands out a UUID4; ids never collide and are never reused.
  - append_message() never creates a conversation: unknown ids raise
    NotFoundException and nothing else is touched.
  - Every public operation runs under one store lock, so a single append
    is atomic even when several request threads share the store.
  - get() returns a copy; history is only changed through append_message().
  - lock_for() hands out one lock per live conversation id. TurnService holds it
    for a whole turn so at most one completion is in flight per conversation.

Lifecycle:
  Unbounded by default (conversations live until restart). Pass max_count
  to evict the least recently used conversation, and/or ttl_seconds to
  sweep conversations idle for longer than the TTL whenever one is created.
"""

# Python Packages
from collections import OrderedDict
from datetime import timedelta
from typing import Dict, Optional
import logging
import threading
import uuid

# Models
from ...models.conversation import Conversation, Message, ROLES, utc_now

# Exceptions & messages
from ...util.exceptions import NotFoundException, ValidationException
from ...util import messages


logger = logging.getLogger(__name__)


class ConversationStore:
    """
    In-memory map of conversation id → ordered message history.
    """

    def __init__(self, max_count: Optional[int] = None, ttl_seconds: Optional[int] = None):
        self.max_count   = max_count or None
        self.ttl_seconds = ttl_seconds or None

        self._conversations: "OrderedDict[str, Conversation]" = OrderedDict()
        self._lock       = threading.Lock()
        self._turn_locks: Dict[str, threading.Lock] = {}

    # ── Session Management ─────────────────────────────────────────────────────

    def create(self) -> str:
        """
        Allocate a new empty conversation.

        Returns:
            The new conversation id.
        """
        with self._lock:
            self._sweep_expired()

            conversation_id = str(uuid.uuid4())
            while conversation_id in self._conversations:
                conversation_id = str(uuid.uuid4())

            self._conversations[conversation_id] = Conversation(id=conversation_id)
            self._evict_overflow()

        logger.info(f"✅ New conversation created: {conversation_id}")
        return conversation_id

    def get(self, conversation_id: str) -> Conversation:
        """
        Return a snapshot of the conversation.

        Raises:
            NotFoundException: unknown (or evicted) id.
        """
        with self._lock:
            return self._require(conversation_id).copy()

    def exists(self, conversation_id: str) -> bool:
        with self._lock:
            return conversation_id in self._conversations

    # ── Message Persistence ────────────────────────────────────────────────────

    def append_message(self, conversation_id: str, role: str, content: str) -> Message:
        """
        Append a message to an existing conversation.

        Raises:
            ValidationException: role is not "user" or "assistant".
            NotFoundException:   unknown id; no conversation is created.
        """
        if role not in ROLES:
            raise ValidationException(
                message    = messages.ERROR["INVALID_ROLE"],
                error_code = "INVALID_ROLE"
            )

        with self._lock:
            conversation = self._require(conversation_id)

            message = Message(role=role, content=content)
            conversation.messages.append(message)
            conversation.updated_at = message.created_at

        return message

    # ── Serialization ──────────────────────────────────────────────────────────

    def lock_for(self, conversation_id: str) -> threading.Lock:
        """
        One lock object per live conversation id, created on first use and
        dropped when the conversation is evicted or expires.

        Raises:
            NotFoundException: unknown (or evicted) id; no lock is created.
        """
        with self._lock:
            self._require(conversation_id)
            turn_lock = self._turn_locks.get(conversation_id)
            if turn_lock is None:
                turn_lock = self._turn_locks[conversation_id] = threading.Lock()
            return turn_lock

    def __len__(self) -> int:
        with self._lock:
            return len(self._conversations)

    # ── Private ────────────────────────────────────────────────────────────────

    def _require(self, conversation_id: str) -> Conversation:
        conversation = self._conversations.get(conversation_id)
        if conversation is None:
            raise NotFoundException(
                message    = messages.ERROR["CONVERSATION_NOT_FOUND"],
                error_code = "CONVERSATION_NOT_FOUND"
            )

        if self.max_count:
            self._conversations.move_to_end(conversation_id)
        return conversation

    def _evict_overflow(self) -> None:
        if not self.max_count:
            return
        while len(self._conversations) > self.max_count:
            evicted_id, _ = self._conversations.popitem(last=False)
            self._forget(evicted_id)
            logger.info(f"♻️ Evicted least recently used conversation: {evicted_id}")

    def _sweep_expired(self) -> None:
        if not self.ttl_seconds:
            return
        cutoff  = utc_now() - timedelta(seconds=self.ttl_seconds)
        expired = [cid for cid, conv in self._conversations.items() if conv.updated_at < cutoff]
        for conversation_id in expired:
            del self._conversations[conversation_id]
            self._forget(conversation_id)
        if expired:
            logger.info(f"♻️ Swept {len(expired)} idle conversation(s)")

    def _forget(self, conversation_id: str) -> None:
        # A turn still holding the lock fails on its next append (NotFound)
        self._turn_locks.pop(conversation_id, None)
