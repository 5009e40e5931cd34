"""
Model: Conversation

Represents a chat session. Each session is identified by a UUID and holds
its messages in insertion order. Lives in process memory only.
"""

# Python Packages
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List


ROLE_USER       =   "user"
ROLE_ASSISTANT  =   "assistant"
ROLES           =   (ROLE_USER, ROLE_ASSISTANT)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)





@dataclass(frozen=True)
class Message:
    """ One message (user or assistant turn) in a conversation... """

    role: str
    content: str
    created_at: datetime = field(default_factory=utc_now)

    def to_dict(self) -> dict:
        return {
            "role":       self.role,
            "content":    self.content,
            "created_at": self.created_at.isoformat()
        }





@dataclass
class Conversation:
    """A chat session between one channel identity and the assistant."""

    id: str
    messages: List[Message] = field(default_factory=list)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    @property
    def awaiting_reply(self) -> bool:
        """True when the last turn is a user message with no assistant reply yet."""
        return bool(self.messages) and self.messages[-1].role == ROLE_USER

    def copy(self) -> "Conversation":
        return Conversation(
            id         = self.id,
            messages   = list(self.messages),
            created_at = self.created_at,
            updated_at = self.updated_at
        )

    def to_dict(self) -> dict:
        return {
            "id":         self.id,
            "messages":   [msg.to_dict() for msg in self.messages],
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat()
        }

    def __repr__(self):
        return f"<Conversation {self.id} ({len(self.messages)} messages)>"
