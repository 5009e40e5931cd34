"""
Bot Services Package

Exports all service classes used by BotController and the Telegram bridge.

Service responsibilities:
  TurnService        — one conversational turn end to end (main entry point)
  ConversationStore  — in-memory sessions, ordered history, per-id turn locks
  PromptBuilder      — persona + knowledge + directives + history → prompt
"""

from .conversation_store import ConversationStore
from .prompt_builder import PromptBuilder
from .turn_service import TurnService

__all__ = [
    "ConversationStore",
    "PromptBuilder",
    "TurnService",
]
