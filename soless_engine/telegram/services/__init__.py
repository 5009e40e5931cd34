"""
Telegram Services Package

  TelegramBridge         — chat text → turn pipeline → reply text (never raises)
  ChatIdentityMap        — Telegram chat id → conversation id, lookup-or-create
  TelegramSettingsStore  — enabled flag + bot token record
"""

from .chat_identity_map import ChatIdentityMap
from .telegram_bridge import TelegramBridge, split_message
from .telegram_settings_store import TelegramSettingsStore, is_valid_bot_token, mask_token

__all__ = [
    "ChatIdentityMap",
    "TelegramBridge",
    "split_message",
    "TelegramSettingsStore",
    "is_valid_bot_token",
    "mask_token",
]
