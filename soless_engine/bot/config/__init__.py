"""
bot/config/__init__.py
======================
Public surface of the bot configuration package.

Config files:
  bot_config   — API-level settings (message length, history and preview limits)
  prompts      — system instruction, prompt template, behaviour directives
"""

from . import bot_config
from . import prompts
