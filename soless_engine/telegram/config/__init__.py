"""
telegram/config/__init__.py
===========================
  bot_messages — welcome/help/about texts and chat apologies
"""

from . import bot_messages
