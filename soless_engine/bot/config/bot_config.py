"""
bot_config.py — API-Level Bot Settings
=======================================
Top-level configuration for the conversation API layer.
"""

# Max characters accepted in a single user message.
# Keeps one paste from blowing the model context window.
BOT_MESSAGE_MAX_LENGTH = 8_000

# Max messages returned by GET /api/conversations/<id> (0 = all)
BOT_CONVERSATION_MESSAGES_LIMIT = 0

# Characters of the knowledge blob returned by GET /api/knowledge
KNOWLEDGE_PREVIEW_LENGTH = 1_000
