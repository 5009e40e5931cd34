"""
bot_messages.py — Telegram Bot Texts
=====================================
Static texts sent by the Telegram bridge. Markdown (legacy Telegram
flavour) is used for these; model replies are sent as plain text.
"""

WELCOME_MESSAGE = """\
*Welcome to the SOLess Project Bot!*

I'm here to answer your questions about the SOLess project on Solana.

How can I help you today?\
"""

HELP_MESSAGE = """\
*SOLess Project Bot Help*

I can answer your questions about the SOLess project on Solana.

Commands:
/start - Start our conversation
/help - Show this help message
/about - Learn about the SOLess project

Just ask me anything about SOLess!\
"""

ABOUT_MESSAGE = """\
*About SOLess Project*

SOLess is a project on the Solana blockchain.

Ask me about its features, ecosystem and roadmap.\
"""

# Apologies (never expose error detail to the chat)
CONNECTION_APOLOGY = "Sorry, I'm having trouble connecting. Please try again later."
PROCESSING_APOLOGY = "Sorry, I couldn't process your message. Please try again later."
TIMEOUT_APOLOGY    = "Sorry, that took too long. Please try again."

# Telegram hard limit for one message
MAX_MESSAGE_LENGTH = 4096
