"""
Bot validation for all conversation endpoints.
"""

# Exceptions
from ...util.exceptions import ValidationException

# Messages
from ...util import messages

# Config
from ..config import bot_config





class BotValidation:

    @staticmethod
    def validate_body(data):
        if not data or not isinstance(data, dict):
            raise ValidationException(
                error_code = "INVALID_REQUEST",
                message = messages.ERROR["INVALID_REQUEST"]
            )


    @staticmethod
    def validate_message(message):
        if message is None or message == "":
            raise ValidationException(
                error_code = "MISSING_MESSAGE",
                message = messages.ERROR["MISSING_MESSAGE"]
            )

        if not isinstance(message, str) or len(message.strip()) == 0:
            raise ValidationException(
                error_code = "INVALID_MESSAGE",
                message = messages.ERROR["INVALID_MESSAGE"]
            )

        if len(message) > bot_config.BOT_MESSAGE_MAX_LENGTH:
            raise ValidationException(
                error_code = "MESSAGE_TOO_LONG",
                message = f"Message must not exceed {bot_config.BOT_MESSAGE_MAX_LENGTH} characters."
            )
