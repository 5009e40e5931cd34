"""
Telegram settings validation.
"""

# Exceptions
from ...util.exceptions import ValidationException

# Messages
from ...util import messages





class TelegramValidation:

    @staticmethod
    def validate_settings(data) -> dict:
        """
        Accepts any subset of {"enabled", "bot_token"}.

        Returns:
            dict: only the fields present in the request
        """

        if not isinstance(data, dict) or not data:
            raise ValidationException(
                message = messages.ERROR["INVALID_REQUEST"],
                error_code = "INVALID_REQUEST"
            )

        changes = {}

        if "enabled" in data:
            if not isinstance(data["enabled"], bool):
                raise ValidationException(
                    message = messages.ERROR["TELEGRAM_ENABLED_INVALID"],
                    error_code = "INVALID_TELEGRAM_SETTINGS"
                )
            changes["enabled"] = data["enabled"]

        if "bot_token" in data:
            if not isinstance(data["bot_token"], str):
                raise ValidationException(
                    message = messages.ERROR["TELEGRAM_TOKEN_INVALID"],
                    error_code = "INVALID_TELEGRAM_SETTINGS"
                )
            changes["bot_token"] = data["bot_token"].strip()

        return changes
