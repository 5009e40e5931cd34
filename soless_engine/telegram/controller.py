"""
Telegram Controller
"""

# Config
from ..config.container import AppContainer

# App Messages
from ..util import messages





class TelegramController:

    def __init__(self, container: AppContainer):
        self.settings = container.telegram_settings


    def get_settings(self) -> dict:
        return {"settings": self.settings.public_view()}


    def update_settings(self, data: dict) -> dict:
        self.settings.update(data)

        return {
            "settings": self.settings.public_view(),
            "message": messages.SUCCESS["TELEGRAM_UPDATE_SUCCESS"]
        }
