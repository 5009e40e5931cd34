"""
Telegram Handler
Admin endpoints for the Telegram bridge settings.
"""

# Python Packages
from flask import request
from flask_restx import Namespace, Resource, fields

# Controller
from .controller import TelegramController

# Container
from ..config.container import get_container

# Responses
from ..util.responses import success, error_response

# Namespace
telegram_namespace = Namespace("telegram", description = "Telegram bridge settings")


settings_model = telegram_namespace.model("TelegramSettings", {
    "enabled":   fields.Boolean(description = "Start the bridge on next launch"),
    "bot_token": fields.String(description = "BotFather token (TELEGRAM_BOT_TOKEN wins if set)"),
})





# ── GET / PUT /api/telegram/settings ──────────────────────────────────────────
@telegram_namespace.route("/settings")
class TelegramSettings(Resource):

    def get(self):
        """ Current settings, token masked... """

        try:
            return success(TelegramController(get_container()).get_settings())

        except Exception as error:
            return error_response(error)


    @telegram_namespace.expect(settings_model)
    def put(self):
        """
        Update the enabled flag and/or stored token. Applied on restart.
        """

        try:
            data = request.get_json(silent = True)
            return success(TelegramController(get_container()).update_settings(data))

        except Exception as error:
            return error_response(error)
