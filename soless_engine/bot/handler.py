"""
Bot Handler
API endpoints for conversations (web channel).
"""

# Python Packages
from flask import request
from flask_restx import Namespace, Resource, fields

# Validations
from .validations.bot_validation import BotValidation

# Controller
from .controller import BotController

# Container
from ..config.container import get_container

# Responses
from ..util.responses import success, error_response

# Config
from .config import bot_config

# Namespace
bot_namespace = Namespace("conversations", description = "Conversation operations")


message_model = bot_namespace.model("Message", {
    "message": fields.String(required = True, description = "User message", example = "What is SOLess?")
})





# ── POST /api/conversations ───────────────────────────────────────────────────
@bot_namespace.route("")
class Conversations(Resource):
    """ Start a conversation... """

    def post(self):
        """
        Create a new conversation. The client keeps the returned id.

        Response (201):
        {
            "status": "success",
            "data": {"conversation_id": "0b7f..."}
        }
        """

        try:
            result = BotController(get_container()).create_conversation()
            return success(result, 201)

        except Exception as error:
            return error_response(error)



# ── GET /api/conversations/<conversation_id> ──────────────────────────────────
@bot_namespace.route("/<string:conversation_id>")
class ConversationHistory(Resource):
    """Get a conversation with its history."""

    def get(self, conversation_id):
        """
        Conversation history, oldest first.

        Query:
            limit: only the last N messages (default: all)
        """

        try:
            limit  = request.args.get("limit", bot_config.BOT_CONVERSATION_MESSAGES_LIMIT, type = int)
            result = BotController(get_container()).get_conversation(conversation_id, limit = limit)
            return success(result)

        except Exception as error:
            return error_response(error)



# ── POST /api/conversations/<conversation_id>/messages ────────────────────────
@bot_namespace.route("/<string:conversation_id>/messages")
class ConversationMessages(Resource):
    """Send a message and get the assistant reply."""

    @bot_namespace.expect(message_model)
    def post(self, conversation_id):
        """
        Send a user message.

        Request:
        {
            "message": "What is SOLess?"
        }

        Response:
        {
            "status": "success",
            "data": {"message": "...", "mode": "configured"}
        }

        Errors: 400 missing message, 404 unknown conversation,
        502/504 completion failure (the turn can be retried).
        """

        try:
            data = request.get_json(silent = True)
            BotValidation.validate_body(data)

            message = data.get("message")
            BotValidation.validate_message(message)

            result = BotController(get_container()).send_message(conversation_id, message)
            return success(result)

        except Exception as error:
            return error_response(error)



# ── POST /api/conversations/<conversation_id>/retry ───────────────────────────
@bot_namespace.route("/<string:conversation_id>/retry")
class ConversationRetry(Resource):
    """Retry the reply for a conversation left awaiting one."""

    def post(self, conversation_id):
        """
        Regenerate the missing assistant reply after a failed turn.
        409 when the conversation is not awaiting a reply.
        """

        try:
            result = BotController(get_container()).retry(conversation_id)
            return success(result)

        except Exception as error:
            return error_response(error)
