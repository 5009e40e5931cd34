"""
Bot Controller
Orchestrates between handler and service layer.
"""

# Config
from ..config.container import AppContainer
from .config import bot_config





class BotController:

    def __init__(self, container: AppContainer):
        """ Pick the services this controller needs... """

        self.conversation_store = container.conversation_store
        self.turn_service       = container.turn_service



    def create_conversation(self) -> dict:
        """
        Start a new conversation.

        Returns:
            Dict with the new conversation_id.
        """

        return {"conversation_id": self.conversation_store.create()}



    def get_conversation(self, conversation_id: str, limit: int = bot_config.BOT_CONVERSATION_MESSAGES_LIMIT) -> dict:
        """
        Retrieve a conversation and its messages, oldest first.

        Args:
            conversation_id: The conversation identifier.
            limit: Return only the last *limit* messages (0 = all).

        Returns:
            Dict containing id, messages, total and awaiting_reply.
        """

        conversation = self.conversation_store.get(conversation_id)
        data = conversation.to_dict()

        data["total"] = len(conversation.messages)
        data["awaiting_reply"] = conversation.awaiting_reply
        if limit and limit > 0:
            data["messages"] = data["messages"][-limit:]

        return {"conversation": data}



    def send_message(self, conversation_id: str, message: str) -> dict:
        """
        Run one turn and return the assistant reply.

        Returns:
            Dict with message (reply text) and mode (configured / unconfigured).
        """

        return self.turn_service.send_message(conversation_id, message)



    def retry(self, conversation_id: str) -> dict:
        """
        Finish a turn whose completion failed earlier.
        """

        return self.turn_service.retry(conversation_id)
