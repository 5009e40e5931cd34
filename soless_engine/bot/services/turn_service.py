"""
Service: TurnService
=====================
Runs one conversational turn end to end. Both channel adapters (web and
Telegram) go through here.

Pipeline
--------
  1. Take the conversation's turn lock (one in-flight turn per conversation)
  2. Snapshot prior history, append the user message
  3. Assemble knowledge with the current persona background
  4. Build the prompt
  5. Ask the completion gateway
  6. Append the assistant reply

If step 5 fails (timeout, network, auth, quota) the assistant message is not
appended. The conversation is left awaiting a reply and retry() can finish
the turn later without duplicating the user message.
"""

# Python Packages
import logging
import time

# Models
from ...models.conversation import ROLE_USER, ROLE_ASSISTANT

# Exceptions & messages
from ...util.exceptions import AppException, ConflictException, UpstreamException
from ...util import messages

# Services
from .prompt_builder import PromptBuilder


logger = logging.getLogger(__name__)


class TurnService:
    """
    Orchestrates stores, knowledge, prompt building and completion.
    Holds no state of its own; everything comes in through the constructor.
    """

    def __init__(self, conversation_store, persona_store, knowledge_assembler, gateway, prompt_builder=None):
        self.conversation_store  = conversation_store
        self.persona_store       = persona_store
        self.knowledge_assembler = knowledge_assembler
        self.gateway             = gateway
        self.prompt_builder      = prompt_builder or PromptBuilder()


    # ── Main Entry Point ───────────────────────────────────────────────────────
    def send_message(self, conversation_id: str, message: str) -> dict:
        """
        Append a user message and generate the assistant reply.

        Returns:
            {"message": reply, "mode": gateway mode}

        Raises:
            NotFoundException:  unknown conversation.
            UpstreamException:  completion failed; user message stays appended.
        """
        with self.conversation_store.lock_for(conversation_id):
            prior = self.conversation_store.get(conversation_id).messages
            self.conversation_store.append_message(conversation_id, ROLE_USER, message)

            return self._finish_turn(conversation_id, message, prior)


    def retry(self, conversation_id: str) -> dict:
        """
        Generate the missing reply for a conversation awaiting one.

        Raises:
            NotFoundException:  unknown conversation.
            ConflictException:  last message is not an unanswered user message.
        """
        with self.conversation_store.lock_for(conversation_id):
            conversation = self.conversation_store.get(conversation_id)

            if not conversation.awaiting_reply:
                raise ConflictException(
                    error_code = "NOTHING_TO_RETRY",
                    message    = messages.ERROR["NOTHING_TO_RETRY"]
                )

            pending = conversation.messages[-1]
            return self._finish_turn(conversation_id, pending.content, conversation.messages[:-1])


    # ── Private ────────────────────────────────────────────────────────────────
    def _finish_turn(self, conversation_id: str, message: str, prior: list) -> dict:
        started = time.monotonic()

        reply = self.generate_reply(message, prior)
        self.conversation_store.append_message(conversation_id, ROLE_ASSISTANT, reply)

        logger.info(
            f"💬 Turn completed for {conversation_id} "
            f"({self.gateway.mode}, {time.monotonic() - started:.2f}s)"
        )
        return {"message": reply, "mode": self.gateway.mode}


    def generate_reply(self, message: str, history: list) -> str:
        """Build the prompt from current persona/knowledge and complete it."""

        persona   = self.persona_store.get()
        knowledge = self.knowledge_assembler.get_knowledge_base(persona.background)
        prompt    = self.prompt_builder.build(message, history, persona, knowledge)

        try:
            return self.gateway.complete(prompt)

        except AppException:
            raise

        except Exception as error:
            logger.exception("❌ Completion gateway raised an unexpected error")
            raise UpstreamException(
                error_code = "COMPLETION_FAILED",
                message    = messages.ERROR["COMPLETION_FAILED"],
                details    = str(error)
            )
