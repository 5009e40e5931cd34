"""
vendors/anthropic/completion_service.py
========================================
Completion service backed by Anthropic Claude models.

Anthropic separates the system prompt from the messages array, so the
service takes the system instruction and the user prompt as two arguments
and sends a single user turn.
"""

# Python Packages
import logging
import anthropic

# Client
from .anthropic_client import AnthropicClient

# Exceptions & messages
from ...util.exceptions import UpstreamException
from ...util import messages

# Constants
from ...base import constants


logger = logging.getLogger(__name__)





class AnthropicCompletionService:
    """
    Thin wrapper over messages.create().
    Every SDK failure leaves as one UpstreamException.
    """

    def __init__(self, client: anthropic.Anthropic = None, model: str = None, max_tokens: int = None):
        self.client     = client or AnthropicClient.get_client()
        self.model      = model or constants.ANTHROPIC_MODEL
        self.max_tokens = max_tokens or constants.ANTHROPIC_MAX_TOKENS


    def generate(self, system_instruction: str, user_prompt: str) -> str:
        """
        Generate a reply with the Anthropic Messages API.

        Args:
            system_instruction: Top-level system prompt.
            user_prompt:        The fully built prompt, sent as the only user turn.

        Returns:
            Text of the first content block.

        Raises:
            UpstreamException: network, timeout, auth, quota or malformed response.
        """

        try:
            response = self.client.messages.create(
                model      = self.model,
                max_tokens = self.max_tokens,
                system     = system_instruction,
                messages   = [{"role": "user", "content": user_prompt}],
            )
            return response.content[0].text

        except anthropic.APITimeoutError as error:
            logger.error(f"❌ Anthropic request timed out: {error}")
            raise UpstreamException(
                error_code  = "COMPLETION_TIMEOUT",
                message     = messages.ERROR["COMPLETION_TIMEOUT"],
                details     = str(error),
                status_code = 504
            )

        except Exception as error:
            logger.error(f"❌ Anthropic error generating response: {error}")
            raise UpstreamException(
                error_code = "COMPLETION_FAILED",
                message    = messages.ERROR["COMPLETION_FAILED"],
                details    = str(error)
            )
