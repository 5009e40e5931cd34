"""
vendors/factory.py — Completion Gateway Factory
================================================
Single place that decides whether replies come from Anthropic or from the
demo gateway.

How the choice is made
-----------------------
The ANTHROPIC_API_KEY credential is checked once, when the gateway is built
at start-up:

    non-empty, starts with "sk-ant-", no whitespace  → Anthropic (configured)
    anything else                                     → demo mode (unconfigured)

A missing or malformed key is not fatal. It is logged as a configuration
error and the engine keeps serving clearly-labelled demo replies. Fixing the
key takes effect on the next restart.
"""

# Python Packages
import logging
from typing import Optional

# Gateways
from .completion_gateway import CompletionGateway, ConfiguredCompletionGateway
from .demo import DemoCompletionGateway

# Exceptions
from ..util.exceptions import ConfigurationException

# Config
from ..bot.config import prompts

# Constants
from ..base import constants


logger = logging.getLogger(__name__)





def is_valid_api_key(api_key: Optional[str]) -> bool:
    """Non-empty, provider prefix, no embedded whitespace."""

    if not api_key or not isinstance(api_key, str):
        return False

    api_key = api_key.strip()
    return (
        api_key.startswith(constants.ANTHROPIC_KEY_PREFIX)
        and len(api_key) > len(constants.ANTHROPIC_KEY_PREFIX)
        and not any(ch.isspace() for ch in api_key)
    )


def get_completion_gateway(
    api_key: Optional[str] = None,
    completion_service = None
) -> CompletionGateway:
    """
    Return the gateway variant matching the configured credential.

    Args:
        api_key:            Credential to check. Defaults to ANTHROPIC_API_KEY.
        completion_service: Optional service override (tests); must expose
                            generate(system_instruction, user_prompt).

    Returns:
        ConfiguredCompletionGateway or DemoCompletionGateway.
    """

    api_key = constants.ANTHROPIC_API_KEY if api_key is None else api_key

    if not is_valid_api_key(api_key):
        error = ConfigurationException(
            message = "ANTHROPIC_API_KEY is missing or malformed.",
            details = f"expected a key starting with '{constants.ANTHROPIC_KEY_PREFIX}'"
        )
        logger.warning(f"⚠️ {error.message} Running in demo mode ({error.details}).")
        return DemoCompletionGateway()

    if completion_service is None:
        from .anthropic import AnthropicCompletionService
        completion_service = AnthropicCompletionService()

    logger.info(f"🤖 LLM Provider: Anthropic ({constants.ANTHROPIC_MODEL})")
    return ConfiguredCompletionGateway(
        completion_service = completion_service,
        system_instruction = prompts.SYSTEM_INSTRUCTION
    )
