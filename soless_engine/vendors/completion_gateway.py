"""
vendors/completion_gateway.py
==============================
The seam between the bot pipeline and the completion service.

Two variants, chosen once by vendors/factory.py:
    configured    → ConfiguredCompletionGateway (real provider call)
    unconfigured  → DemoCompletionGateway (vendors/demo, no network)
"""

# Python Packages
from abc import ABC, abstractmethod
import logging


logger = logging.getLogger(__name__)


MODE_CONFIGURED   = "configured"
MODE_UNCONFIGURED = "unconfigured"





class CompletionGateway(ABC):
    """Turns a built prompt into an assistant reply."""

    mode: str = MODE_UNCONFIGURED

    @abstractmethod
    def complete(self, prompt: str) -> str:
        ...





class ConfiguredCompletionGateway(CompletionGateway):
    """
    Delegates to a completion service with a fixed system instruction.
    Errors from the service (UpstreamException) propagate unchanged.
    """

    mode = MODE_CONFIGURED

    def __init__(self, completion_service, system_instruction: str):
        self.completion_service = completion_service
        self.system_instruction = system_instruction


    def complete(self, prompt: str) -> str:
        logger.debug(f"🤖 Requesting completion ({len(prompt)} chars)")
        return self.completion_service.generate(self.system_instruction, prompt)
