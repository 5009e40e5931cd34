""" Anthropic Vendor Package """

from .anthropic_client import AnthropicClient
from .completion_service import AnthropicCompletionService

__all__ = ['AnthropicClient', 'AnthropicCompletionService']
