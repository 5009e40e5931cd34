"""
vendors/anthropic/anthropic_client.py
======================================
Process-wide Anthropic SDK client, built on first use.

The SDK's own retry loop is switched off (max_retries=0) and the request
timeout comes from COMPLETION_TIMEOUT_SECONDS, so one completion attempt
never outlives the configured deadline. Retrying is the channel's call.
"""

# Python Packages
import threading

from anthropic import Anthropic

# Exceptions
from ...util.exceptions import ConfigurationException

# Constants
from ...base import constants





class AnthropicClient:
    """
    Shared across all request threads and the Telegram worker threads.
    """

    _client = None
    _lock   = threading.Lock()

    @classmethod
    def get_client(cls) -> Anthropic:
        with cls._lock:
            if cls._client is None:
                cls._client = cls._build()
            return cls._client


    @staticmethod
    def _build() -> Anthropic:
        api_key = (constants.ANTHROPIC_API_KEY or "").strip()

        if not api_key:
            raise ConfigurationException(
                message = "ANTHROPIC_API_KEY is not set.",
                details = "cannot build the Anthropic client without a credential"
            )

        return Anthropic(
            api_key     = api_key,
            timeout     = constants.COMPLETION_TIMEOUT_SECONDS,
            max_retries = 0
        )
