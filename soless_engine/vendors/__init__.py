"""
vendors/__init__.py
====================
Public surface of the vendors package.

Bot services only ever see a CompletionGateway:

    from ...vendors import get_completion_gateway
    gateway = get_completion_gateway()
    reply   = gateway.complete(prompt)

Storage backends live in vendors/local.
"""

from .completion_gateway import (
    CompletionGateway,
    ConfiguredCompletionGateway,
    MODE_CONFIGURED,
    MODE_UNCONFIGURED,
)
from .demo import DemoCompletionGateway
from .factory import get_completion_gateway, is_valid_api_key
