"""
vendors/demo/demo_gateway.py
=============================
Completion gateway used when no valid Anthropic credential is configured.

Never calls the network. The reply is picked from a fixed set by hashing
the prompt, so one prompt always maps to the same placeholder.
"""

# Python Packages
import hashlib

# Gateway base
from ..completion_gateway import CompletionGateway, MODE_UNCONFIGURED


DEMO_MODE_MARKER = "[DEMO MODE]"

DEMO_REPLIES = (
    "I'd love to tell you all about SOLess, but my brain (the completion API) isn't plugged in yet.",
    "This is a placeholder answer. Add a valid ANTHROPIC_API_KEY and restart to get real replies.",
    "Running without a model right now, so consider this reply about as reliable as a meme coin roadmap.",
    "No model credential found. I'm just echoing canned text until an operator configures one.",
)





class DemoCompletionGateway(CompletionGateway):
    """Deterministic placeholder replies, clearly labelled as demo output."""

    mode = MODE_UNCONFIGURED

    def complete(self, prompt: str) -> str:
        digest = hashlib.sha256(prompt.encode("utf-8")).digest()
        reply  = DEMO_REPLIES[int.from_bytes(digest[:4], "big") % len(DEMO_REPLIES)]
        return f"{DEMO_MODE_MARKER} {reply}"
