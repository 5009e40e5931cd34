"""
Models Package
Plain dataclasses for the engine's in-process state.
"""

from .conversation import Conversation, Message, ROLE_USER, ROLE_ASSISTANT, ROLES
from .persona import Persona, DEFAULT_PERSONA, PERSONA_FIELDS
from .document import DocumentFormat, DocumentSnapshot, UPLOAD_EXTENSIONS

__all__ = [
    "Conversation",
    "Message",
    "ROLE_USER",
    "ROLE_ASSISTANT",
    "ROLES",
    "Persona",
    "DEFAULT_PERSONA",
    "PERSONA_FIELDS",
    "DocumentFormat",
    "DocumentSnapshot",
    "UPLOAD_EXTENSIONS",
]
