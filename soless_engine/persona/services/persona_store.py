"""
Service: PersonaStore

Holds the active persona for the process lifetime.

  - Loaded from the "persona" record at start-up (defaults on first run)
  - replace() is all-or-nothing: validated first, then swapped under a lock
  - Each accepted replacement is written back to the record store
"""

# Python Packages
import logging
import threading

# Models
from ...models.persona import Persona, DEFAULT_PERSONA

# Validations
from ..validations.persona_validation import PersonaValidation


logger = logging.getLogger(__name__)

PERSONA_RECORD = "persona"


class PersonaStore:
    """
    Process-wide persona state with get/replace.
    record_store may be None for a purely in-memory store.
    """

    def __init__(self, record_store = None, defaults: Persona = DEFAULT_PERSONA):
        self.record_store = record_store
        self._lock        = threading.Lock()
        self._persona     = self._load(defaults)


    def get(self) -> Persona:
        with self._lock:
            return self._persona


    def replace(self, data: dict) -> Persona:
        """
        Swap in a new persona.

        Raises:
            ValidationException: any field missing or blank; nothing changes.
        """

        persona = Persona(**PersonaValidation.validate(data))

        with self._lock:
            if self.record_store is not None:
                self.record_store.save(PERSONA_RECORD, persona.to_dict())
            self._persona = persona

        logger.info(f"🎭 Persona replaced: {persona.name}")
        return persona



    # ── Private ────────────────────────────────────────────────────────────────
    def _load(self, defaults: Persona) -> Persona:
        if self.record_store is None:
            return defaults

        record = self.record_store.load(PERSONA_RECORD, defaults.to_dict())

        try:
            return Persona(**PersonaValidation.validate(record))
        except Exception as error:
            logger.warning(f"⚠️ Stored persona invalid, using defaults: {error}")
            self.record_store.save(PERSONA_RECORD, defaults.to_dict())
            return defaults
