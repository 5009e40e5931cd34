"""
Persona Controller
"""

# Config
from ..config.container import AppContainer

# App Messages
from ..util import messages





class PersonaController:

    def __init__(self, container: AppContainer):
        self.persona_store = container.persona_store


    def get_persona(self) -> dict:
        return {"persona": self.persona_store.get().to_dict()}


    def replace_persona(self, data: dict) -> dict:
        """
        Replace name, style and background together.
        """

        persona = self.persona_store.replace(data)

        return {
            "persona": persona.to_dict(),
            "message": messages.SUCCESS["PERSONA_UPDATE_SUCCESS"]
        }
