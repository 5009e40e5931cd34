"""
Persona Handler
API endpoints for the bot persona.
"""

# Python Packages
from flask import request
from flask_restx import Namespace, Resource, fields

# Controller
from .controller import PersonaController

# Container
from ..config.container import get_container

# Responses
from ..util.responses import success, error_response

# Namespace
persona_namespace = Namespace("persona", description = "Bot persona settings")


persona_model = persona_namespace.model("Persona", {
    "name":       fields.String(required = True, example = "SOLess Guide"),
    "style":      fields.String(required = True, example = "Helpful and approachable"),
    "background": fields.String(required = True, example = "Technical expert on SOLess"),
})





# ── GET / PUT /api/persona ────────────────────────────────────────────────────
@persona_namespace.route("")
class Persona(Resource):

    def get(self):
        """ Current persona... """

        try:
            return success(PersonaController(get_container()).get_persona())

        except Exception as error:
            return error_response(error)


    @persona_namespace.expect(persona_model)
    def put(self):
        """
        Replace the persona. All three fields are required; a partial
        update is rejected and leaves the current persona untouched.
        """

        try:
            data = request.get_json(silent = True)
            result = PersonaController(get_container()).replace_persona(data)
            return success(result)

        except Exception as error:
            return error_response(error)
