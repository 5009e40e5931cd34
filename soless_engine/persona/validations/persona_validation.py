"""
Persona Validation
"""

# Models
from ...models.persona import PERSONA_FIELDS

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException





class PersonaValidation:

    @staticmethod
    def validate(data) -> dict:
        """
        Validate a full persona replacement.

        Returns:
            dict: the three persona fields
        """

        if not isinstance(data, dict) or not data:
            raise ValidationException(
                message = messages.ERROR["INVALID_REQUEST"],
                error_code = "INVALID_REQUEST"
            )

        cleaned = {}

        for field in PERSONA_FIELDS:
            value = data.get(field)

            if not isinstance(value, str) or not value.strip():
                raise ValidationException(
                    message = messages.ERROR["PERSONA_FIELD_REQUIRED"].format(field),
                    error_code = "INVALID_PERSONA"
                )

            cleaned[field] = value

        return cleaned
