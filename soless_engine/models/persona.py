"""
Model: Persona

The single name/style/background record the assistant presents as.
"""

# Python Packages
from dataclasses import dataclass, asdict


PERSONA_FIELDS = ("name", "style", "background")





@dataclass(frozen=True)
class Persona:
    """Bot persona. All three fields are mandatory."""

    name: str
    style: str
    background: str

    def to_dict(self) -> dict:
        return asdict(self)


DEFAULT_PERSONA = Persona(
    name       = "SOLess Guide",
    style      = "Helpful, knowledgeable about Solana and SOLess, technically accurate but approachable",
    background = "Technical expert on the SOLess project and Solana ecosystem"
)
