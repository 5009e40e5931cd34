"""
Service: PromptBuilder
=======================
Combines persona, knowledge blob, the new user message and prior history
into the single prompt string sent to the completion gateway.

Layout (see config/prompts.PROMPT_TEMPLATE):
  1. Identity line with persona name, then communication style
  2. Knowledge blob, verbatim
  3. Numbered BEHAVIOR_DIRECTIVES
  4. "H: <user message>"
  5. "Previous conversation:" + prior turns, oldest first,
     each "Human: ..." / "Assistant: ...", blank-line separated

Pure and total: same inputs, byte-identical output. Empty history and empty
knowledge are valid and just shorten the prompt.
"""

# Python Packages
from typing import Iterable, Union

# Models
from ...models.conversation import Message
from ...models.persona import Persona

# Config
from ..config import prompts


class PromptBuilder:
    """
    Stateless, so one instance can be shared across requests and threads.
    """

    def build(
        self,
        user_message: str,
        history: Iterable[Union[Message, dict]],
        persona: Persona,
        knowledge_blob: str
    ) -> str:
        return prompts.PROMPT_TEMPLATE.format(
            name       = persona.name,
            style      = persona.style,
            knowledge  = knowledge_blob,
            directives = self.format_directives(),
            message    = user_message,
            history    = self.format_history(history)
        )


    def format_directives(self) -> str:
        return "\n".join(
            f"{index}. {directive}"
            for index, directive in enumerate(prompts.BEHAVIOR_DIRECTIVES, 1)
        )


    def format_history(self, history: Iterable[Union[Message, dict]]) -> str:
        """
        Render prior turns. Accepts Message objects or {"role", "content"} dicts.
        Any role other than "user" is labelled as the assistant.
        """
        lines = []
        for entry in history or ():
            role    = entry.get("role") if isinstance(entry, dict) else entry.role
            content = entry.get("content", "") if isinstance(entry, dict) else entry.content

            label = prompts.HISTORY_ROLE_LABELS["user" if role == "user" else "assistant"]
            lines.append(f"{label}: {content}")

        return prompts.HISTORY_SEPARATOR.join(lines)
