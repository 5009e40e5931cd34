""" Application service container... """

# Python Packages
from dataclasses import dataclass
from typing import Optional
import logging

from flask import current_app

# Constants
from ..base import constants

# Vendors
from ..vendors import CompletionGateway, get_completion_gateway
from ..vendors.local import LocalDocumentStore, JsonRecordStore

# Services
from ..bot.services.conversation_store import ConversationStore
from ..bot.services.prompt_builder import PromptBuilder
from ..bot.services.turn_service import TurnService
from ..knowledge.services.knowledge_assembler import KnowledgeAssembler, CachedKnowledgeAssembler
from ..persona.services.persona_store import PersonaStore
from ..telegram.services.telegram_settings_store import TelegramSettingsStore


logger = logging.getLogger(__name__)

EXTENSION_KEY = "soless"





@dataclass
class AppContainer:
    """
    Every piece of process-wide state, owned in one place and passed to the
    handlers and the Telegram bridge. Tests build their own.
    """

    document_store: LocalDocumentStore
    record_store: JsonRecordStore
    persona_store: PersonaStore
    conversation_store: ConversationStore
    knowledge_assembler: KnowledgeAssembler
    gateway: CompletionGateway
    telegram_settings: TelegramSettingsStore
    turn_service: Optional[TurnService] = None

    def __post_init__(self):
        if self.turn_service is None:
            self.turn_service = TurnService(
                conversation_store  = self.conversation_store,
                persona_store       = self.persona_store,
                knowledge_assembler = self.knowledge_assembler,
                gateway             = self.gateway,
                prompt_builder      = PromptBuilder()
            )


def build_container(
    docs_dir: str = None,
    data_dir: str = None,
    gateway: CompletionGateway = None,
    knowledge_cache: bool = None
) -> AppContainer:
    """
    Wire the default container from constants. Any argument overrides the
    matching setting.
    """

    document_store = LocalDocumentStore(docs_dir or constants.DOCS_DIR)
    record_store   = JsonRecordStore(data_dir or constants.DATA_DIR)

    if knowledge_cache is None:
        knowledge_cache = constants.KNOWLEDGE_CACHE_ENABLED
    assembler_class = CachedKnowledgeAssembler if knowledge_cache else KnowledgeAssembler

    container = AppContainer(
        document_store      = document_store,
        record_store        = record_store,
        persona_store       = PersonaStore(record_store),
        conversation_store  = ConversationStore(
            max_count   = constants.CONVERSATION_MAX_COUNT,
            ttl_seconds = constants.CONVERSATION_TTL_SECONDS
        ),
        knowledge_assembler = assembler_class(document_store),
        gateway             = gateway or get_completion_gateway(),
        telegram_settings   = TelegramSettingsStore(record_store)
    )

    logger.info(
        f"📚 Documents: {document_store.root_dir} | 💾 Data: {record_store.data_dir} | "
        f"🧠 Knowledge cache: {'on' if knowledge_cache else 'off'}"
    )
    return container


def get_container() -> AppContainer:
    """ Container of the running Flask app... """

    return current_app.extensions[EXTENSION_KEY]
