"""
Document Controller

Handles:
    - Orchestration between handler and service layer
"""

# Python Packages
import os

# Services
from .services.document_service import DocumentService

# Config
from ..config.container import AppContainer
from ..bot.config import bot_config





class DocumentController:

    def __init__(self, container: AppContainer):
        """ Initialize controller with service instances... """

        self.container = container
        self.document_service = DocumentService(container.document_store)


    def upload_document(self, file, content: bytes) -> dict:
        """
        Store an uploaded document

        Args:
            file (FileStorage): the upload (for its filename)
            content (bytes): validated file content

        Returns:
            dict: API response
        """

        filename = os.path.basename((file.filename or "").replace("\\", "/"))
        return self.document_service.upload(filename, content)



    def list_documents(self) -> dict:
        return self.document_service.list_documents()



    def delete_document(self, filename: str) -> dict:
        return self.document_service.delete(filename)



    def knowledge_summary(self) -> dict:
        """
        What the assistant currently knows: document count, blob length,
        fingerprint and a preview.
        """

        background = self.container.persona_store.get().background
        stats = self.container.knowledge_assembler.stats(background)

        knowledge = stats.pop("knowledge")
        stats["preview"] = knowledge[:bot_config.KNOWLEDGE_PREVIEW_LENGTH]

        return stats
