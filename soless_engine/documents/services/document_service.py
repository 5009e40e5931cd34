"""
Document Service

Handles:
    - Upload (save) a knowledge document
    - List stored documents
    - Delete a document
"""

# Models
from ...models.document import DocumentFormat

# App Messages
from ...util import messages





class DocumentService:

    def __init__(self, document_store):
        self.document_store = document_store


    def upload(self, filename: str, content: bytes) -> dict:
        """
        Store a document, replacing one with the same name.

        Returns:
            dict
        """

        stored_name = self.document_store.save(filename, content)

        return {
            "message": messages.SUCCESS["DOCUMENT_UPLOAD_SUCCESS"],
            "filename": stored_name,
            "size": len(content)
        }



    def list_documents(self) -> dict:
        """
        Stored documents in a supported format, sorted by name. Same
        filter the knowledge assembler applies.
        """

        documents = sorted(
            filename
            for filename in self.document_store.list()
            if DocumentFormat.from_filename(filename) is not None
        )

        return {
            "total": len(documents),
            "documents": documents
        }



    def delete(self, filename: str) -> dict:
        """
        Raises:
            NotFoundException: no such document
        """

        self.document_store.delete(filename)

        return {
            "filename": filename,
            "message": messages.SUCCESS["DOCUMENT_DELETE_SUCCESS"]
        }
