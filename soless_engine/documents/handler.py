"""
File: Document Routes

Handles:
    - Upload Document
    - List Documents
    - Delete Document
    - Knowledge summary
"""

# Flask Packages
from flask_restx import Namespace, Resource

# Request
from .requests.upload_document_request import UploadDocumentRequest

# Validations
from .validations.upload_document_validation import UploadDocumentValidation

# Controller
from .controller import DocumentController

# Container
from ..config.container import get_container

# Responses
from ..util.responses import success, error_response

# Namespaces
document_namespace = Namespace('documents', description = 'Knowledge Document APIs')
knowledge_namespace = Namespace('knowledge', description = 'Assembled knowledge base')





@document_namespace.route('')
class DocumentList(Resource):

    def get(self):
        """
        List uploaded documents
        """

        try:
            result = DocumentController(get_container()).list_documents()
            return success(result)

        except Exception as error:
            return error_response(error)



@document_namespace.route('/upload')
class UploadDocument(Resource):

    @UploadDocumentRequest.apply(document_namespace)
    def post(self):
        """
        Upload a PDF, Markdown or TXT document (max 10 MB)
        """

        try:
            # Args
            args = UploadDocumentRequest.get_data()

            # Validations
            content = UploadDocumentValidation().validate(args)

            # Controller
            result = DocumentController(get_container()).upload_document(args["file"], content)

            return success(result, 201)

        except Exception as error:
            return error_response(error)



@document_namespace.route('/<path:filename>')
class DeleteDocument(Resource):

    def delete(self, filename):
        """
        Delete a document by filename
        """

        try:
            result = DocumentController(get_container()).delete_document(filename)
            return success(result)

        except Exception as error:
            return error_response(error)



@knowledge_namespace.route('')
class KnowledgeSummary(Resource):

    def get(self):
        """
        Summary of the knowledge blob the assistant answers from
        """

        try:
            result = DocumentController(get_container()).knowledge_summary()
            return success(result)

        except Exception as error:
            return error_response(error)
