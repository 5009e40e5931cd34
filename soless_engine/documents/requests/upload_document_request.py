"""
Upload Document Request Definition
Handles:
    - document (multipart file upload)
"""

# Python Packages
from flask import request as flask_request





class UploadDocumentRequest:

    @staticmethod
    def apply(namespace):
        """
        Apply swagger decorators to endpoint
        """

        def decorator(func):
            func = namespace.doc(consumes = ['multipart/form-data'])(func)
            func = namespace.param(
                'document',
                'PDF, Markdown or TXT file',
                type = 'file',
                _in = 'formData',
                required = True
            )(func)

            return func

        return decorator


    @staticmethod
    def get_data():
        """
        Extract request data
        """

        return {
            "file": flask_request.files.get("document")
        }
