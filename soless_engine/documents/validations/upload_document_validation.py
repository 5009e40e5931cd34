"""
Upload Document Validation
"""

# Python Packages
import os

# Models
from ...models.document import UPLOAD_EXTENSIONS

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException, PayloadTooLargeException

# Constants
from ...base import constants





class UploadDocumentValidation:

    def validate(self, args) -> bytes:
        """
        Validate the uploaded file.

        Returns:
            bytes: file content, read once here
        """

        file = args.get('file')

        # -----------------------------------------
        # 🔹 File Validation
        # -----------------------------------------

        if not file:
            raise ValidationException(
                message = messages.ERROR['DOCUMENT_FILE_REQUIRED'],
                error_code = "DOCUMENT_FILE_REQUIRED"
            )

        filename = os.path.basename((file.filename or "").replace("\\", "/"))

        if not filename or filename.startswith("."):
            raise ValidationException(
                message = messages.ERROR['DOCUMENT_INVALID_NAME'],
                error_code = "DOCUMENT_INVALID_NAME"
            )

        ext = os.path.splitext(filename)[1].lower()

        if ext not in UPLOAD_EXTENSIONS:
            raise ValidationException(
                message = messages.ERROR["UNSUPPORTED_FILE_FORMAT"].format(
                    file_extension = (ext.lstrip('.') or 'none').upper()
                ),
                error_code = "UNSUPPORTED_FILE_FORMAT"
            )

        # -----------------------------------------
        # 🔹 Size Validation
        # -----------------------------------------

        content = file.read(constants.MAX_UPLOAD_BYTES + 1)

        if len(content) > constants.MAX_UPLOAD_BYTES:
            raise PayloadTooLargeException(
                message = messages.ERROR["DOCUMENT_TOO_LARGE"].format(
                    constants.MAX_UPLOAD_BYTES // (1024 * 1024)
                )
            )

        return content
