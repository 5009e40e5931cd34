"""
Standard API response helpers shared by every handler.

    {"status": "success", "data": ...}
    {"status": "error", "error_code": ..., "message": ...}
"""

# Python Packages
import logging

from werkzeug.exceptions import RequestEntityTooLarge

# Exceptions
from .exceptions import AppException, InternalServerException, PayloadTooLargeException

# Messages
from . import messages

# Constants
from ..base import constants


logger = logging.getLogger(__name__)





def success(data, status_code: int = 200):
    return {"status": "success", "data": data}, status_code


def too_large_error(details: str = None) -> PayloadTooLargeException:
    """The 413 error for bodies over MAX_UPLOAD_BYTES (reported in MB)."""

    return PayloadTooLargeException(
        message = messages.ERROR["DOCUMENT_TOO_LARGE"].format(constants.MAX_UPLOAD_BYTES // (1024 * 1024)),
        details = details
    )


def error_response(error: Exception):
    """
    Log the full error and return its public form.
    Anything that is not an AppException becomes a generic 500.
    """

    # werkzeug raises this while parsing request.files inside the handler
    if isinstance(error, RequestEntityTooLarge):
        error = too_large_error(details = str(error))

    if not isinstance(error, AppException):
        logger.exception(f"Unhandled error: {error}")
        error = InternalServerException(details = str(error))

    elif error.status_code >= 500:
        logger.error(f"{error.error_code}: {error.message} | {error.details}")

    else:
        logger.info(f"{error.error_code}: {error.message}")

    return error.to_dict(), error.status_code
