"""
Application Custom Exceptions

Purpose:
    - Standardize error handling across the engine
    - Prevent leaking internal errors to channel users
    - Maintain consistent API error format
"""





class AppException(Exception):
    """
    Base application exception.
    """

    def __init__(
        self,
        error_code: str,
        message: str,
        status_code: int = 400,
        details: str = None
    ):
        """
        Args:
            error_code (str): Unique business error identifier
            message (str): User-friendly error message
            status_code (int): HTTP status code (default: 400)
            details (str): Optional internal/debug details, logged only
        """

        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details

        super().__init__(message)



    def to_dict(self) -> dict:
        """
        Convert exception to standardized API response format.
        Details stay in the logs.
        """

        return {
            "status": "error",
            "error_code": self.error_code,
            "message": self.message
        }





# --------------------------------------------
# Specific Exception Types
# --------------------------------------------

class ValidationException(AppException):
    """
    Raised when validation fails.
    """

    def __init__(self, message: str, details: str = None, error_code: str = "VALIDATION_ERROR"):
        super().__init__(
            error_code = error_code,
            message = message,
            status_code = 400,
            details = details
        )





class NotFoundException(AppException):
    """
    Raised when resource is not found.
    """

    def __init__(self, message: str = "Resource not found", error_code: str = "NOT_FOUND"):
        super().__init__(
            error_code = error_code,
            message = message,
            status_code = 404
        )





class ConflictException(AppException):
    """
    Raised when the resource is not in a state that allows the operation.
    """

    def __init__(self, error_code: str, message: str):
        super().__init__(
            error_code = error_code,
            message = message,
            status_code = 409
        )





class IngestionException(AppException):
    """
    Raised when a single document cannot be normalized.
    Always recovered inside the knowledge pipeline.
    """

    def __init__(self, filename: str, details: str = None):
        self.filename = filename
        super().__init__(
            error_code = "INGESTION_FAILED",
            message = f"Could not read document '{filename}'.",
            status_code = 422,
            details = details
        )





class UpstreamException(AppException):
    """
    Raised when the completion service or messaging platform fails.
    """

    def __init__(self, error_code: str, message: str, details: str = None, status_code: int = 502):
        super().__init__(
            error_code = error_code,
            message = message,
            status_code = status_code,
            details = details
        )





class PayloadTooLargeException(AppException):
    """
    Raised when a request body is over the upload limit.
    """

    def __init__(self, message: str, details: str = None):
        super().__init__(
            error_code = "DOCUMENT_TOO_LARGE",
            message = message,
            status_code = 413,
            details = details
        )





class ConfigurationException(AppException):
    """
    Raised when a credential is missing or malformed.
    Never fatal: the engine falls back to demo mode.
    """

    def __init__(self, message: str, details: str = None):
        super().__init__(
            error_code = "CONFIGURATION_ERROR",
            message = message,
            status_code = 500,
            details = details
        )





class InternalServerException(AppException):
    """
    Raised for unexpected system errors.
    """

    def __init__(self, details: str = None):
        super().__init__(
            error_code = "INTERNAL_SERVER_ERROR",
            message = "Something went wrong. Please try again later.",
            status_code = 500,
            details  = details
        )
