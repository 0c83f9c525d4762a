"""
Custom exception classes for the application.

Every exception carries an ``http_status`` so the HTTP layer can convert it
without a lookup table. Callers of the query layer can tell bad input
(``ValidationError``) apart from a failing backing store (``StoreError``).
"""


class AppException(Exception):
    """
    Base exception class for all application exceptions.

    Attributes:
        message: Human-readable error message.
        http_status: HTTP status code for REST API responses.
    """

    http_status: int = 500

    def __init__(self, message: str):
        """
        Initialize the exception with a message.

        Args:
            message: Human-readable error description.
        """
        self.message = message
        super().__init__(message)


class ValidationError(AppException):
    """
    Data validation failed.

    Raised when input data fails validation checks before processing.

    HTTP Status: 400 Bad Request
    """

    http_status = 400


class InvalidPageRequestError(ValidationError):
    """
    Page request is malformed.

    Raised for a negative offset, a non-positive limit or an unknown sort
    field. Always raised before any statement reaches the database.
    """


class DatabaseError(AppException):
    """
    Database operation failed.

    HTTP Status: 500 Internal Server Error
    """

    http_status = 500


class StoreError(DatabaseError):
    """
    A statement failed inside the backing store.

    Wraps the driver's ``SQLAlchemyError`` (available as ``__cause__``)
    without retrying it.
    """
