"""
Custom exceptions for the community site.

Services raise these, controllers turn them into responses.
"""


class APIException(Exception):
    """Base exception for API errors."""

    status_code: int = 500
    code: str = "INTERNAL_ERROR"
    message: str = "Internal server error!"

    def __init__(
        self,
        message: str | None = None,
        code: str | None = None,
        details: dict | None = None,
    ):
        self.message = message or self.__class__.message
        self.code = code or self.__class__.code
        self.details = details
        super().__init__(self.message)


# Authorization Exceptions
class PermissionDeniedError(APIException):
    """User doesn't have required permissions."""

    status_code = 403
    code = "PERMISSION_DENIED"
    message = "You do not have permission."


class NotOwnerError(PermissionDeniedError):
    """User is neither the owner of the resource nor an administrator."""

    code = "NOT_OWNER"
    message = "You do not have permission."


# Resource Exceptions
class NotFoundError(APIException):
    """Resource not found."""

    status_code = 404
    code = "NOT_FOUND"
    message = "Resource not found."


class AlreadyExistsError(APIException):
    """Resource already exists."""

    status_code = 409
    code = "ALREADY_EXISTS"
    message = "This resource already exists."


# Validation Exceptions
class ValidationError(APIException):
    """Invalid input data."""

    status_code = 400
    code = "VALIDATION_ERROR"
    message = "Invalid data."


class BadRequestError(APIException):
    """Bad request."""

    status_code = 400
    code = "BAD_REQUEST"
    message = "Invalid request."


class UnknownObjectTypeError(BadRequestError, KeyError):
    """No handler is registered for the object type tag."""

    code = "UNKNOWN_OBJECT_TYPE"
    message = "Unknown object type."
