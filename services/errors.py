# services/errors.py
from http import HTTPStatus


class ServiceError(Exception):
    """Base class for errors raised by the service layer."""
    status_code = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    """A required field is missing or malformed."""
    status_code = HTTPStatus.BAD_REQUEST


class NotFoundError(ServiceError):
    """A referenced id does not resolve."""
    status_code = HTTPStatus.NOT_FOUND


class ForbiddenError(ServiceError):
    """The requester is not the authorized actor for the operation."""
    status_code = HTTPStatus.FORBIDDEN


class TransientError(ServiceError):
    """The database or network is temporarily unavailable."""
    status_code = HTTPStatus.SERVICE_UNAVAILABLE
