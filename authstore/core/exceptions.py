"""Adapter exceptions."""


class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, status_code: int = 500):
        """Initialize exception with message and status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class BadRequestException(AppException):
    """Bad request exception."""

    def __init__(self, message: str = "Bad request"):
        """Initialize with 400 status code."""
        super().__init__(message, status_code=400)


class NotFoundException(AppException):
    """Resource not found exception."""

    def __init__(self, message: str = "Resource not found"):
        """Initialize with 404 status code."""
        super().__init__(message, status_code=404)


class MissingUserIdException(BadRequestException):
    """Raised when a user update carries no user id."""

    def __init__(self, message: str = "No user id."):
        super().__init__(message)


class VerificationTokenException(NotFoundException):
    """Raised when a verification token cannot be looked up or consumed."""

    def __init__(self, message: str = "No verification token found."):
        super().__init__(message)
