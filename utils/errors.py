"""
Application exceptions. Each one maps to the HTTP status it is reported with.
"""


class AppError(Exception):
    """Base exception for the application."""
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self):
        return {"error": self.message}


class ValidationError(AppError):
    """Raised when request input is missing or breaks a field constraint."""
    status_code = 400
    default_message = "Invalid request data"


class Unauthenticated(AppError):
    """Raised when a request carries no credential or an invalid one."""
    status_code = 401
    default_message = "Unauthorized"


class NotFound(AppError):
    """Raised when a resource is absent or owned by another account."""
    status_code = 404
    default_message = "Not found"


class Conflict(AppError):
    """Raised when a unique field collides with an existing record."""
    status_code = 409
    default_message = "Resource already exists"


class Internal(AppError):
    """Raised for unexpected store or infrastructure failures."""
    status_code = 500
