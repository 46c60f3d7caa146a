"""
Domain errors raised by services and converted to the JSON error envelope
by the exception handlers registered in main.py.
"""

from typing import Any, Dict, Optional


class ChefConnectError(Exception):
    status_code: int = 500
    default_message: str = "Unexpected error"

    def __init__(self, message: Optional[str] = None, details: Optional[str] = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.message}
        if self.details:
            body["details"] = self.details
        return body


class ValidationError(ChefConnectError):
    status_code = 400
    default_message = "Invalid request"


class UnavailableError(ChefConnectError):
    status_code = 400
    default_message = "Chef is not available"


class InvalidCredential(ChefConnectError):
    status_code = 401
    default_message = "Unauthorized - Invalid token"


class ForbiddenError(ChefConnectError):
    status_code = 403
    default_message = "Forbidden"


class NotFoundError(ChefConnectError):
    status_code = 404
    default_message = "Not found"


class UnexpectedError(ChefConnectError):
    status_code = 500
    default_message = "Unexpected error"
