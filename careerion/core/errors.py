"""
Error taxonomy.

Every user-visible failure is one of these. The handlers registered in
careerion.main render them as {"error": message} with the matching status.
"""

from typing import Any, Optional


class CareerionError(Exception):
    status_code = 500

    def __init__(self, message: str, details: Optional[Any] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict:
        body = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class ValidationError(CareerionError):
    """Malformed or missing input."""
    status_code = 400


class AuthenticationError(CareerionError):
    """Missing/invalid/expired token or bad credentials."""
    status_code = 401


class AuthorizationError(CareerionError):
    """Authenticated but not allowed."""
    status_code = 403


class NotFoundError(CareerionError):
    status_code = 404


class UpstreamServiceError(CareerionError):
    """AI gateway or Google OAuth failure."""
    status_code = 500


class ConfigurationError(CareerionError):
    """A required secret or setting is missing."""
    status_code = 500
