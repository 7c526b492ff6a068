"""
Request validation exceptions.
"""


class SecurityError(Exception):
    """Base exception for rejected inbound requests."""

    pass


class ValidationError(SecurityError):
    """Raised when a chat request fails validation."""

    def __init__(self, message: str, details: list = None):
        super().__init__(message)
        self.details = details or []
