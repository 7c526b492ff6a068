"""
Inbound request validation for the REST layer.
"""

from .exceptions import SecurityError, ValidationError
from .request_schema import ChatRequest, parse_chat_request

__all__ = [
    "SecurityError",
    "ValidationError",
    "ChatRequest",
    "parse_chat_request",
]
