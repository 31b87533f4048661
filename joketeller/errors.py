"""Exception types raised by joketeller.

Callers can catch ``JokeError`` for everything, or one of the four
subclasses to tell the failure kinds apart.
"""
from __future__ import annotations

from typing import List, Optional, Sequence


class JokeError(Exception):
    """Base class for all joketeller failures."""


class ValidationError(JokeError, ValueError):
    """Raised when selected options cannot be turned into a valid request."""


class TransportError(JokeError):
    """Raised when the HTTP request could not be performed at all."""


class ParseError(JokeError):
    """Raised when a response body matches neither the joke nor the error schema."""


class ApiFailure(JokeError):
    """The API answered with its own error envelope (``"error": true``)."""

    def __init__(
        self,
        code: int,
        message: str,
        caused_by: Optional[Sequence[str]] = None,
        additional_info: Optional[str] = None,
        internal_error: bool = False,
    ) -> None:
        self.code = code
        self.message = message
        self.caused_by: List[str] = list(caused_by or [])
        self.additional_info = additional_info
        self.internal_error = internal_error
        super().__init__(f"JokeAPI error {code}: {message}")
