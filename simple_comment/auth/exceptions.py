"""Exceptions."""

from datetime import datetime


class AuthenticationError(RuntimeError):
    """Base for failures to establish who is making a request."""


class InvalidToken(AuthenticationError):
    """Token could not be decoded, or its signature does not verify."""


class ExpiredToken(AuthenticationError):
    """Token signature is valid, but the token has expired."""

    def __init__(self, message: str, expired_at: datetime) -> None:
        super().__init__(message)
        self.expired_at = expired_at


class ConfigurationError(AuthenticationError):
    """No secret is configured with which to verify tokens."""
