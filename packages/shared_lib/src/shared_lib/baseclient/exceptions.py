"""
Custom exceptions for the shared base client.

This module provides the root of the exception hierarchy used by every
client that inherits from BaseClient.
"""


class ClientError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str, *args, **kwargs):
        super().__init__(message, *args)
        self.message = message
        self.details = kwargs


class HTTPError(ClientError):
    """Raised when an HTTP request fails."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: bytes | None = None,
    ):
        super().__init__(message, status_code=status_code, response_body=response_body)
        self.status_code = status_code
        self.response_body = response_body


class ConfigurationError(ClientError):
    """Raised when there's an issue with client configuration."""

    pass
