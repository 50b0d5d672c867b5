"""
Base HTTP client for building API clients.

This package provides a base class for creating async HTTP clients with
built-in support for proxies, cookie retention and error handling.
"""

from .client import BaseClient as Client
from .exceptions import ClientError, ConfigurationError, HTTPError

__version__ = "0.1.0"
__all__ = [
    "Client",
    "ClientError",
    "ConfigurationError",
    "HTTPError",
]
