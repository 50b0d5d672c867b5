"""
Base HTTP client for building API clients.

This module provides an abstract base class for creating async HTTP clients
using httpx. It includes support for proxies, custom headers and a cookie
jar that persists across requests, which session based APIs rely on.
"""

from abc import ABC
from typing import Any
import logging

import httpx

from .exceptions import HTTPError, ConfigurationError


logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class BaseClient(ABC):
    """
    Abstract base class for building HTTP API clients.

    This class provides a foundation for creating async HTTP clients with
    built-in support for:
    - Proxy configuration
    - Cookie retention between requests
    - Custom headers
    - Proper resource cleanup

    Unlike a typical JSON client, `_request` does not raise on HTTP status
    codes. Callers receive the raw `httpx.Response` and decide what a given
    status means. Only transport level failures are raised, as `HTTPError`
    without a status code.

    Attributes:
        BASE_URL (str): Default base URL for API requests. Should be overridden
                       by subclasses or via constructor.
        client (httpx.AsyncClient): The underlying httpx async client.

    Example:
        >>> class MyAPIClient(BaseClient):
        ...     BASE_URL = "https://api.example.com"
        ...
        ...     async def get_user(self, user_id: int):
        ...         response = await self._get(f"/users/{user_id}")
        ...         return response.json()
        ...
        >>> async with MyAPIClient(proxy="proxy.example.com:8080") as client:
        ...     user = await client.get_user(123)
    """

    BASE_URL: str = "https://api.example.com"

    def __init__(
        self,
        base_url: str | None = None,
        proxy: str | None = None,
        timeout: float = 30.0,
        user_agent: str = DEFAULT_USER_AGENT,
        **kwargs: Any,
    ):
        """
        Initialize the base client.

        Args:
            base_url: Custom base URL to override the class BASE_URL attribute.
            proxy: Proxy URL in format "host:port" or "http://host:port".
            timeout: Request timeout in seconds. Defaults to 30.0.
            user_agent: Value of the User-Agent header sent with every request.
            **kwargs: Additional arguments passed to httpx.AsyncClient.
                     Common options include:
                     - headers: Custom headers dict
                     - cookies: Initial cookies dict
                     - transport: Custom transport (e.g. httpx.MockTransport)
                     - follow_redirects: Whether to follow redirects (bool)

        Raises:
            ConfigurationError: If proxy format is invalid.
        """
        self.proxy = proxy
        self.base_url = base_url or self.BASE_URL

        if self.proxy is not None:
            try:
                proxy_url = (
                    self.proxy
                    if self.proxy.startswith("http")
                    else f"http://{self.proxy}"
                )
                kwargs["proxy"] = proxy_url
                logger.debug(f"Proxy configured: {proxy_url}")
            except Exception as e:
                raise ConfigurationError(f"Invalid proxy configuration: {e}") from e

        if "timeout" not in kwargs:
            kwargs["timeout"] = timeout
        # The start page redirects before setting its session cookies
        kwargs.setdefault("follow_redirects", True)

        default_headers = {
            "Accept": "application/json",
            "User-Agent": user_agent,
        }
        user_headers = kwargs.pop("headers", None) or {}
        headers = {**default_headers, **user_headers}

        self.client = httpx.AsyncClient(headers=headers, **kwargs)

        logger.info(f"Client initialized with base URL: {self.base_url}")

    def _url(self, endpoint: str) -> str:
        """Build an absolute URL, leaving already absolute endpoints untouched."""
        if endpoint.startswith(("http://", "https://")):
            return endpoint
        return f"{self.base_url}{endpoint}"

    async def _request(
        self,
        method: str,
        endpoint: str = "",
        params: dict[str, Any] | None = None,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
        **kwargs: Any,
    ) -> httpx.Response:
        """
        Perform an HTTP request and return the response unchecked.

        Args:
            method: HTTP method (GET, POST, ...).
            endpoint: API endpoint path (appended to the base URL) or an
                absolute URL.
            params: Query parameters for the request.
            content: Raw request body, already encoded by the caller.
            headers: Additional headers for this specific request.
            **kwargs: Additional arguments passed to httpx request method.

        Returns:
            The httpx response, whatever its status code.

        Raises:
            HTTPError: If the request could not be completed (connection,
                proxy, timeout or protocol failure).
        """
        url = self._url(endpoint)

        try:
            logger.debug(f"{method} {url}")
            response = await self.client.request(
                method,
                url,
                params=params,
                content=content,
                headers=headers,
                **kwargs,
            )
        except httpx.TimeoutException as e:
            logger.error(f"Request timeout: {e}")
            raise HTTPError(f"Request timed out: {e}") from e
        except httpx.ProxyError as e:
            logger.error(f"Proxy error: {e}")
            raise HTTPError(f"Proxy connection failed: {e}") from e
        except httpx.HTTPError as e:
            logger.error(f"Transport error: {e}")
            raise HTTPError(f"Request failed: {e}") from e

        logger.debug(f"Response status: {response.status_code}")
        return response

    async def _get(
        self,
        endpoint: str,
        params: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> httpx.Response:
        """
        Convenience method for GET requests.

        Args:
            endpoint: API endpoint path or absolute URL.
            params: Query parameters.
            **kwargs: Additional arguments for _request.

        Returns:
            The unchecked response.
        """
        return await self._request("GET", endpoint, params=params, **kwargs)

    async def _post(
        self,
        endpoint: str,
        content: bytes | None = None,
        **kwargs: Any,
    ) -> httpx.Response:
        """
        Convenience method for POST requests.

        Args:
            endpoint: API endpoint path or absolute URL.
            content: Encoded request body.
            **kwargs: Additional arguments for _request.

        Returns:
            The unchecked response.
        """
        return await self._request("POST", endpoint, content=content, **kwargs)

    async def close(self) -> None:
        """
        Close the HTTP client and release resources.

        Example:
            >>> client = MyAPIClient()
            >>> try:
            ...     await client.get_data()
            ... finally:
            ...     await client.close()
        """
        await self.client.aclose()
        logger.info("Client closed")

    async def __aenter__(self):
        """Enable use as async context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Ensure client is closed when exiting context."""
        await self.close()
