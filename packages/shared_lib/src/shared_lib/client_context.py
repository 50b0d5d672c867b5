"""
Client Context - Shared configuration for clients.

Provides a single configuration object holding the connection settings
that every HTTP client built on `BaseClient` accepts.
"""

import logging
from typing import Any


class ClientContext:
    """
    Context object holding shared configuration for clients.

    ## Parameters:
    - `proxy` (str | None): Proxy as "host:port" or a full URL.
        - Default: `None` (direct connection)
    - `timeout` (float): Transport timeout in seconds for each request.
        - Default: `30.0`
    - `user_agent` (str | None): Overrides the default User-Agent header.
    - `log_level` (int): Level applied to the client's package logger.
        - Default: `logging.INFO`
    - `http_options` (dict | None): Extra keyword arguments forwarded to
      `httpx.AsyncClient`, e.g. `{"transport": httpx.MockTransport(handler)}`.

    ## Example:
    ```python
    context = ClientContext(proxy="127.0.0.1:8080", timeout=60.0)
    client = RogersBankClient(context=context)
    ```
    """

    def __init__(
        self,
        proxy: str | None = None,
        timeout: float = 30.0,
        user_agent: str | None = None,
        log_level: int = logging.INFO,
        http_options: dict[str, Any] | None = None,
    ) -> None:
        self.proxy = proxy
        self.timeout = timeout
        self.user_agent = user_agent
        self.log_level = log_level
        self.http_options = dict(http_options or {})

    def client_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for a `BaseClient` constructor."""
        kwargs: dict[str, Any] = {
            "proxy": self.proxy,
            "timeout": self.timeout,
            **self.http_options,
        }
        if self.user_agent is not None:
            kwargs["user_agent"] = self.user_agent
        return kwargs
