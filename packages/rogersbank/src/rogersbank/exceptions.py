"""Errors raised while logging in to or downloading from Rogers Bank.

Every failure of the login flow is one of the classes below. The
authenticator catches them and reports them through `AuthenticationResult`,
the data retrieval methods of `RogersBankClient` raise them directly.
"""

from typing import Any

from shared_lib.baseclient.exceptions import ClientError
from shared_lib.baseclient.exceptions import HTTPError as BaseHTTPError


class DownloadError(ClientError):
    """Base exception for all Rogers Bank errors.

    Example:
        >>> try:
        ...     user = result.unwrap()
        ... except DownloadError as e:
        ...     print(f"Login failed: {e}")
    """

    pass


class InvalidJsonError(DownloadError):
    """The server response could not be decoded into the expected shape."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"The server response contained invalid JSON: {detail}")
        self.detail = detail


class InvalidParametersError(DownloadError):
    """A request body could not be encoded as JSON.

    Attributes:
        parameters: The payload that failed to encode, with any password masked.
    """

    def __init__(self, parameters: dict[str, Any]) -> None:
        super().__init__(
            f"The given parameters could not be converted to JSON: {parameters!r}"
        )
        self.parameters = parameters


class HTTPError(DownloadError, BaseHTTPError):
    """An HTTP error occurred.

    Raised for transport failures (no `status_code`) and for unexpected
    status codes (`status_code` set).
    """

    def __init__(
        self,
        detail: str,
        status_code: int | None = None,
        response_body: bytes | None = None,
    ) -> None:
        BaseHTTPError.__init__(
            self,
            f"An HTTP error occurred: {detail}",
            status_code=status_code,
            response_body=response_body,
        )
        self.detail = detail

    @classmethod
    def from_status(cls, status_code: int, response_body: bytes | None = None) -> "HTTPError":
        return cls(
            f"Status code {status_code}",
            status_code=status_code,
            response_body=response_body,
        )


class NoDataReceivedError(DownloadError):
    """The server answered without a body."""

    def __init__(self) -> None:
        super().__init__("No data was received from the server")


class NoTwoFactorPreferenceError(DownloadError):
    """Two factor authentication is required but no preference was selected."""

    def __init__(self) -> None:
        super().__init__(
            "Two factor authentication is required but no preference was selected"
        )


class TwoFactorCodeGenerationFailedError(DownloadError):
    """The server refused to send a two factor code."""

    def __init__(self) -> None:
        super().__init__("The server failed to generate a two factor code")


class InvalidStatementNumberError(DownloadError):
    """Activities were requested for a statement that does not exist."""

    def __init__(self, number: int) -> None:
        super().__init__(f"{number} is not a valid statement number to download")
        self.number = number
