import logging
from typing import Any

import httpx
from pydantic import ValidationError

from rogersbank.auth.constants import (
    TWO_FACTOR_REQUIRED_STATUS,
    TWO_FACTOR_REQUIRED_TITLE,
    authentication_headers,
)
from rogersbank.auth.credentials import Credentials
from rogersbank.client import RogersBankClient
from rogersbank.exceptions import HTTPError
from rogersbank.models import ErrorMessage, User
from rogersbank.urls import RogersBankApiUrls

logger = logging.getLogger(__name__)


def is_two_factor_required(response: httpx.Response) -> bool:
    """
    Tell a "two factor authentication required" answer from a failed login.

    The server answers both with a 401. It asks for a second factor by
    sending an error body with status 412 and the title "Device Not Found"
    (undocumented, observed behaviour). Anything else is a plain failure.
    """
    if response.status_code != 401:
        return False
    try:
        error = ErrorMessage.model_validate_json(response.content)
    except ValidationError:
        return False
    return (
        error.status == TWO_FACTOR_REQUIRED_STATUS
        and error.title == TWO_FACTOR_REQUIRED_TITLE
    )


class CredentialAuthenticator:
    """Submit username, password and device identity."""

    def __init__(
        self,
        client: RogersBankClient,
        device_info: Any,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.client = client
        self.device_info = device_info
        self.headers = headers or authentication_headers()

    async def authenticate(self, credentials: Credentials) -> User | None:
        """
        Log in with the credentials.

        Returns:
            The user when the device is known to the server, None when the
            server requires two factor authentication.

        Raises:
            InvalidParametersError: If the request body cannot be encoded.
            HTTPError: On transport failure or an unexpected status.
            NoDataReceivedError, InvalidJsonError: On a bad 200 response.
        """
        logger.info(f"Submitting credentials for {credentials.username}")
        response = await self.client.send(
            "POST",
            RogersBankApiUrls.AUTHENTICATE,
            headers=self.headers,
            payload=credentials.authentication_payload(self.device_info),
        )

        if response.status_code == 200:
            return self.client.decode(User, self.client.ensure_success(response))

        if is_two_factor_required(response):
            logger.warning("Device not recognized, two factor authentication required")
            return None

        logger.error(f"Authentication failed with status {response.status_code}")
        raise HTTPError.from_status(response.status_code, response.content)
