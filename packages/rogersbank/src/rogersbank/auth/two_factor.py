"""Two factor authentication: choosing a channel, sending and checking the code."""

import logging
from dataclasses import dataclass
from typing import Any

from rogersbank.auth.constants import JSON_HEADERS, authentication_headers
from rogersbank.auth.credentials import Credentials
from rogersbank.auth.delegate import AuthenticatorDelegate, resolve
from rogersbank.client import RogersBankClient
from rogersbank.exceptions import (
    NoTwoFactorPreferenceError,
    TwoFactorCodeGenerationFailedError,
)
from rogersbank.models import (
    TwoFactorCodeGenerationResult,
    TwoFactorPreference,
    TwoFactorPreferences,
    User,
)
from rogersbank.urls import RogersBankApiUrls

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TwoFactorChallenge:
    """State of one two factor exchange, from code generation to validation."""

    account_id: str
    customer_id: str
    preference: TwoFactorPreference


class TwoFactorNegotiator:
    """Fetch the two factor preferences, let the delegate pick one and send a code."""

    def __init__(
        self,
        client: RogersBankClient,
        device_info: Any,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.client = client
        self.device_info = device_info
        self.headers = headers or dict(JSON_HEADERS)

    async def fetch_preferences(self, credentials: Credentials) -> TwoFactorPreferences:
        return await self.client.fetch(
            "POST",
            RogersBankApiUrls.TWO_FACTOR_PREFERENCES,
            TwoFactorPreferences,
            headers=self.headers,
            payload=credentials.preferences_payload(),
        )

    async def select_preference(
        self,
        preferences: TwoFactorPreferences,
        delegate: AuthenticatorDelegate | None,
    ) -> TwoFactorPreference:
        """
        Ask the delegate which channel to use.

        Raises:
            NoTwoFactorPreferenceError: Without a delegate, or when the
                delegate does not choose.
        """
        if delegate is None:
            logger.error("Two factor authentication required but no delegate is set")
            raise NoTwoFactorPreferenceError()
        preference = await resolve(
            delegate.select_two_factor_preference(list(preferences.preferences))
        )
        if preference is None:
            logger.error("Delegate did not select a two factor preference")
            raise NoTwoFactorPreferenceError()
        return preference

    async def generate_code(
        self,
        credentials: Credentials,
        preferences: TwoFactorPreferences,
        preference: TwoFactorPreference,
    ) -> TwoFactorChallenge:
        """
        Ask the server to send a code through the selected channel.

        Raises:
            TwoFactorCodeGenerationFailedError: If the server reports failure.
        """
        challenge = TwoFactorChallenge(
            account_id=preferences.account_id,
            customer_id=preferences.customer_id,
            preference=preference,
        )
        endpoint = RogersBankApiUrls.GENERATE_TWO_FACTOR_CODE.format(
            account_id=challenge.account_id, customer_id=challenge.customer_id
        )
        result = await self.client.fetch(
            "POST",
            endpoint,
            TwoFactorCodeGenerationResult,
            headers=self.headers,
            payload=credentials.code_generation_payload(
                self.device_info, preference.channel_type
            ),
        )
        if not result.success:
            logger.error(f"Server failed to send a code by {preference.channel_type}")
            raise TwoFactorCodeGenerationFailedError()

        logger.info(f"Two factor code sent by {preference.channel_type}")
        return challenge


class TwoFactorValidator:
    """Submit the code the user received and finish the login."""

    def __init__(
        self,
        client: RogersBankClient,
        device_info: Any,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.client = client
        self.device_info = device_info
        self.headers = headers or authentication_headers()

    async def validate(
        self,
        credentials: Credentials,
        delegate: AuthenticatorDelegate,
        challenge: TwoFactorChallenge,
    ) -> User:
        """
        Validate the code and save the device id.

        The device id is handed to the delegate only once the user has been
        decoded. A wrong code is answered with a non-200 status (404 has been
        observed) and is not retried.

        Raises:
            HTTPError: On transport failure or a non-200 status.
            NoDataReceivedError, InvalidJsonError: On a bad 200 response.
        """
        code = await resolve(delegate.get_two_factor_code())
        logger.debug(
            f"Validating two factor code for customer {challenge.customer_id}"
        )
        user = await self.client.fetch(
            "POST",
            RogersBankApiUrls.VALIDATE_TWO_FACTOR_CODE,
            User,
            headers=self.headers,
            payload=credentials.validation_payload(self.device_info, code),
        )
        await resolve(delegate.save_device_id(credentials.device_id))
        return user
