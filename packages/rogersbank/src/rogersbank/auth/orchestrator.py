"""
# Rogers Bank login

`RogersAuthenticator.login` runs the complete login state machine and
returns one `AuthenticationResult`:

```
START -> BOOTSTRAPPED -> CREDENTIALS_SUBMITTED -> AUTHENTICATED
                                              \\-> TWO_FACTOR_PENDING
                                                  -> TWO_FACTOR_PREFERENCE_CHOSEN
                                                  -> TWO_FACTOR_CODE_SENT
                                                  -> AUTHENTICATED
any step -> FAILED
```

Steps run strictly one after the other and none is retried. The
intermediate states only live for the duration of one `login` call.

## Example:
```python
async with RogersAuthenticator(delegate=MyDelegate()) as authenticator:
    result = await authenticator.login("alice", "secret", device_id=saved_id)
    if result.authenticated:
        accounts = result.user.accounts
    else:
        print(result.error)
```
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from shared_lib.client_context import ClientContext

from rogersbank.auth.authenticator import CredentialAuthenticator
from rogersbank.auth.bootstrap import SessionBootstrap
from rogersbank.auth.constants import (
    DEFAULT_BRAND_ID,
    DEFAULT_DEVICE_INFO,
    authentication_headers,
)
from rogersbank.auth.credentials import Credentials
from rogersbank.auth.delegate import AuthenticatorDelegate
from rogersbank.auth.two_factor import TwoFactorNegotiator, TwoFactorValidator
from rogersbank.client import RogersBankClient
from rogersbank.exceptions import DownloadError
from rogersbank.models import User

logger = logging.getLogger(__name__)


class AuthState(Enum):
    START = auto()
    BOOTSTRAPPED = auto()
    CREDENTIALS_SUBMITTED = auto()
    TWO_FACTOR_PENDING = auto()
    TWO_FACTOR_PREFERENCE_CHOSEN = auto()
    TWO_FACTOR_CODE_SENT = auto()
    AUTHENTICATED = auto()
    FAILED = auto()


@dataclass(frozen=True)
class AuthenticationResult:
    """
    Outcome of a login attempt: either `user` or `error` is set.

    ## Attributes:
    - `user` (User | None): The authenticated user
    - `error` (DownloadError | None): Why the attempt failed
    - `used_two_factor` (bool): Whether the login went through two factor
      authentication
    """

    user: User | None = None
    error: DownloadError | None = None
    used_two_factor: bool = False

    @property
    def authenticated(self) -> bool:
        return self.user is not None

    @property
    def state(self) -> AuthState:
        return AuthState.AUTHENTICATED if self.authenticated else AuthState.FAILED

    def unwrap(self) -> User:
        """Return the user, or raise the error of a failed attempt."""
        if self.user is None:
            raise self.error or DownloadError("Login did not complete")
        return self.user


class _LoginAttempt:
    """State of one `login` call."""

    def __init__(self, credentials: Credentials) -> None:
        self.credentials = credentials
        self.state = AuthState.START
        self.used_two_factor = False

    def transition(self, state: AuthState) -> None:
        logger.info(f"Login state {self.state.name} -> {state.name}")
        self.state = state


class RogersAuthenticator:
    """
    Log in to Rogers Bank, with two factor authentication when required.

    ## Args:
    - `delegate` (AuthenticatorDelegate | None): Selects the two factor
      channel, supplies the code and saves the device id. Without one, a
      login that needs two factor authentication fails with
      `NoTwoFactorPreferenceError`.
    - `client` (RogersBankClient | None): Client to log in with. Its cookies
      carry the session, so use the same client for downloads afterwards.
      Created from `context` when omitted and then closed by `close()`.
    - `context` (ClientContext | None): Connection settings for a new client.
    - `device_info` (Any): Browser fingerprint sent with the device id.
    - `brand_id` (str): Value of the `Brand_id` header.

    ## Concurrency:
    A login attempt keeps its credentials and two factor state to itself,
    but all attempts share the client's cookie jar. Run concurrent logins
    through separate authenticators.
    """

    def __init__(
        self,
        delegate: AuthenticatorDelegate | None = None,
        client: RogersBankClient | None = None,
        context: ClientContext | None = None,
        device_info: Any = DEFAULT_DEVICE_INFO,
        brand_id: str = DEFAULT_BRAND_ID,
    ) -> None:
        self.delegate = delegate
        self._owns_client = client is None
        self.client = client if client is not None else RogersBankClient(context=context)
        self.device_info = device_info

        headers = authentication_headers(brand_id)
        self.bootstrap = SessionBootstrap(self.client)
        self.credential_authenticator = CredentialAuthenticator(
            self.client, device_info, headers=headers
        )
        self.negotiator = TwoFactorNegotiator(self.client, device_info)
        self.validator = TwoFactorValidator(self.client, device_info, headers=headers)

    async def login(
        self, username: str, password: str, device_id: str | None = None
    ) -> AuthenticationResult:
        """
        Log in and load the user.

        ## Args:
        - `username`, `password`: Online banking credentials
        - `device_id`: Device id saved by the delegate after an earlier two
          factor login. A new random one is generated when None or empty.

        ## Returns:
        - `AuthenticationResult` holding the `User` or the `DownloadError`.
          Errors of the login flow are never raised. Exceptions raised by the
          delegate itself propagate unchanged.
        """
        attempt = _LoginAttempt(Credentials.create(username, password, device_id))
        self.client.client.cookies.clear()

        try:
            user = await self._run(attempt)
        except DownloadError as e:
            logger.error(
                f"Login for {username} failed in state {attempt.state.name}: "
                f"{type(e).__name__}: {e}"
            )
            attempt.transition(AuthState.FAILED)
            return AuthenticationResult(error=e, used_two_factor=attempt.used_two_factor)

        attempt.transition(AuthState.AUTHENTICATED)
        logger.info(f"Logged in as {user.user_name} with {len(user.accounts)} accounts")
        return AuthenticationResult(user=user, used_two_factor=attempt.used_two_factor)

    async def _run(self, attempt: _LoginAttempt) -> User:
        credentials = attempt.credentials

        await self.bootstrap.start()
        attempt.transition(AuthState.BOOTSTRAPPED)

        user = await self.credential_authenticator.authenticate(credentials)
        attempt.transition(AuthState.CREDENTIALS_SUBMITTED)
        if user is not None:
            return user

        attempt.used_two_factor = True
        attempt.transition(AuthState.TWO_FACTOR_PENDING)

        preferences = await self.negotiator.fetch_preferences(credentials)
        preference = await self.negotiator.select_preference(preferences, self.delegate)
        attempt.transition(AuthState.TWO_FACTOR_PREFERENCE_CHOSEN)

        challenge = await self.negotiator.generate_code(credentials, preferences, preference)
        attempt.transition(AuthState.TWO_FACTOR_CODE_SENT)

        # select_preference guarantees a delegate at this point
        return await self.validator.validate(credentials, self.delegate, challenge)

    async def close(self) -> None:
        """Close the client if this authenticator created it."""
        if self._owns_client:
            await self.client.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
