from rogersbank.auth.authenticator import CredentialAuthenticator, is_two_factor_required
from rogersbank.auth.bootstrap import SessionBootstrap
from rogersbank.auth.credentials import Credentials, generate_device_id
from rogersbank.auth.delegate import AuthenticatorDelegate
from rogersbank.auth.orchestrator import (
    AuthenticationResult,
    AuthState,
    RogersAuthenticator,
)
from rogersbank.auth.two_factor import (
    TwoFactorChallenge,
    TwoFactorNegotiator,
    TwoFactorValidator,
)

__all__ = [
    "AuthState",
    "AuthenticationResult",
    "AuthenticatorDelegate",
    "CredentialAuthenticator",
    "Credentials",
    "RogersAuthenticator",
    "SessionBootstrap",
    "TwoFactorChallenge",
    "TwoFactorNegotiator",
    "TwoFactorValidator",
    "generate_device_id",
    "is_two_factor_required",
]
