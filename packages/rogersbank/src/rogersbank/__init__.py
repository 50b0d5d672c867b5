from rogersbank.auth import (
    AuthenticationResult,
    AuthenticatorDelegate,
    AuthState,
    Credentials,
    RogersAuthenticator,
)
from rogersbank.client import RogersBankClient
from rogersbank.exceptions import (
    DownloadError,
    HTTPError,
    InvalidJsonError,
    InvalidParametersError,
    InvalidStatementNumberError,
    NoDataReceivedError,
    NoTwoFactorPreferenceError,
    TwoFactorCodeGenerationFailedError,
)
from rogersbank.models import (
    Account,
    Activity,
    Statement,
    TwoFactorPreference,
    User,
)

__version__ = "0.1.0"

__all__ = [
    # Login
    "RogersAuthenticator",
    "AuthenticatorDelegate",
    "AuthenticationResult",
    "AuthState",
    "Credentials",
    # Client
    "RogersBankClient",
    # Errors
    "DownloadError",
    "HTTPError",
    "InvalidJsonError",
    "InvalidParametersError",
    "InvalidStatementNumberError",
    "NoDataReceivedError",
    "NoTwoFactorPreferenceError",
    "TwoFactorCodeGenerationFailedError",
    # Models
    "Account",
    "Activity",
    "Statement",
    "TwoFactorPreference",
    "User",
]
