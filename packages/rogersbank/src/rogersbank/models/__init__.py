from rogersbank.models.account import Account, Amount, Customer
from rogersbank.models.activity import (
    Activities,
    Activity,
    ActivityCategory,
    ActivityStatus,
    ActivityType,
    Address,
    ForeignCurrency,
    Merchant,
)
from rogersbank.models.statement import Statement, Statements
from rogersbank.models.two_factor import (
    ErrorMessage,
    TwoFactorCodeGenerationResult,
    TwoFactorPreference,
    TwoFactorPreferences,
)
from rogersbank.models.user import User

__all__ = [
    "Account",
    "Activities",
    "Activity",
    "ActivityCategory",
    "ActivityStatus",
    "ActivityType",
    "Address",
    "Amount",
    "Customer",
    "ErrorMessage",
    "ForeignCurrency",
    "Merchant",
    "Statement",
    "Statements",
    "TwoFactorCodeGenerationResult",
    "TwoFactorPreference",
    "TwoFactorPreferences",
    "User",
]
