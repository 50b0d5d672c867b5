"""Credit card activity models (transactions, authorizations, payments)."""

from enum import Enum
from typing import Any

from pydantic import field_validator

from shared_lib.pydantic import APIBaseModel
from shared_lib.utils.date import APIDate

from rogersbank.models.account import Amount


class ActivityType(str, Enum):
    """Type of a credit card activity."""

    TRANSACTION = "TRANS"  # posted
    AUTHORIZATION = "AUTH"  # pre authorization, not posted yet


class ActivityStatus(str, Enum):
    APPROVED = "APPROVED"
    PENDING = "PENDING"


class ActivityCategory(str, Enum):
    """Category of a credit card activity.

    The server is inconsistent about casing ("PURCHASE", "Token Auth Request",
    "token AUTH Request"), so values are matched case-insensitively.
    """

    PURCHASE = "purchase"
    PAYMENT = "payment"
    TOKEN_AUTH_REQUEST = "token auth request"
    MAIL_OR_PHONE_ORDER = "mail or phone order"
    OVERLIMIT_FEE = "overlimit fee"
    MERCHANT_RETURN = "merchant return"


class Address(APIBaseModel):
    """Merchant address. For online merchants `city` is often not a city."""

    city: str
    state_province: str | None = None
    postal_code: str | None = None
    country_code: str


class Merchant(APIBaseModel):
    """Merchant of an activity.

    Attributes:
        category_code: 4 digit merchant category code from the payment network
        category: Broad category name, used for the icons on the site
    """

    name: str
    category_code: str | None = None
    category_description: str | None = None
    category: str
    address: Address | None = None


class ForeignCurrency(APIBaseModel):
    """Details of a transaction made in a foreign currency.

    Attributes:
        exchange_fee: Fee paid for the conversion
        conversion_markup_rate: Conversion rate including the exchange fee
        conversion_rate: Official conversion rate
        original_amount: Amount in the foreign currency
    """

    exchange_fee: Amount | None = None
    conversion_markup_rate: float | None = None
    conversion_rate: float | None = None
    original_amount: Amount


class Activity(APIBaseModel):
    """An activity on the credit card, like an authorization, transaction or payment.

    Attributes:
        reference_number: Reference number of posted transactions
        amount: Amount charged, in the account currency. See `foreign` for
            the original amount of foreign currency transactions.
        card_number: Card number with all but the last 4 digits masked
        customer_id: See `Customer.customer_id`
        posted_date: Posting date of posted transactions
        activity_id: ID of pending transactions
    """

    reference_number: str | None = None
    activity_type: ActivityType
    amount: Amount
    activity_status: ActivityStatus
    activity_category: ActivityCategory
    activity_classification: str
    card_number: str
    merchant: Merchant
    foreign: ForeignCurrency | None = None
    date: APIDate
    activity_category_code: str | None = None
    customer_id: str
    posted_date: APIDate | None = None
    activity_id: str | None = None

    @field_validator("activity_category", mode="before")
    @classmethod
    def normalize_category(cls, v: Any) -> Any:
        """Match categories regardless of the casing the server used."""
        if isinstance(v, str):
            return v.lower()
        return v


class Activities(APIBaseModel):
    activities: list[Activity] | None = None
