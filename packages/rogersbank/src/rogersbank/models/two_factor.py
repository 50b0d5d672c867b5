"""Wire models exchanged during login and two factor authentication."""

from pydantic import Field, StrictBool, StrictInt

from shared_lib.pydantic import APIBaseModel


class ErrorMessage(APIBaseModel):
    """Structured error body returned with some non-200 responses."""

    title: str
    status: StrictInt
    detail: str = ""


class TwoFactorPreference(APIBaseModel):
    """A way to receive a two factor code, e.g. email or text message.

    Attributes:
        channel_type: Kind of channel as named by the server ("email", "sms", ...)
        destination: Masked email address or phone number the code goes to
    """

    channel_type: str = Field(alias="type")
    destination: str = Field(alias="value")


class TwoFactorPreferences(APIBaseModel):
    """Response of the two factor preferences endpoint."""

    preferences: list[TwoFactorPreference]
    card_last4: str
    account_id: str
    customer_id: str
    product_name: str
    product_external_code: str


class TwoFactorCodeGenerationResult(APIBaseModel):
    success: StrictBool
