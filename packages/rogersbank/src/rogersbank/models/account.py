"""Credit card account models."""

from shared_lib.pydantic import APIBaseModel
from shared_lib.utils.date import APIDate


class Amount(APIBaseModel):
    """An amount of money.

    Attributes:
        value: Numeric value as sent by the server, e.g. "13.55"
        currency: ISO currency code
    """

    value: str
    currency: str


class Customer(APIBaseModel):
    """Customer of the bank (card holder)."""

    customer_id: str
    card_last4: str
    customer_type: str
    first_name: str
    last_name: str


class Account(APIBaseModel):
    """A credit card account.

    Attributes:
        account_id: Internal ID, used to address the account endpoints
        account_type: e.g. Personal
        payment_status: e.g. Paid
        product_name: e.g. World Elite
        brand_id: e.g. ROGERSBRAND
        cycle_dates: Past statement dates, most recent first
        purchases_since_last_cycle: Amount charged since the last statement,
            missing when nothing was charged
        realtime_balance: Remaining credit
    """

    customer: Customer
    account_id: str
    account_type: str
    payment_status: str
    product_name: str
    product_external_code: str
    account_currency: str
    brand_id: str
    opened_date: APIDate
    previous_statement_date: APIDate
    payment_due_date: APIDate
    last_payment_date: APIDate
    cycle_dates: list[APIDate]
    current_balance: Amount
    statement_balance: Amount
    statement_due_amount: Amount
    credit_limit: Amount
    purchases_since_last_cycle: Amount | None = None
    last_payment: Amount
    realtime_balance: Amount
    cash_available: Amount
    cash_limit: Amount
    multi_card: bool
