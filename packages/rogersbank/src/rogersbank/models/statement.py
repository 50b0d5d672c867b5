from shared_lib.pydantic import APIBaseModel
from shared_lib.utils.date import APIDate


class Statement(APIBaseModel):
    """A monthly statement.

    Attributes:
        statement_type: e.g. monthly
        statement_id: Used to download the statement
        statement_date: Date the statement was generated
        cycle_date: Date the statement cycle ended
        card_last4: Last 4 digits of the credit card number
    """

    statement_type: str
    statement_id: str
    statement_date: APIDate
    cycle_date: APIDate
    card_last4: str


class Statements(APIBaseModel):
    monthly_statements: list[Statement]
