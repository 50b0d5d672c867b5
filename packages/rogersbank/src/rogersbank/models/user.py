from shared_lib.pydantic import APIBaseModel

from rogersbank.models.account import Account


class User(APIBaseModel):
    """An online banking user, as returned by a successful login.

    Attributes:
        user_name: User name used to login
        authenticated: Whether the server considers the session authenticated
        accounts: Credit card accounts the user has access to
    """

    user_name: str
    authenticated: bool
    accounts: list[Account] = []
