"""The human in the loop of a two factor login."""

import inspect
from typing import Awaitable, Protocol, TypeVar, runtime_checkable

from rogersbank.models import TwoFactorPreference

T = TypeVar("T")


@runtime_checkable
class AuthenticatorDelegate(Protocol):
    """
    Callbacks used by `RogersAuthenticator` during two factor authentication.

    Each method may be a plain function or a coroutine function. They may
    block or await user input for as long as needed; the authenticator does
    not apply a timeout.

    ## Example:
    ```python
    class ConsoleDelegate:
        def select_two_factor_preference(self, preferences):
            return preferences[0]

        def get_two_factor_code(self):
            return input("Code: ")

        def save_device_id(self, device_id):
            Path("device_id").write_text(device_id)
    ```
    """

    def select_two_factor_preference(
        self, preferences: list[TwoFactorPreference]
    ) -> TwoFactorPreference | None | Awaitable[TwoFactorPreference | None]:
        """Pick how to receive the code (e.g. email or text) from `preferences`."""
        ...

    def get_two_factor_code(self) -> str | None | Awaitable[str | None]:
        """Return the code the user received."""
        ...

    def save_device_id(self, device_id: str) -> None | Awaitable[None]:
        """
        Persist the device id of a successful two factor login.

        Passing it to the next `login` call may let the user skip entering a
        two factor code again.
        """
        ...


async def resolve(value: T | Awaitable[T]) -> T:
    """Await `value` if a delegate returned an awaitable, otherwise return it."""
    if inspect.isawaitable(value):
        return await value
    return value
