"""Login credentials and the request bodies built from them.

Every request of the login flow gets its own builder working from the
immutable `Credentials`. Only `authentication_payload` includes the password.
"""

import secrets
from dataclasses import dataclass, field
from typing import Any

DEVICE_ID_SEPARATOR = "%7C"


def generate_device_id() -> str:
    """
    Generate a random device id.

    ## Format:
    Two 32 character lowercase hex segments joined by `%7C` (an URL encoded
    `|`), the same shape the web site generates in the browser.
    """
    return f"{secrets.token_hex(16)}{DEVICE_ID_SEPARATOR}{secrets.token_hex(16)}"


@dataclass(frozen=True)
class Credentials:
    """
    Credentials for one login attempt.

    ## Attributes:
    - `username` (str): User name used to login
    - `password` (str): Password, excluded from `repr`
    - `device_id` (str): Device identity sent to the server. A device id saved
      after a previous two factor login lets the user skip two factor
      authentication.
    """

    username: str
    password: str = field(repr=False)
    device_id: str

    @classmethod
    def create(
        cls, username: str, password: str, device_id: str | None = None
    ) -> "Credentials":
        """Build credentials, generating a device id when none (or "") is given."""
        return cls(
            username=username,
            password=password,
            device_id=device_id or generate_device_id(),
        )

    def _device_fields(self, device_info: Any) -> dict[str, Any]:
        return {
            "username": self.username,
            "deviceId": self.device_id,
            "deviceInfo": device_info,
        }

    def authentication_payload(self, device_info: Any) -> dict[str, Any]:
        """Body of the credential submission."""
        return {
            "username": self.username,
            "password": self.password,
            "deviceId": self.device_id,
            "deviceInfo": device_info,
        }

    def preferences_payload(self) -> dict[str, Any]:
        """Body of the two factor preferences request."""
        return {"username": self.username}

    def code_generation_payload(
        self, device_info: Any, preference_type: str
    ) -> dict[str, Any]:
        """Body of the two factor code generation request."""
        return {**self._device_fields(device_info), "preferenceType": preference_type}

    def validation_payload(
        self, device_info: Any, one_time_pass_code: str | None
    ) -> dict[str, Any]:
        """Body of the two factor code validation request.

        The code is left out entirely when the delegate did not supply one.
        """
        payload = self._device_fields(device_info)
        if one_time_pass_code is not None:
            payload["oneTimePassCode"] = one_time_pass_code
        return payload
