"""HTTP client for the Rogers Bank online banking API.

`RogersBankClient` owns the httpx session (and therefore the cookies set
during login) and implements the response handling shared by every
endpoint: JSON encoding of request bodies, status code checks and decoding
into pydantic models. After a successful login the same client is used to
download statements and activities.
"""

import json
import logging
import tempfile
from pathlib import Path
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from shared_lib.baseclient import Client
from shared_lib.baseclient.exceptions import HTTPError as BaseHTTPError
from shared_lib.client_context import ClientContext
from shared_lib.utils.date import format_api_date

from rogersbank.exceptions import (
    HTTPError,
    InvalidJsonError,
    InvalidParametersError,
    InvalidStatementNumberError,
    NoDataReceivedError,
)
from rogersbank.models import Account, Activities, Activity, Statement, Statements
from rogersbank.urls import RogersBankApiUrls, RogersBankBaseUrls

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

# Keys never echoed back in error messages or logs
SENSITIVE_KEYS = frozenset({"password", "oneTimePassCode", "deviceId"})


def redact(payload: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of `payload` with sensitive values masked."""
    return {
        key: ("***" if key in SENSITIVE_KEYS else value)
        for key, value in payload.items()
    }


class RogersBankClient(Client):
    """Client for `rbaccess.rogersbank.com`.

    Attributes:
        BASE_URL: Root of the online banking site
        ACTIVITY_RETRIES: Additional attempts made when the activity endpoint
            answers with a non-200 status

    Example:
        >>> async with RogersBankClient() as client:
        ...     authenticator = RogersAuthenticator(client=client, delegate=delegate)
        ...     user = (await authenticator.login("alice", "secret")).unwrap()
        ...     activities = await client.download_activities(user.accounts[0], 0)
    """

    BASE_URL = RogersBankBaseUrls.BASE_URL
    ACTIVITY_RETRIES = 2

    def __init__(
        self,
        base_url: str | None = None,
        context: ClientContext | None = None,
        **kwargs: Any,
    ):
        """Initialize the client.

        Args:
            base_url: Overrides `BASE_URL`, mostly useful for tests.
            context: Shared connection settings (proxy, timeout, ...).
            **kwargs: Passed to `BaseClient`, taking precedence over `context`.
        """
        if context is not None:
            kwargs = {**context.client_kwargs(), **kwargs}
            logging.getLogger("rogersbank").setLevel(context.log_level)
        super().__init__(base_url=base_url, **kwargs)

    # ------------------------------------------------------------------ #
    # Shared response handling
    # ------------------------------------------------------------------ #

    @staticmethod
    def encode(payload: dict[str, Any]) -> bytes:
        """Encode a request body as JSON.

        Raises:
            InvalidParametersError: If the payload is not JSON serializable.
        """
        try:
            return json.dumps(payload).encode("utf-8")
        except (TypeError, ValueError) as e:
            logger.error(f"Could not encode request body: {e}")
            raise InvalidParametersError(redact(payload)) from e

    async def send(
        self,
        method: str,
        endpoint: str,
        headers: dict[str, str] | None = None,
        payload: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Send a request and return the response without checking its status.

        Raises:
            InvalidParametersError: If `payload` cannot be encoded.
            HTTPError: On transport failure (no status code).
        """
        content = self.encode(payload) if payload is not None else None
        try:
            if method == "GET" and content is None:
                return await self._get(endpoint, params=params, headers=headers)
            if method == "POST":
                return await self._post(
                    endpoint, content=content, params=params, headers=headers
                )
            return await self._request(
                method, endpoint, params=params, content=content, headers=headers
            )
        except BaseHTTPError as e:
            raise HTTPError(e.message) from e

    @staticmethod
    def ensure_success(response: httpx.Response) -> bytes:
        """Return the body of a 200 response.

        Raises:
            HTTPError: For any status other than 200, carrying the status code.
            NoDataReceivedError: For a 200 without a body.
        """
        if response.status_code != 200:
            logger.debug(f"Unexpected status {response.status_code}")
            raise HTTPError.from_status(response.status_code, response.content)
        if not response.content:
            raise NoDataReceivedError()
        return response.content

    @staticmethod
    def decode(model: type[ModelT], body: bytes) -> ModelT:
        """Decode a JSON body into `model`.

        Raises:
            InvalidJsonError: If the body is not JSON or does not match `model`.
        """
        try:
            return model.model_validate_json(body)
        except ValidationError as e:
            logger.error(f"Could not decode {model.__name__}: {e}")
            raise InvalidJsonError(str(e)) from e

    async def fetch(
        self,
        method: str,
        endpoint: str,
        model: type[ModelT],
        headers: dict[str, str] | None = None,
        payload: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> ModelT:
        """Send a request, require a 200 and decode the body into `model`."""
        response = await self.send(method, endpoint, headers, payload, params)
        return self.decode(model, self.ensure_success(response))

    # ------------------------------------------------------------------ #
    # Data retrieval
    # ------------------------------------------------------------------ #

    @staticmethod
    def _account_path(template: str, account: Account, **kwargs: str) -> str:
        return template.format(
            account_id=account.account_id,
            customer_id=account.customer.customer_id,
            **kwargs,
        )

    async def search_statements(self, account: Account) -> list[Statement]:
        """List the statements available for an account.

        Raises:
            HTTPError, NoDataReceivedError, InvalidJsonError
        """
        endpoint = self._account_path(RogersBankApiUrls.STATEMENT_SEARCH, account)
        statements = await self.fetch("GET", endpoint, Statements)
        logger.info(
            f"Found {len(statements.monthly_statements)} statements for account "
            f"ending in {account.customer.card_last4}"
        )
        return statements.monthly_statements

    async def download_statement(
        self,
        account: Account,
        statement: Statement,
        destination: str | Path | None = None,
    ) -> Path:
        """Download a statement document.

        Args:
            account: Account the statement belongs to.
            statement: Statement to download, see `search_statements`.
            destination: File to write. A temporary `.pdf` file is created
                when omitted; the caller owns (and should delete) it.

        Returns:
            Path of the written file.
        """
        endpoint = self._account_path(
            RogersBankApiUrls.STATEMENT_VIEW,
            account,
            statement_id=statement.statement_id,
        )
        body = self.ensure_success(await self.send("GET", endpoint))

        if destination is None:
            with tempfile.NamedTemporaryFile(
                prefix=f"statement-{format_api_date(statement.statement_date)}-",
                suffix=".pdf",
                delete=False,
            ) as f:
                f.write(body)
            path = Path(f.name)
        else:
            path = Path(destination)
            path.write_bytes(body)

        logger.info(f"Statement {statement.statement_id} saved to {path}")
        return path

    async def download_activities(
        self, account: Account, statement_number: int
    ) -> list[Activity]:
        """Download the activities of one statement period.

        Args:
            account: Account to download from.
            statement_number: 0 for the current period, 1 for the last
                statement, 2 for the one before, ... up to
                `len(account.cycle_dates)`.

        Raises:
            InvalidStatementNumberError: If `statement_number` is out of range.
            HTTPError: If the endpoint keeps answering with a non-200 status
                after `ACTIVITY_RETRIES` additional attempts, or on transport
                failure (not retried).
        """
        if statement_number < 0 or statement_number > len(account.cycle_dates):
            raise InvalidStatementNumberError(statement_number)

        params = None
        if statement_number > 0:
            cycle_start = account.cycle_dates[statement_number - 1]
            params = {"cycleStartDate": format_api_date(cycle_start)}
        endpoint = self._account_path(RogersBankApiUrls.ACTIVITY, account)

        for attempt in range(self.ACTIVITY_RETRIES + 1):
            response = await self.send("GET", endpoint, params=params)
            if response.status_code == 200:
                break
            logger.warning(
                f"Activity download returned {response.status_code} "
                f"(attempt {attempt + 1} of {self.ACTIVITY_RETRIES + 1})"
            )

        activities = self.decode(Activities, self.ensure_success(response))
        return list(activities.activities or [])
